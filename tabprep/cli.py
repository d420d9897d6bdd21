"""
tabprep: Tabular data preparation for learning tasks

CLI interface for preparing a dataset and inspecting saved task bundles.

Usage:
    tabprep prepare <dataset.csv> -r <regression target> -c <classification target> [OPTIONS]
    tabprep info <tasks.pkl>
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tabprep import (
    Pipeline,
    PipelineConfig,
    ProgressUpdate,
    TabPrepError,
    load_bundle,
    save_bundle,
)


def _split_names(value: str | None) -> list[str]:
    """Parse a comma-separated list of column names."""
    if not value:
        return []
    return [name.strip() for name in value.split(",") if name.strip()]


def cmd_prepare(args: argparse.Namespace) -> int:
    """Prepare a dataset and save its tasks."""
    dataset_path = Path(args.input)

    if not args.regression_target and not args.classification_target:
        print("Error: at least one of --regression-target or --classification-target is required")
        return 1

    def on_progress(update: ProgressUpdate) -> None:
        pct = f"{update.progress * 100:5.1f}%"
        if args.verbose:
            print(f"[{pct}] {update.stage.value}: {update.message}")

    builder = (
        PipelineConfig.builder()
        .categorical_columns(_split_names(args.categorical))
        .impute_strategy(args.strategy)
        .indicator_prefix(args.indicator_prefix)
        .train_fraction(args.train_fraction)
        .random_seed(args.seed)
    )
    if args.regression_target:
        builder = builder.regression_target(args.regression_target)
    if args.classification_target:
        builder = builder.classification_target(args.classification_target)
    if args.impute:
        builder = builder.impute_columns(_split_names(args.impute))

    try:
        config = builder.build()
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    pipeline = Pipeline.builder().config(config).on_progress(on_progress).build()

    print(f"Preparing {dataset_path}...")
    try:
        result = pipeline.run_file(
            dataset_path,
            sep=args.sep,
            na_values=_split_names(args.na_values) + [""],
        )
    except TabPrepError as e:
        print(f"Error: {e}")
        return 1

    print("-" * 60)
    print(f"Rows:       {len(result.data)}")
    print(f"Columns:    {len(result.data.columns)}")
    print(f"Imputed:    {', '.join(result.imputed_columns) or '-'}")
    print(f"Encoded:    {', '.join(result.encoded_columns) or '-'}")
    for warning in result.warnings:
        print(f"Warning:    {warning}")

    print(f"\nTasks ({len(result.tasks)}):")
    for task in result.tasks.values():
        print(
            f"  - {task.name}: target={task.target}, "
            f"train={len(task.train_rows)}, test={len(task.test_rows)}"
        )

    output_path = Path(args.output)
    save_bundle(pipeline.create_bundle(result), output_path)
    print(f"\nTasks saved to: {output_path}")

    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Show task bundle information."""
    bundle_path = Path(args.bundle)

    try:
        bundle = load_bundle(bundle_path)
    except TabPrepError as e:
        print(f"Error: {e}")
        return 1

    info = bundle.get_info()

    print(f"Bundle: {bundle_path}")
    print(f"  Version: {info['version']}")
    print(f"  Created: {info['created_at']}")

    for name, task in info["tasks"].items():
        print(f"\nTask: {name}")
        print(f"  Problem Type: {task['problem_type']}")
        print(f"  Target:       {task['target']}")
        print(f"  Rows:         {task['n_rows']} (train {task['n_train']}, test {task['n_test']})")
        print("  Features:")
        for feature in task["features"]:
            print(f"    - {feature}")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="tabprep: Tabular data preparation for learning tasks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Prepare command
    prepare_parser = subparsers.add_parser("prepare", help="Prepare a dataset")
    prepare_parser.add_argument("input", help="Input delimited file")
    prepare_parser.add_argument("-r", "--regression-target", help="Regression outcome column")
    prepare_parser.add_argument(
        "-c", "--classification-target", help="Classification outcome column"
    )
    prepare_parser.add_argument(
        "--categorical", help="Comma-separated integer-coded columns to treat as categorical"
    )
    prepare_parser.add_argument(
        "--impute", help="Comma-separated columns to impute (default: all but outcomes)"
    )
    prepare_parser.add_argument(
        "--strategy",
        choices=["median", "mean", "most_frequent"],
        default="median",
        help="Imputation statistic for numeric columns",
    )
    prepare_parser.add_argument(
        "--indicator-prefix", default="miss_", help="Prefix of missingness indicator columns"
    )
    prepare_parser.add_argument(
        "--train-fraction", type=float, default=0.7, help="Fraction of rows used for training"
    )
    prepare_parser.add_argument("--seed", type=int, default=42, help="Random seed")
    prepare_parser.add_argument("--sep", default=",", help="Field delimiter")
    prepare_parser.add_argument(
        "--na-values", default="?,NA", help="Comma-separated tokens read as missing"
    )
    prepare_parser.add_argument(
        "-o", "--output", default="tasks.pkl", help="Output path of the task bundle"
    )
    prepare_parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    # Info command
    info_parser = subparsers.add_parser("info", help="Show task bundle information")
    info_parser.add_argument("bundle", help="Task bundle file (.pkl)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "prepare":
        return cmd_prepare(args)
    elif args.command == "info":
        return cmd_info(args)

    return 0


if __name__ == "__main__":
    sys.exit(main())
