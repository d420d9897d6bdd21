"""tabprep: Tabular data preparation for learning tasks.

This library turns a delimited data file into ready-to-use regression and
classification tasks: missing values are imputed (with missingness
indicators), integer-coded columns become categorical, categoricals are
one-hot encoded, and rows are split into training and test sets.

Example usage:
    from tabprep import Pipeline, PipelineConfig, save_bundle

    config = PipelineConfig.builder() \\
        .regression_target("chol") \\
        .classification_target("target") \\
        .categorical_columns(["cp", "restecg", "slope", "ca", "thal"]) \\
        .train_fraction(0.7) \\
        .build()

    pipeline = Pipeline.builder().config(config).build()
    result = pipeline.run_file("heart.csv")

    # Save both tasks
    save_bundle(pipeline.create_bundle(result), "tasks.pkl")
"""

from __future__ import annotations

# Configuration
from .config import PipelineConfig, PipelineConfigBuilder, ProblemType

# Types (from core module)
from .core import (
    ColumnType,
    PipelineContext,
    PipelineResult,
    PipelineStage,
    Split,
    TableSchema,
    Task,
)

# Errors
from .errors import (
    BundleNotFoundError,
    ColumnNotFoundError,
    DataFileNotFoundError,
    InsufficientDataError,
    InvalidConfigError,
    InvalidDataError,
    InvalidStratificationTargetError,
    TabPrepError,
)

# Artifacts
from .artifacts import TaskBundle, create_bundle, load_bundle, save_bundle

# Loading
from .data import load_table

# Pipeline
from .pipeline import Pipeline, PipelineBuilder

# Preprocessing
from .preprocessing import (
    MissingValueImputer,
    OneHotColumnEncoder,
    apply_schema,
    count_missing,
    impute_missing,
    one_hot_encode,
    to_categorical,
)

# Progress
from .progress import (
    CallbackProgressReporter,
    NullProgressReporter,
    PrepStage,
    ProgressCallback,
    ProgressReporter,
    ProgressUpdate,
)

# Splitting
from .splitting import make_task, random_split, stratified_split

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Configuration
    "PipelineConfig",
    "PipelineConfigBuilder",
    "ProblemType",
    # Pipeline
    "Pipeline",
    "PipelineBuilder",
    # Loading
    "load_table",
    # Preprocessing
    "MissingValueImputer",
    "OneHotColumnEncoder",
    "apply_schema",
    "count_missing",
    "impute_missing",
    "one_hot_encode",
    "to_categorical",
    # Splitting
    "make_task",
    "random_split",
    "stratified_split",
    # Artifacts
    "TaskBundle",
    "create_bundle",
    "load_bundle",
    "save_bundle",
    # Progress
    "PrepStage",
    "ProgressUpdate",
    "ProgressCallback",
    "ProgressReporter",
    "CallbackProgressReporter",
    "NullProgressReporter",
    # Types (from core)
    "ColumnType",
    "TableSchema",
    "Split",
    "Task",
    "PipelineResult",
    "PipelineStage",
    "PipelineContext",
    # Errors
    "TabPrepError",
    "InvalidConfigError",
    "InvalidDataError",
    "ColumnNotFoundError",
    "InsufficientDataError",
    "InvalidStratificationTargetError",
    "DataFileNotFoundError",
    "BundleNotFoundError",
]
