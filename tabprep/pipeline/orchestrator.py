"""Preprocessing pipeline orchestrator.

This module provides the Pipeline class that prepares a table by executing
a sequence of pipeline stages.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd

from ..artifacts import TaskBundle, create_bundle
from ..config import PipelineConfig
from ..core import PipelineContext, PipelineResult
from ..data import DEFAULT_NA_VALUES, load_table
from ..progress import (
    CallbackProgressReporter,
    NullProgressReporter,
    PrepStage,
    ProgressCallback,
    ProgressReporter,
    ProgressUpdate,
)
from .stages import DEFAULT_STAGES

if TYPE_CHECKING:
    from typing import Self

logger = logging.getLogger(__name__)


class Pipeline:
    """Preprocessing pipeline producing regression and classification tasks.

    The pipeline executes a sequence of stages:
    1. ValidationStage - Validates the table against the configuration
    2. ImputationStage - Fills missing values, appends missingness indicators
    3. TypeNormalizationStage - Stores declared columns as categorical
    4. EncodingStage - One-hot encodes categorical columns
    5. SplitStage - Selects training rows for each task

    Usage:
        result = Pipeline.builder() \\
            .config(config) \\
            .on_progress(lambda u: print(u.message)) \\
            .build() \\
            .run(dataframe)
    """

    def __init__(
        self,
        config: PipelineConfig,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        """Initialize pipeline.

        Use Pipeline.builder() for a fluent interface.
        """
        self._config = config
        self._progress_callback = progress_callback
        self._reporter: ProgressReporter = (
            CallbackProgressReporter(progress_callback)
            if progress_callback
            else NullProgressReporter()
        )

        # Initialize stages
        self._stages = [stage() for stage in DEFAULT_STAGES]

    @property
    def config(self) -> PipelineConfig:
        """The pipeline configuration."""
        return self._config

    @classmethod
    def builder(cls) -> PipelineBuilder:
        """Create a builder for Pipeline."""
        return PipelineBuilder()

    def run(self, data: pd.DataFrame) -> PipelineResult:
        """Prepare the provided table.

        Args:
            data: Input table. It is not modified.

        Returns:
            PipelineResult with the prepared table and its tasks.

        Raises:
            InvalidDataError: If data validation fails.
            ColumnNotFoundError: If a configured column is not in the table.
            InsufficientDataError: If a column to impute has no observed values.
            InvalidStratificationTargetError: If the classification outcome
                cannot be stratified.
        """
        start_time = time.time()

        try:
            self._report(PrepStage.INITIALIZING, 0.0, "Initializing pipeline...")

            context = PipelineContext(
                config=self._config,
                reporter=self._reporter,
                data=data,
                start_time=start_time,
            )

            # Execute each stage
            for stage in self._stages:
                context = stage.execute(context)

            elapsed = time.time() - start_time
            self._report(PrepStage.COMPLETE, 1.0, "Preprocessing complete!")

            return self._build_result(context, elapsed)

        except Exception as e:
            self._report(PrepStage.FAILED, 0.0, f"Preprocessing failed: {e}")
            raise

    def run_file(
        self,
        path: str | Path,
        sep: str = ",",
        na_values: Sequence[str] = DEFAULT_NA_VALUES,
    ) -> PipelineResult:
        """Load a delimited file and prepare it.

        The configured schema is validated while loading.
        """
        data = load_table(path, schema=self._config.schema, sep=sep, na_values=na_values)
        return self.run(data)

    def _report(self, stage: PrepStage, progress: float, message: str) -> None:
        """Report progress."""
        self._reporter.report(
            ProgressUpdate(
                stage=stage,
                progress=progress,
                message=message,
            )
        )

    def _build_result(self, context: PipelineContext, elapsed: float) -> PipelineResult:
        """Build PipelineResult from completed context."""
        assert context.data is not None

        for message in context.warnings:
            logger.warning(message)

        return PipelineResult(
            data=context.data,
            tasks=context.tasks,
            imputed_columns=context.imputed_columns,
            indicator_columns=context.indicator_columns,
            encoded_columns=context.encoded_columns,
            elapsed_seconds=elapsed,
            warnings=context.warnings,
        )

    def create_bundle(self, result: PipelineResult) -> TaskBundle:
        """Create a TaskBundle from a PipelineResult.

        This is a convenience method for creating a bundle that can be saved.
        """
        return create_bundle(result.tasks)


class PipelineBuilder:
    """Builder for Pipeline with fluent interface."""

    def __init__(self) -> None:
        self._config: PipelineConfig | None = None
        self._progress_callback: ProgressCallback | None = None

    def config(self, config: PipelineConfig) -> Self:
        """Set the pipeline configuration."""
        self._config = config
        return self

    def on_progress(self, callback: ProgressCallback) -> Self:
        """Set the progress callback."""
        self._progress_callback = callback
        return self

    def build(self) -> Pipeline:
        """Build the Pipeline."""
        if self._config is None:
            raise ValueError("config is required")

        return Pipeline(
            config=self._config,
            progress_callback=self._progress_callback,
        )
