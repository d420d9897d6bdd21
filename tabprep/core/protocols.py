"""Protocols and shared interfaces for the pipeline stages.

This module defines the PipelineStage protocol that all pipeline stages implement,
along with the PipelineContext dataclass that flows through the pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

import pandas as pd

if TYPE_CHECKING:
    from ..config import PipelineConfig
    from ..progress import ProgressReporter
    from .types import Task


@dataclass
class PipelineContext:
    """Context object that flows through pipeline stages.

    Stages never modify ``data`` in place; each one replaces it with a new
    table.
    """

    # Configuration (always present)
    config: PipelineConfig
    reporter: ProgressReporter

    # Current table (replaced by every transforming stage)
    data: pd.DataFrame | None = None

    # Set by imputation stage
    imputed_columns: list[str] = field(default_factory=list)
    indicator_columns: list[str] = field(default_factory=list)

    # Set by encoding stage
    encoded_columns: list[str] = field(default_factory=list)

    # Set by split stage
    tasks: dict[str, Task] = field(default_factory=dict)

    # Warnings accumulated during pipeline execution
    warnings: list[str] = field(default_factory=list)

    # Start time for calculating total duration
    start_time: float = 0.0


class PipelineStage(Protocol):
    """Protocol for pipeline stages.

    Each stage takes a PipelineContext, performs its work, and returns
    the (possibly modified) context. This allows stages to be composed
    and executed in sequence.
    """

    def execute(self, context: PipelineContext) -> PipelineContext:
        """Execute the pipeline stage.

        Args:
            context: The current pipeline context.

        Returns:
            The updated pipeline context.

        Raises:
            Various exceptions depending on the stage.
        """
        ...
