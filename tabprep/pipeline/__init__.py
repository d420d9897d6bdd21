"""Pipeline module for preprocessing orchestration.

This module provides the Pipeline class and related components for
orchestrating the preprocessing of a table into learning tasks.
"""

from __future__ import annotations

from .orchestrator import Pipeline, PipelineBuilder
from .stages import (
    DEFAULT_STAGES,
    EncodingStage,
    ImputationStage,
    SplitStage,
    TypeNormalizationStage,
    ValidationStage,
)

__all__ = [
    # Main orchestrator
    "Pipeline",
    "PipelineBuilder",
    # Stages
    "ValidationStage",
    "ImputationStage",
    "TypeNormalizationStage",
    "EncodingStage",
    "SplitStage",
    "DEFAULT_STAGES",
]
