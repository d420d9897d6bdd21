"""Core types and protocols for tabprep.

This module contains the foundational types, the table schema and the
protocols used throughout the library.
"""

from __future__ import annotations

from .protocols import PipelineContext, PipelineStage
from .schema import ColumnType, TableSchema
from .types import PipelineResult, Split, Task

__all__ = [
    # Schema
    "ColumnType",
    "TableSchema",
    # Types
    "Split",
    "Task",
    "PipelineResult",
    # Protocols
    "PipelineStage",
    "PipelineContext",
]
