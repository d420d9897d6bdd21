"""Progress reporting for tabprep.

This module provides stage tracking and callback-based progress reporting
while the pipeline runs.
"""

from __future__ import annotations

from .reporter import (
    CallbackProgressReporter,
    NullProgressReporter,
    PrepStage,
    ProgressCallback,
    ProgressReporter,
    ProgressUpdate,
)

__all__ = [
    "PrepStage",
    "ProgressUpdate",
    "ProgressCallback",
    "ProgressReporter",
    "CallbackProgressReporter",
    "NullProgressReporter",
]
