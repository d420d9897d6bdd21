"""Reading input tables."""

from __future__ import annotations

from .loader import DEFAULT_NA_VALUES, load_table

__all__ = [
    "DEFAULT_NA_VALUES",
    "load_table",
]
