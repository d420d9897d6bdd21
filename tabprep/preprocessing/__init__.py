"""Table preprocessing.

This module provides missing value imputation with missingness indicators,
conversion of integer-coded columns to categorical, and one-hot encoding.
"""

from __future__ import annotations

from .categorical import apply_schema, categorical_columns, to_categorical
from .encoder import OneHotColumnEncoder, one_hot_encode
from .imputer import (
    DEFAULT_INDICATOR_PREFIX,
    MissingValueImputer,
    count_missing,
    impute_missing,
)

__all__ = [
    # Imputation
    "DEFAULT_INDICATOR_PREFIX",
    "MissingValueImputer",
    "count_missing",
    "impute_missing",
    # Types
    "apply_schema",
    "categorical_columns",
    "to_categorical",
    # Encoding
    "OneHotColumnEncoder",
    "one_hot_encode",
]
