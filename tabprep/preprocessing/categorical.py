"""Reinterpreting integer-coded columns as categorical."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

import numpy as np
import pandas as pd

from ..core.schema import ColumnType, TableSchema
from ..errors import ColumnNotFoundError

logger = logging.getLogger(__name__)


def _as_category(values: pd.Series) -> pd.Series:
    """Store a column as categorical with its observed values as sorted levels."""
    if isinstance(values.dtype, pd.CategoricalDtype):
        return values.cat.remove_unused_categories()

    observed = values.dropna()
    if pd.api.types.is_float_dtype(values) and np.all(np.mod(observed.to_numpy(), 1) == 0):
        # 3.0 and 3 are the same value; keep labels free of a trailing ".0"
        values = values.astype(np.int64 if len(observed) == len(values) else "Int64")

    return values.astype("category")


def to_categorical(data: pd.DataFrame, columns: Sequence[str]) -> pd.DataFrame:
    """Return a copy of ``data`` with ``columns`` stored as categorical.

    Values are not altered; the label set of each column is the set of its
    distinct observed values, in sorted order.

    Raises:
        ColumnNotFoundError: If a column is not in the table.
    """
    available = [str(c) for c in data.columns]
    for column in columns:
        if column not in data.columns:
            raise ColumnNotFoundError(column, available)

    result = data.copy()
    for column in columns:
        result[column] = _as_category(data[column])
    return result


def categorical_columns(data: pd.DataFrame) -> list[str]:
    """Columns of the table currently stored as categorical or non-numeric."""
    return [
        str(c)
        for c in data.columns
        if isinstance(data[c].dtype, pd.CategoricalDtype)
        or not pd.api.types.is_numeric_dtype(data[c])
    ]


def apply_schema(
    data: pd.DataFrame,
    schema: TableSchema,
    exclude: Iterable[str] = (),
) -> pd.DataFrame:
    """Convert every column the schema resolves as categorical.

    Args:
        data: Input table. It is not modified.
        schema: Declared column types.
        exclude: Columns left untouched (e.g. outcome columns).

    Returns:
        New table with the categorical columns converted.
    """
    schema.validate(data)
    skipped = set(exclude)
    columns = [
        name
        for name, kind in schema.resolve(data).items()
        if kind is ColumnType.CATEGORICAL and name not in skipped
    ]
    if columns:
        logger.info(f"Treating {len(columns)} columns as categorical: {columns}")
    return to_categorical(data, columns)
