"""Loading delimited tabular files."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from ..core.schema import TableSchema
from ..errors import DataFileNotFoundError, InvalidDataError

logger = logging.getLogger(__name__)

# Tokens read as missing cells in addition to pandas' defaults
DEFAULT_NA_VALUES: tuple[str, ...] = ("?", "NA", "")


def load_table(
    path: str | Path,
    schema: TableSchema | None = None,
    sep: str = ",",
    na_values: Sequence[str] = DEFAULT_NA_VALUES,
) -> pd.DataFrame:
    """Read a delimited text file into a DataFrame.

    Args:
        path: Path to the file.
        schema: Optional schema validated against the loaded columns.
        sep: Field delimiter.
        na_values: Tokens treated as missing values.

    Returns:
        The loaded table.

    Raises:
        DataFileNotFoundError: If the file does not exist.
        InvalidDataError: If the file holds no rows or no columns.
        ColumnNotFoundError: If a column declared by the schema is missing.
    """
    path = Path(path)

    if not path.exists():
        raise DataFileNotFoundError(str(path))

    try:
        data = pd.read_csv(path, sep=sep, na_values=list(na_values), skipinitialspace=True)
    except pd.errors.EmptyDataError as e:
        raise InvalidDataError(f"{path} is empty") from e

    data.columns = [str(c).strip() for c in data.columns]
    if data.empty:
        raise InvalidDataError(f"{path} contains no rows")

    if schema is not None:
        schema.validate(data)

    logger.info(f"Loaded {len(data)} rows, {len(data.columns)} columns from {path}")
    return data
