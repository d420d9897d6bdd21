"""Table schema declaring the semantic type of each column.

The schema is declared up front and validated when the table is loaded,
so later stages never have to guess which integer-coded columns are
really categories.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

import pandas as pd

from ..errors import ColumnNotFoundError


class ColumnType(Enum):
    """Semantic type of a column."""

    NUMERIC = "numeric"
    CATEGORICAL = "categorical"


@dataclass
class TableSchema:
    """Declared semantic types for the columns of a table.

    Attributes:
        columns: Mapping of column name to its declared type. Columns of the
            table that are not declared here are inferred from their dtype.
    """

    columns: dict[str, ColumnType] = field(default_factory=dict)

    @classmethod
    def from_categorical(
        cls,
        categorical: Iterable[str],
        numeric: Iterable[str] = (),
    ) -> TableSchema:
        """Create a schema from lists of categorical and numeric column names."""
        columns: dict[str, ColumnType] = {}
        for name in numeric:
            columns[name] = ColumnType.NUMERIC
        for name in categorical:
            if columns.get(name) is ColumnType.NUMERIC:
                raise ValueError(f"Column '{name}' declared both numeric and categorical")
            columns[name] = ColumnType.CATEGORICAL
        return cls(columns=columns)

    @property
    def categorical_columns(self) -> list[str]:
        """Names of the columns declared categorical, in declaration order."""
        return [name for name, kind in self.columns.items() if kind is ColumnType.CATEGORICAL]

    @property
    def numeric_columns(self) -> list[str]:
        """Names of the columns declared numeric, in declaration order."""
        return [name for name, kind in self.columns.items() if kind is ColumnType.NUMERIC]

    def validate(self, data: pd.DataFrame) -> None:
        """Check that every declared column exists in the table.

        Raises:
            ColumnNotFoundError: If a declared column is missing.
        """
        available = [str(c) for c in data.columns]
        for name in self.columns:
            if name not in data.columns:
                raise ColumnNotFoundError(name, available)

    def column_type(self, data: pd.DataFrame, column: str) -> ColumnType:
        """Declared type of a column, or its inferred type if undeclared."""
        if column in self.columns:
            return self.columns[column]
        if column not in data.columns:
            raise ColumnNotFoundError(column, [str(c) for c in data.columns])
        if pd.api.types.is_numeric_dtype(data[column]) and not isinstance(
            data[column].dtype, pd.CategoricalDtype
        ):
            return ColumnType.NUMERIC
        return ColumnType.CATEGORICAL

    def resolve(self, data: pd.DataFrame) -> dict[str, ColumnType]:
        """Semantic type of every column of the table, in table order."""
        return {str(col): self.column_type(data, str(col)) for col in data.columns}
