"""Missing value imputation with missingness indicators.

Fills missing cells with a per-column statistic and appends one binary
indicator column per imputed column, recording which rows were missing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

import numpy as np
import pandas as pd
from sklearn.impute import SimpleImputer

from ..errors import ColumnNotFoundError, InsufficientDataError, InvalidDataError

logger = logging.getLogger(__name__)

DEFAULT_INDICATOR_PREFIX = "miss_"


def count_missing(data: pd.DataFrame, column: str) -> int:
    """Number of missing cells in a column."""
    if column not in data.columns:
        raise ColumnNotFoundError(column, [str(c) for c in data.columns])
    return int(data[column].isna().sum())


class MissingValueImputer:
    """Imputes missing values and records where they were.

    Numeric columns are filled with ``strategy`` (median by default).
    Categorical columns, whether declared so or of non-numeric dtype, are
    filled with their most frequent value so the fill is an observed level.

    The imputer must be fit before transforming. Fitting only considers
    columns that actually contain missing values; a column without missing
    values gets no indicator.
    """

    def __init__(
        self,
        strategy: str = "median",
        indicator_prefix: str = DEFAULT_INDICATOR_PREFIX,
        categorical_columns: Iterable[str] = (),
    ) -> None:
        """Initialize imputer.

        Args:
            strategy: Statistic for numeric columns ("median", "mean" or
                "most_frequent").
            indicator_prefix: Prefix of the indicator column names.
            categorical_columns: Columns to fill with their most frequent value.
        """
        self.strategy = strategy
        self.indicator_prefix = indicator_prefix
        self._categorical_columns = set(categorical_columns)
        self._fill_values: dict[str, Any] = {}
        self._is_fitted = False

    @property
    def is_fitted(self) -> bool:
        """Whether the imputer has been fitted."""
        return self._is_fitted

    @property
    def imputed_columns(self) -> list[str]:
        """Columns that had missing values during fit, in processing order."""
        return list(self._fill_values)

    @property
    def indicator_columns(self) -> list[str]:
        """Names of the indicator columns appended by transform."""
        return [self.indicator_name(c) for c in self._fill_values]

    @property
    def fill_values(self) -> dict[str, Any]:
        """Fill value per imputed column."""
        return self._fill_values.copy()

    def indicator_name(self, column: str) -> str:
        """Name of the indicator column for ``column``."""
        return f"{self.indicator_prefix}{column}"

    def fit(
        self,
        data: pd.DataFrame,
        columns: Sequence[str] | None = None,
    ) -> MissingValueImputer:
        """Compute fill values for the columns that contain missing cells.

        Args:
            data: Table to fit on.
            columns: Columns to consider. If None, all columns.

        Returns:
            Self for method chaining.

        Raises:
            ColumnNotFoundError: If a requested column is not in the table.
            InsufficientDataError: If a column has no observed values.
            InvalidDataError: If an indicator name collides with an existing column.
        """
        available = [str(c) for c in data.columns]
        candidates = list(columns) if columns is not None else available
        for column in candidates:
            if column not in data.columns:
                raise ColumnNotFoundError(column, available)

        to_impute = [c for c in dict.fromkeys(candidates) if data[c].isna().any()]

        for column in to_impute:
            if data[column].notna().sum() == 0:
                raise InsufficientDataError(column, "all values are missing, no fill value computable")
            if self.indicator_name(column) in data.columns:
                raise InvalidDataError(
                    f"Indicator column '{self.indicator_name(column)}' already exists"
                )

        categorical = [c for c in to_impute if self._is_categorical(data[c])]
        numeric = [c for c in to_impute if c not in categorical]

        fill_values: dict[str, Any] = {}
        if numeric:
            fill_values.update(self._compute_statistics(data[numeric], self.strategy))
        if categorical:
            fill_values.update(self._compute_statistics(data[categorical], "most_frequent"))

        # Keep processing order
        self._fill_values = {c: fill_values[c] for c in to_impute}
        self._is_fitted = True
        return self

    def transform(self, data: pd.DataFrame) -> pd.DataFrame:
        """Return a copy of ``data`` with missing values filled and indicators appended.

        Raises:
            ValueError: If the imputer is not fitted.
            ColumnNotFoundError: If a fitted column is missing from ``data``.
        """
        if not self._is_fitted:
            raise ValueError("Imputer must be fitted before transform")

        available = [str(c) for c in data.columns]
        result = data.copy()
        indicators: dict[str, pd.Series] = {}

        for column, value in self._fill_values.items():
            if column not in data.columns:
                raise ColumnNotFoundError(column, available)
            missing = data[column].isna()
            indicators[self.indicator_name(column)] = missing.astype(np.int64)
            result[column] = data[column].fillna(value)

        if indicators:
            result = pd.concat([result, pd.DataFrame(indicators, index=data.index)], axis=1)

        return result

    def fit_transform(
        self,
        data: pd.DataFrame,
        columns: Sequence[str] | None = None,
    ) -> pd.DataFrame:
        """Fit and transform in one step."""
        return self.fit(data, columns).transform(data)

    def _is_categorical(self, values: pd.Series) -> bool:
        if values.name in self._categorical_columns:
            return True
        return not pd.api.types.is_numeric_dtype(values) or isinstance(
            values.dtype, pd.CategoricalDtype
        )

    @staticmethod
    def _compute_statistics(frame: pd.DataFrame, strategy: str) -> dict[str, Any]:
        """Fit a SimpleImputer and return its statistics per column."""
        imputer = SimpleImputer(strategy=strategy, missing_values=np.nan)
        if strategy == "most_frequent":
            values = frame.astype(object)
            imputer.fit(values.where(frame.notna(), np.nan).to_numpy())
        else:
            imputer.fit(frame.astype(float).to_numpy())
        statistics: Any = imputer.statistics_
        return {str(c): _as_scalar(v) for c, v in zip(frame.columns, statistics)}


def _as_scalar(value: Any) -> Any:
    """Convert numpy scalars to plain Python values."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def impute_missing(
    data: pd.DataFrame,
    columns: Sequence[str] | None = None,
    strategy: str = "median",
    indicator_prefix: str = DEFAULT_INDICATOR_PREFIX,
    categorical_columns: Iterable[str] = (),
) -> tuple[pd.DataFrame, MissingValueImputer]:
    """Impute missing values and append missingness indicators.

    Args:
        data: Input table. It is not modified.
        columns: Columns to impute. If None, every column with missing values.
        strategy: Statistic for numeric columns.
        indicator_prefix: Prefix of the indicator column names.
        categorical_columns: Columns filled with their most frequent value.

    Returns:
        Tuple of (imputed table, fitted imputer).
    """
    imputer = MissingValueImputer(
        strategy=strategy,
        indicator_prefix=indicator_prefix,
        categorical_columns=categorical_columns,
    )
    result = imputer.fit_transform(data, columns)

    if imputer.imputed_columns:
        logger.info(
            f"Imputed {len(imputer.imputed_columns)} columns with {strategy}: "
            f"{imputer.imputed_columns}"
        )
    return result, imputer
