"""One-hot encoding of categorical columns.

Each categorical column is replaced by one binary column per observed
level, named ``<column>_<level>`` and ordered by sorted level. The new
columns are appended after the remaining columns.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

import numpy as np
import pandas as pd
from sklearn.preprocessing import OneHotEncoder

from ..errors import ColumnNotFoundError, InvalidDataError
from .categorical import categorical_columns

logger = logging.getLogger(__name__)


class OneHotColumnEncoder:
    """Expands categorical columns into indicator columns.

    The encoder must be fit before transforming. Levels unseen during fit
    encode as all zeros.
    """

    def __init__(self) -> None:
        self._encoder: OneHotEncoder | None = None
        self._columns: list[str] = []
        self._is_fitted = False

    @property
    def is_fitted(self) -> bool:
        """Whether the encoder has been fitted."""
        return self._is_fitted

    @property
    def encoded_columns(self) -> list[str]:
        """Original columns replaced by indicator columns."""
        return self._columns.copy()

    @property
    def categories(self) -> dict[str, list[Any]]:
        """Sorted levels per encoded column."""
        if not self._is_fitted or self._encoder is None:
            return {}
        return {
            column: list(levels.tolist())
            for column, levels in zip(self._columns, self._encoder.categories_)
        }

    @property
    def indicator_columns(self) -> list[str]:
        """Names of the indicator columns produced by transform."""
        if not self._is_fitted or self._encoder is None or not self._columns:
            return []
        return [str(n) for n in self._encoder.get_feature_names_out(self._columns)]

    def fit(
        self,
        data: pd.DataFrame,
        columns: Sequence[str] | None = None,
        exclude: Iterable[str] = (),
    ) -> OneHotColumnEncoder:
        """Learn the levels of the categorical columns.

        Args:
            data: Table to fit on.
            columns: Columns to encode. If None, every categorical or
                non-numeric column.
            exclude: Columns never encoded.

        Returns:
            Self for method chaining.

        Raises:
            ColumnNotFoundError: If a requested column is not in the table.
            InvalidDataError: If a column to encode has missing values, or an
                indicator name collides with a column kept in the table.
        """
        available = [str(c) for c in data.columns]
        skipped = set(exclude)
        candidates = list(columns) if columns is not None else categorical_columns(data)
        for column in candidates:
            if column not in data.columns:
                raise ColumnNotFoundError(column, available)

        self._is_fitted = False
        self._columns = [c for c in candidates if c not in skipped]
        for column in self._columns:
            n_missing = int(data[column].isna().sum())
            if n_missing:
                raise InvalidDataError(
                    f"Column '{column}' has {n_missing} missing values; impute it before encoding"
                )

        self._encoder = None
        if self._columns:
            self._encoder = OneHotEncoder(
                categories="auto",
                handle_unknown="ignore",
                sparse_output=False,
                dtype=np.int64,
            )
            self._encoder.fit(data[self._columns])

            kept = {str(c) for c in data.columns if c not in self._columns}
            names = [str(n) for n in self._encoder.get_feature_names_out(self._columns)]
            clashes = sorted({n for n in names if n in kept or names.count(n) > 1})
            if clashes:
                self._encoder = None
                raise InvalidDataError(f"Indicator columns {clashes} already exist")

        self._is_fitted = True
        return self

    def transform(self, data: pd.DataFrame) -> pd.DataFrame:
        """Return a copy of ``data`` with the fitted columns one-hot encoded.

        Raises:
            ValueError: If the encoder is not fitted.
            ColumnNotFoundError: If a fitted column is missing from ``data``.
        """
        if not self._is_fitted:
            raise ValueError("Encoder must be fitted before transform")

        if self._encoder is None:
            return data.copy()

        available = [str(c) for c in data.columns]
        for column in self._columns:
            if column not in data.columns:
                raise ColumnNotFoundError(column, available)

        encoded = pd.DataFrame(
            np.asarray(self._encoder.transform(data[self._columns])),
            columns=self.indicator_columns,
            index=data.index,
        )
        return pd.concat([data.drop(columns=self._columns), encoded], axis=1)

    def fit_transform(
        self,
        data: pd.DataFrame,
        columns: Sequence[str] | None = None,
        exclude: Iterable[str] = (),
    ) -> pd.DataFrame:
        """Fit and transform in one step."""
        return self.fit(data, columns, exclude).transform(data)


def one_hot_encode(
    data: pd.DataFrame,
    columns: Sequence[str] | None = None,
    exclude: Iterable[str] = (),
) -> tuple[pd.DataFrame, OneHotColumnEncoder]:
    """One-hot encode categorical columns.

    Args:
        data: Input table. It is not modified.
        columns: Columns to encode. If None, every categorical column.
        exclude: Columns never encoded.

    Returns:
        Tuple of (encoded table, fitted encoder).
    """
    encoder = OneHotColumnEncoder()
    result = encoder.fit_transform(data, columns, exclude)

    if encoder.encoded_columns:
        logger.info(
            f"Encoded {len(encoder.encoded_columns)} columns into "
            f"{len(encoder.indicator_columns)} indicator columns"
        )
    return result, encoder
