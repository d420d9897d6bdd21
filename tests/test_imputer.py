"""Tests for missing value imputation and missingness indicators."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from tabprep import (
    ColumnNotFoundError,
    InsufficientDataError,
    InvalidDataError,
    MissingValueImputer,
    count_missing,
    impute_missing,
)


class TestImputeMissing:
    """Tests for the impute_missing function."""

    def test_oldpeak_example(self, heart_data):
        """5 missing oldpeak values give one indicator with exactly 5 ones."""
        assert count_missing(heart_data, "oldpeak") == 5

        result, _ = impute_missing(heart_data, columns=["oldpeak"])

        assert count_missing(result, "oldpeak") == 0
        assert "miss_oldpeak" in result.columns
        assert result["miss_oldpeak"].sum() == 5
        assert len(result.columns) == len(heart_data.columns) + 1

    def test_fills_with_median(self):
        """Missing cells take the median of the observed values."""
        data = pd.DataFrame({"a": [1.0, np.nan, 3.0, 10.0, np.nan]})

        result, imputer = impute_missing(data)

        assert imputer.fill_values == {"a": 3.0}
        assert list(result["a"]) == [1.0, 3.0, 3.0, 10.0, 3.0]
        assert list(result["miss_a"]) == [0, 1, 0, 0, 1]

    def test_mean_strategy(self):
        """The mean strategy fills with the observed mean."""
        data = pd.DataFrame({"a": [1.0, np.nan, 2.0, 6.0]})

        result, _ = impute_missing(data, strategy="mean")

        assert result.loc[1, "a"] == pytest.approx(3.0)

    def test_no_missing_no_indicator(self, complete_data):
        """Columns without missing values get no indicator."""
        result, imputer = impute_missing(complete_data)

        assert imputer.imputed_columns == []
        assert list(result.columns) == list(complete_data.columns)
        pd.testing.assert_frame_equal(result, complete_data)

    def test_all_columns_imputed(self, heart_data):
        """Every column with missing values is imputed, in table order."""
        result, imputer = impute_missing(heart_data)

        assert imputer.imputed_columns == ["oldpeak", "ca", "thal"]
        assert list(result.columns[-3:]) == ["miss_oldpeak", "miss_ca", "miss_thal"]
        assert result.isna().sum().sum() == 0

    def test_row_count_unchanged(self, heart_data):
        """Imputation never adds or drops rows."""
        result, _ = impute_missing(heart_data)
        assert len(result) == len(heart_data)

    def test_input_not_modified(self, heart_data):
        """The input table is left untouched."""
        before = heart_data.copy()
        impute_missing(heart_data)
        pd.testing.assert_frame_equal(heart_data, before)

    def test_indicator_dtype_is_binary(self, heart_data):
        """Indicator columns hold integer 0/1 values."""
        result, _ = impute_missing(heart_data, columns=["ca"])

        assert result["miss_ca"].dtype == np.int64
        assert set(result["miss_ca"].unique()) == {0, 1}

    def test_custom_prefix(self):
        """The indicator prefix is configurable."""
        data = pd.DataFrame({"a": [1.0, np.nan, 3.0]})

        result, _ = impute_missing(data, indicator_prefix="na_")

        assert "na_a" in result.columns
        assert "miss_a" not in result.columns

    def test_categorical_columns_use_most_frequent(self):
        """Declared categorical columns are filled with an observed level."""
        data = pd.DataFrame({"thal": [3.0, 7.0, 7.0, np.nan, 6.0]})

        result, imputer = impute_missing(data, categorical_columns=["thal"])

        assert imputer.fill_values == {"thal": 7.0}
        assert result.loc[3, "thal"] == 7.0

    def test_string_columns_use_most_frequent(self):
        """Non-numeric columns are filled with their most frequent value."""
        data = pd.DataFrame({"color": ["red", None, "blue", "red"]})

        result, _ = impute_missing(data)

        assert result.loc[1, "color"] == "red"
        assert list(result["miss_color"]) == [0, 1, 0, 0]


class TestImputeErrors:
    """Tests for imputation error conditions."""

    def test_unknown_column(self, heart_data):
        """Requesting a column not in the table raises ColumnNotFoundError."""
        with pytest.raises(ColumnNotFoundError, match="nonexistent"):
            impute_missing(heart_data, columns=["nonexistent"])

    def test_all_missing_column(self):
        """A column with no observed values raises InsufficientDataError."""
        data = pd.DataFrame({"a": [1.0, 2.0], "empty": [np.nan, np.nan]})

        with pytest.raises(InsufficientDataError) as exc_info:
            impute_missing(data)

        assert exc_info.value.column == "empty"

    def test_indicator_name_collision(self):
        """An existing column with the indicator name is rejected."""
        data = pd.DataFrame({"a": [1.0, np.nan], "miss_a": [0, 0]})

        with pytest.raises(InvalidDataError, match="miss_a"):
            impute_missing(data, columns=["a"])


class TestMissingValueImputer:
    """Tests for the fit/transform interface."""

    def test_not_fitted_initially(self):
        """A new imputer is not fitted."""
        imputer = MissingValueImputer()

        assert imputer.is_fitted is False
        assert imputer.imputed_columns == []
        assert imputer.indicator_columns == []

    def test_transform_without_fit_raises(self):
        """transform() raises if not fitted."""
        with pytest.raises(ValueError, match="must be fitted"):
            MissingValueImputer().transform(pd.DataFrame({"a": [1.0]}))

    def test_reapply_to_new_data(self):
        """Fitted fill values are reused on new data."""
        train = pd.DataFrame({"a": [1.0, np.nan, 5.0]})
        new = pd.DataFrame({"a": [np.nan, 2.0]})

        imputer = MissingValueImputer().fit(train)
        result = imputer.transform(new)

        assert list(result["a"]) == [3.0, 2.0]
        assert list(result["miss_a"]) == [1, 0]

    def test_transform_missing_column(self):
        """transform() fails when a fitted column is absent."""
        imputer = MissingValueImputer().fit(pd.DataFrame({"a": [1.0, np.nan]}))

        with pytest.raises(ColumnNotFoundError):
            imputer.transform(pd.DataFrame({"b": [1.0]}))

    def test_fill_values_is_copy(self):
        """fill_values returns a copy."""
        imputer = MissingValueImputer().fit(pd.DataFrame({"a": [1.0, np.nan]}))

        values = imputer.fill_values
        values["b"] = 0

        assert "b" not in imputer.fill_values
