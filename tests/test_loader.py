"""Tests for loading delimited files."""

from __future__ import annotations

import pytest

from tabprep import (
    ColumnNotFoundError,
    DataFileNotFoundError,
    InvalidDataError,
    TableSchema,
    count_missing,
    load_table,
)


class TestLoadTable:
    """Tests for load_table."""

    def test_load_csv(self, heart_csv, heart_data):
        """Rows and columns are read back."""
        data = load_table(heart_csv)

        assert data.shape == heart_data.shape
        assert list(data.columns) == list(heart_data.columns)

    def test_question_mark_is_missing(self, heart_csv):
        """'?' cells are read as missing values."""
        data = load_table(heart_csv)

        assert count_missing(data, "oldpeak") == 5
        assert count_missing(data, "ca") == 4
        assert count_missing(data, "thal") == 2

    def test_custom_separator(self, temp_dir):
        """Other delimiters are supported."""
        path = temp_dir / "data.tsv"
        path.write_text("a\tb\n1\t2\n3\t?\n")

        data = load_table(path, sep="\t")

        assert list(data.columns) == ["a", "b"]
        assert count_missing(data, "b") == 1

    def test_schema_validated(self, heart_csv):
        """A schema declaring an absent column fails at load time."""
        schema = TableSchema.from_categorical(["cp", "nonexistent"])

        with pytest.raises(ColumnNotFoundError, match="nonexistent"):
            load_table(heart_csv, schema=schema)

    def test_missing_file(self, temp_dir):
        """A missing file raises DataFileNotFoundError."""
        with pytest.raises(DataFileNotFoundError):
            load_table(temp_dir / "nope.csv")

    def test_empty_file(self, temp_dir):
        """An empty file raises InvalidDataError."""
        path = temp_dir / "empty.csv"
        path.write_text("")

        with pytest.raises(InvalidDataError, match="empty"):
            load_table(path)

    def test_header_only(self, temp_dir):
        """A file with a header and no rows raises InvalidDataError."""
        path = temp_dir / "header.csv"
        path.write_text("a,b\n")

        with pytest.raises(InvalidDataError, match="no rows"):
            load_table(path)
