"""Exception hierarchy for tabprep."""

from __future__ import annotations


class TabPrepError(Exception):
    """Base exception for tabprep."""

    pass


class InvalidConfigError(TabPrepError):
    """Invalid configuration provided."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid configuration: {message}")


class InvalidDataError(TabPrepError):
    """Data validation failed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid data: {message}")


class ColumnNotFoundError(TabPrepError):
    """Referenced column not found in the table."""

    def __init__(self, column: str, available: list[str]) -> None:
        self.column = column
        self.available = available
        super().__init__(f"Column '{column}' not found. Available columns: {available}")


class InsufficientDataError(TabPrepError):
    """Not enough observed values to compute a statistic."""

    def __init__(self, column: str, message: str = "all values are missing") -> None:
        self.column = column
        self.message = message
        super().__init__(f"Insufficient data in column '{column}': {message}")


class InvalidStratificationTargetError(TabPrepError):
    """Outcome column cannot be used to stratify a split."""

    def __init__(self, column: str | None, message: str) -> None:
        self.column = column
        self.message = message
        name = f"'{column}'" if column is not None else "outcome"
        super().__init__(f"Cannot stratify on {name}: {message}")


class DataFileNotFoundError(TabPrepError):
    """Input data file not found."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Data file not found: {path}")


class BundleNotFoundError(TabPrepError):
    """Task bundle file not found."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Task bundle not found: {path}")
