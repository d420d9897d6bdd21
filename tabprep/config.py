"""Configuration dataclasses for tabprep."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .core.schema import TableSchema

if TYPE_CHECKING:
    from typing import Self


class ProblemType(Enum):
    """Type of learning task a prepared table is split for."""

    CLASSIFICATION = "classification"
    REGRESSION = "regression"


IMPUTE_STRATEGIES = ("median", "mean", "most_frequent")


@dataclass
class PipelineConfig:
    """Configuration for the preprocessing pipeline.

    Attributes:
        regression_target: Outcome column of the regression task. If None,
            no regression task is created.
        classification_target: Outcome column of the classification task. If
            None, no classification task is created.
        schema: Declared semantic types of the table columns.
        impute_columns: Columns to impute. If None, every column with missing
            values except the outcome columns.
        impute_strategy: Statistic used to fill numeric columns.
        indicator_prefix: Prefix of the missingness indicator column names.
        train_fraction: Fraction of rows assigned to the training set.
        random_seed: Random seed for reproducible splits.
    """

    regression_target: str | None = None
    classification_target: str | None = None
    schema: TableSchema = field(default_factory=TableSchema)
    impute_columns: list[str] | None = None
    impute_strategy: str = "median"
    indicator_prefix: str = "miss_"
    train_fraction: float = 0.7
    random_seed: int = 42

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.regression_target is None and self.classification_target is None:
            raise ValueError("at least one of regression_target or classification_target is required")
        if self.impute_strategy not in IMPUTE_STRATEGIES:
            raise ValueError(f"impute_strategy must be one of {IMPUTE_STRATEGIES}")
        if not self.indicator_prefix:
            raise ValueError("indicator_prefix must not be empty")
        if not 0 < self.train_fraction < 1:
            raise ValueError("train_fraction must be between 0 and 1")

    @property
    def target_columns(self) -> list[str]:
        """Outcome columns of all configured tasks."""
        targets = [self.regression_target, self.classification_target]
        return list(dict.fromkeys(t for t in targets if t is not None))

    @classmethod
    def builder(cls) -> PipelineConfigBuilder:
        """Create a builder for PipelineConfig."""
        return PipelineConfigBuilder()


class PipelineConfigBuilder:
    """Builder for PipelineConfig with fluent interface."""

    def __init__(self) -> None:
        self._regression_target: str | None = None
        self._classification_target: str | None = None
        self._schema: TableSchema | None = None
        self._categorical_columns: list[str] = []
        self._impute_columns: list[str] | None = None
        self._impute_strategy: str = "median"
        self._indicator_prefix: str = "miss_"
        self._train_fraction: float = 0.7
        self._random_seed: int = 42

    def regression_target(self, value: str) -> Self:
        """Set the regression outcome column."""
        self._regression_target = value
        return self

    def classification_target(self, value: str) -> Self:
        """Set the classification outcome column."""
        self._classification_target = value
        return self

    def schema(self, value: TableSchema) -> Self:
        """Set the table schema."""
        self._schema = value
        return self

    def categorical_columns(self, value: list[str]) -> Self:
        """Declare columns as categorical (merged into the schema)."""
        self._categorical_columns = list(value)
        return self

    def impute_columns(self, value: list[str]) -> Self:
        """Restrict imputation to the given columns."""
        self._impute_columns = list(value)
        return self

    def impute_strategy(self, value: str) -> Self:
        """Set the imputation strategy for numeric columns."""
        self._impute_strategy = value
        return self

    def indicator_prefix(self, value: str) -> Self:
        """Set the missingness indicator prefix."""
        self._indicator_prefix = value
        return self

    def train_fraction(self, value: float) -> Self:
        """Set the training set fraction."""
        self._train_fraction = value
        return self

    def random_seed(self, value: int) -> Self:
        """Set the random seed."""
        self._random_seed = value
        return self

    def build(self) -> PipelineConfig:
        """Build the PipelineConfig."""
        schema = self._schema or TableSchema()
        if self._categorical_columns:
            merged = TableSchema.from_categorical(self._categorical_columns)
            schema = TableSchema(columns={**schema.columns, **merged.columns})

        return PipelineConfig(
            regression_target=self._regression_target,
            classification_target=self._classification_target,
            schema=schema,
            impute_columns=self._impute_columns,
            impute_strategy=self._impute_strategy,
            indicator_prefix=self._indicator_prefix,
            train_fraction=self._train_fraction,
            random_seed=self._random_seed,
        )
