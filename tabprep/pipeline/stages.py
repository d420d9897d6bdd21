"""Pipeline stages implementing the PipelineStage protocol.

Each stage is a single-responsibility class that operates on PipelineContext,
performing one step of the preprocessing pipeline. Transforming stages
replace ``context.data`` with a new table instead of mutating it.
"""

from __future__ import annotations

import pandas as pd

from ..config import ProblemType
from ..core import ColumnType, PipelineContext
from ..errors import ColumnNotFoundError, InvalidDataError
from ..preprocessing import apply_schema, categorical_columns, impute_missing, one_hot_encode
from ..progress import PrepStage, ProgressUpdate
from ..splitting import make_task


def _require_data(context: PipelineContext, stage: str) -> pd.DataFrame:
    if context.data is None:
        raise InvalidDataError(f"No data available for {stage}")
    return context.data


class ValidationStage:
    """Validates the input table against the configuration.

    Checks for:
    - Non-empty table
    - Schema columns, outcome columns and imputation columns existence
    - Missing values in outcome columns
    - Numeric regression outcome
    """

    def execute(self, context: PipelineContext) -> PipelineContext:
        """Execute validation stage."""
        context.reporter.report(
            ProgressUpdate(
                stage=PrepStage.VALIDATION,
                progress=0.05,
                message="Validating data...",
            )
        )

        data = _require_data(context, "validation")
        config = context.config

        if data.empty:
            raise InvalidDataError("Table has no rows")

        available = [str(c) for c in data.columns]
        config.schema.validate(data)

        for column in config.target_columns:
            if column not in data.columns:
                raise ColumnNotFoundError(column, available)

        for column in config.impute_columns or []:
            if column not in data.columns:
                raise ColumnNotFoundError(column, available)

        for column in config.target_columns:
            n_missing = int(data[column].isna().sum())
            if n_missing:
                raise InvalidDataError(
                    f"Outcome column '{column}' has {n_missing} missing values"
                )

        target = config.regression_target
        if target is not None:
            if not pd.api.types.is_numeric_dtype(data[target]):
                raise InvalidDataError(f"Regression outcome '{target}' must be numeric")
            if config.schema.columns.get(target) is ColumnType.CATEGORICAL:
                context.warnings.append(
                    f"Regression outcome '{target}' is declared categorical; kept numeric"
                )

        return context


class ImputationStage:
    """Fills missing values and appends missingness indicators.

    Sets on context: data, imputed_columns, indicator_columns
    """

    def execute(self, context: PipelineContext) -> PipelineContext:
        """Execute imputation stage."""
        context.reporter.report(
            ProgressUpdate(
                stage=PrepStage.IMPUTATION,
                progress=0.20,
                message="Imputing missing values...",
            )
        )

        data = _require_data(context, "imputation")
        config = context.config

        columns = config.impute_columns
        if columns is None:
            targets = set(config.target_columns)
            columns = [str(c) for c in data.columns if c not in targets]

        context.data, imputer = impute_missing(
            data,
            columns=columns,
            strategy=config.impute_strategy,
            indicator_prefix=config.indicator_prefix,
            categorical_columns=config.schema.categorical_columns,
        )
        context.imputed_columns = imputer.imputed_columns
        context.indicator_columns = imputer.indicator_columns

        return context


class TypeNormalizationStage:
    """Stores the columns the schema declares categorical as categoricals.

    Outcome columns are left as they are.

    Sets on context: data
    """

    def execute(self, context: PipelineContext) -> PipelineContext:
        """Execute type normalization stage."""
        context.reporter.report(
            ProgressUpdate(
                stage=PrepStage.TYPE_NORMALIZATION,
                progress=0.40,
                message="Normalizing column types...",
            )
        )

        data = _require_data(context, "type normalization")
        context.data = apply_schema(
            data,
            context.config.schema,
            exclude=context.config.target_columns,
        )

        return context


class EncodingStage:
    """One-hot encodes every categorical column except the outcomes.

    Sets on context: data, encoded_columns
    """

    def execute(self, context: PipelineContext) -> PipelineContext:
        """Execute encoding stage."""
        context.reporter.report(
            ProgressUpdate(
                stage=PrepStage.ENCODING,
                progress=0.60,
                message="Encoding categorical columns...",
            )
        )

        data = _require_data(context, "encoding")
        targets = context.config.target_columns

        context.data, encoder = one_hot_encode(data, exclude=targets)
        context.encoded_columns = encoder.encoded_columns

        remaining = categorical_columns(context.data)
        if remaining:
            message = f"Non-numeric outcome columns left unencoded: {remaining}"
            context.warnings.append(message)

        return context


class SplitStage:
    """Creates the regression and classification tasks.

    Regression rows are split uniformly at random; classification rows are
    stratified on the outcome.

    Sets on context: tasks
    """

    def execute(self, context: PipelineContext) -> PipelineContext:
        """Execute split stage."""
        context.reporter.report(
            ProgressUpdate(
                stage=PrepStage.SPLITTING,
                progress=0.80,
                message="Splitting data...",
            )
        )

        data = _require_data(context, "splitting")
        config = context.config

        if config.regression_target is not None:
            context.tasks["regression"] = make_task(
                "regression",
                data,
                config.regression_target,
                ProblemType.REGRESSION,
                train_fraction=config.train_fraction,
                seed=config.random_seed,
            )

        if config.classification_target is not None:
            context.tasks["classification"] = make_task(
                "classification",
                data,
                config.classification_target,
                ProblemType.CLASSIFICATION,
                train_fraction=config.train_fraction,
                seed=config.random_seed,
            )

        return context


# Default stage order for the pipeline
DEFAULT_STAGES: list[
    type[ValidationStage | ImputationStage | TypeNormalizationStage | EncodingStage | SplitStage]
] = [
    ValidationStage,
    ImputationStage,
    TypeNormalizationStage,
    EncodingStage,
    SplitStage,
]
