"""Result types for tabprep.

This module contains the dataclasses for row splits, task descriptors and
the pipeline result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd
from numpy.typing import NDArray

if TYPE_CHECKING:
    from ..config import ProblemType


@dataclass(eq=False)
class Split:
    """Partition of positional row indices into training and test sets."""

    train_rows: NDArray[np.int64]
    test_rows: NDArray[np.int64]

    @property
    def n_rows(self) -> int:
        """Total number of rows covered by the split."""
        return int(len(self.train_rows) + len(self.test_rows))


@dataclass(eq=False)
class Task:
    """A learning task defined over a prepared table.

    The task references the table rather than copying it; it only adds the
    outcome column and the training row indices.

    Attributes:
        name: Task name (e.g. "regression").
        problem_type: Classification or regression.
        data: The prepared table the task is defined on.
        target: Outcome column name.
        train_rows: Sorted 0-based positional indices of the training rows.
    """

    name: str
    problem_type: ProblemType
    data: pd.DataFrame = field(repr=False)
    target: str
    train_rows: NDArray[np.int64] = field(repr=False)

    @property
    def features(self) -> list[str]:
        """Covariate names: every column except the outcome."""
        return [str(c) for c in self.data.columns if c != self.target]

    @property
    def n_rows(self) -> int:
        """Number of rows in the underlying table."""
        return len(self.data)

    @property
    def test_rows(self) -> NDArray[np.int64]:
        """Rows not selected for training."""
        return np.setdiff1d(np.arange(self.n_rows, dtype=np.int64), self.train_rows)

    def train_data(self) -> pd.DataFrame:
        """Training rows of the table."""
        return self.data.iloc[self.train_rows]

    def test_data(self) -> pd.DataFrame:
        """Test rows of the table."""
        return self.data.iloc[self.test_rows]

    def summary(self) -> dict[str, Any]:
        """Plain-dict description of the task."""
        return {
            "name": self.name,
            "problem_type": self.problem_type.value,
            "target": self.target,
            "features": self.features,
            "n_rows": self.n_rows,
            "n_train": int(len(self.train_rows)),
            "n_test": int(self.n_rows - len(self.train_rows)),
        }


@dataclass(eq=False)
class PipelineResult:
    """Complete preprocessing result.

    This is the public-facing result returned by Pipeline.run().
    """

    data: pd.DataFrame = field(repr=False)
    tasks: dict[str, Task]
    imputed_columns: list[str] = field(default_factory=list)
    indicator_columns: list[str] = field(default_factory=list)
    encoded_columns: list[str] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    warnings: list[str] = field(default_factory=list)

    @property
    def regression(self) -> Task | None:
        """The regression task, if configured."""
        return self.tasks.get("regression")

    @property
    def classification(self) -> Task | None:
        """The classification task, if configured."""
        return self.tasks.get("classification")
