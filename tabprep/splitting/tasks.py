"""Building task descriptors over a prepared table."""

from __future__ import annotations

import pandas as pd

from ..config import ProblemType
from ..core import Task
from ..errors import ColumnNotFoundError
from .splitter import random_split, stratified_split


def make_task(
    name: str,
    data: pd.DataFrame,
    target: str,
    problem_type: ProblemType,
    train_fraction: float = 0.7,
    seed: int = 42,
    stratify: bool | None = None,
) -> Task:
    """Create a task and select its training rows.

    Regression tasks use a uniform random split; classification tasks are
    stratified on the outcome unless ``stratify`` is False.

    Args:
        name: Task name.
        data: Prepared table. The task references it without copying.
        target: Outcome column.
        problem_type: Classification or regression.
        train_fraction: Fraction of rows assigned to training.
        seed: Random seed.
        stratify: Override the default split mode for the problem type.

    Returns:
        The task descriptor.

    Raises:
        ColumnNotFoundError: If the target is not in the table.
    """
    if target not in data.columns:
        raise ColumnNotFoundError(target, [str(c) for c in data.columns])

    if stratify is None:
        stratify = problem_type == ProblemType.CLASSIFICATION

    if stratify:
        split = stratified_split(data[target], train_fraction, seed)
    else:
        split = random_split(len(data), train_fraction, seed)

    return Task(
        name=name,
        problem_type=problem_type,
        data=data,
        target=target,
        train_rows=split.train_rows,
    )
