"""Train/test partitioning of row indices.

Both splitters return sorted 0-based positional row indices. Every row
lands in exactly one of the two sets.
"""

from __future__ import annotations

import logging
import math
from typing import Any

import numpy as np
import pandas as pd
from numpy.typing import NDArray
from sklearn.model_selection import train_test_split

from ..core import Split
from ..errors import InvalidConfigError, InvalidStratificationTargetError

logger = logging.getLogger(__name__)


def train_size(n_rows: int, train_fraction: float) -> int:
    """Number of training rows: floor(n_rows * train_fraction).

    Raises:
        InvalidConfigError: If the fraction is outside (0, 1) or leaves one
            of the partitions empty.
    """
    if not 0 < train_fraction < 1:
        raise InvalidConfigError(f"train_fraction must be between 0 and 1, got {train_fraction}")

    # Absorb float error so that e.g. 100 * 0.29 yields 29
    n_train = math.floor(n_rows * train_fraction + 1e-9)
    if n_train < 1 or n_train >= n_rows:
        raise InvalidConfigError(
            f"train_fraction {train_fraction} leaves an empty partition for {n_rows} rows"
        )
    return n_train


def _as_split(train: NDArray[Any], test: NDArray[Any]) -> Split:
    return Split(
        train_rows=np.sort(np.asarray(train, dtype=np.int64)),
        test_rows=np.sort(np.asarray(test, dtype=np.int64)),
    )


def random_split(n_rows: int, train_fraction: float, seed: int) -> Split:
    """Select training rows uniformly at random without replacement.

    Args:
        n_rows: Number of rows in the table.
        train_fraction: Fraction of rows assigned to training.
        seed: Random seed.

    Returns:
        Split with floor(n_rows * train_fraction) training rows.
    """
    n_train = train_size(n_rows, train_fraction)
    train, test = train_test_split(
        np.arange(n_rows, dtype=np.int64),
        train_size=n_train,
        random_state=seed,
        shuffle=True,
    )
    logger.info(f"Random split: {n_train} train rows, {n_rows - n_train} test rows")
    return _as_split(train, test)


def _allocate(counts: pd.Series, n_train: int, n_rows: int) -> pd.Series:
    """Training rows per level, proportional to level size.

    Quotas are floored and the leftover rows go to the levels with the largest
    remainders, so the allocations sum to ``n_train``.
    """
    scaled = counts.to_numpy(dtype=np.int64) * n_train
    allocation = scaled // n_rows
    leftover = n_train - int(allocation.sum())
    if leftover:
        # Stable sort keeps level order among equal remainders
        order = np.argsort(-(scaled % n_rows), kind="stable")
        allocation[order[:leftover]] += 1
    return pd.Series(allocation, index=counts.index)


def stratified_split(
    outcome: pd.Series | NDArray[Any],
    train_fraction: float,
    seed: int,
) -> Split:
    """Select training rows so outcome level proportions are preserved.

    Each level contributes a proportional share of the training rows, drawn
    uniformly at random from that level's rows. A level too small for a share
    in both partitions ends up in only one of them.

    Args:
        outcome: Outcome value per row.
        train_fraction: Fraction of rows assigned to training.
        seed: Random seed.

    Returns:
        Split with floor(n_rows * train_fraction) training rows.

    Raises:
        InvalidStratificationTargetError: If the outcome has missing values
            or fewer than 2 levels.
    """
    values = pd.Series(outcome).reset_index(drop=True)
    name = str(values.name) if values.name is not None else None

    if values.isna().any():
        raise InvalidStratificationTargetError(name, "outcome has missing values")

    counts = values.value_counts(sort=False)
    counts = counts[counts > 0]
    if len(counts) < 2:
        raise InvalidStratificationTargetError(
            name, f"needs at least 2 observed levels, got {len(counts)}"
        )

    n_rows = len(values)
    n_train = train_size(n_rows, train_fraction)
    allocation = _allocate(counts, n_train, n_rows)

    rng = np.random.default_rng(seed)
    positions = np.arange(n_rows, dtype=np.int64)
    train_parts = [
        rng.choice(positions[(values == level).to_numpy()], size=int(k), replace=False)
        for level, k in allocation.items()
    ]
    train = np.concatenate(train_parts)
    test = np.setdiff1d(positions, train)

    logger.info(
        f"Stratified split on {name or 'outcome'}: {n_train} train rows, "
        f"{n_rows - n_train} test rows"
    )
    return _as_split(train, test)
