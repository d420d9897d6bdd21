"""Shared test fixtures and utilities for tabprep tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd
import pytest

from tabprep import PipelineConfig

CATEGORICAL_COLUMNS = ["cp", "restecg", "slope", "ca", "thal"]

# =============================================================================
# Test Data Fixtures
# =============================================================================


def make_heart_data(n_samples: int = 300, seed: int = 42) -> pd.DataFrame:
    """Create a heart-disease style dataset.

    Integer-coded categorical columns are stored as numbers, ``ca`` and
    ``thal`` are floats because they contain missing values, and the binary
    ``target`` has exactly half ones.
    """
    rng = np.random.default_rng(seed)

    data = {
        "age": rng.integers(29, 78, n_samples),
        "sex": rng.integers(0, 2, n_samples),
        "cp": rng.integers(1, 5, n_samples),
        "trestbps": rng.integers(94, 200, n_samples),
        "chol": rng.normal(246, 50, n_samples).round(),
        "fbs": rng.integers(0, 2, n_samples),
        "restecg": rng.integers(0, 3, n_samples),
        "thalach": rng.integers(71, 202, n_samples),
        "exang": rng.integers(0, 2, n_samples),
        "oldpeak": rng.uniform(0, 6, n_samples).round(1),
        "slope": rng.integers(1, 4, n_samples),
        "ca": rng.integers(0, 4, n_samples).astype(float),
        "thal": rng.choice([3.0, 6.0, 7.0], n_samples),
    }
    frame = pd.DataFrame(data)

    frame.loc[[3, 50, 120, 200, 299], "oldpeak"] = np.nan
    frame.loc[[10, 80, 160, 240], "ca"] = np.nan
    frame.loc[[25, 175], "thal"] = np.nan

    target = np.array([0, 1] * (n_samples // 2) + [0] * (n_samples % 2))
    frame["target"] = rng.permutation(target)

    return frame


@pytest.fixture
def heart_data() -> pd.DataFrame:
    """300-row heart-disease style dataset with missing values.

    Returns:
        DataFrame with 5 missing ``oldpeak``, 4 missing ``ca`` and 2 missing
        ``thal`` values, and a balanced binary ``target``.
    """
    return make_heart_data()


@pytest.fixture
def complete_data() -> pd.DataFrame:
    """Small dataset without missing values.

    Returns:
        DataFrame with numeric, integer-coded and string columns.
    """
    return pd.DataFrame(
        {
            "x": [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0],
            "level": [2, 1, 3, 1, 2, 3, 1, 2, 3, 1],
            "color": ["red", "blue", "red", "green", "blue", "red", "green", "blue", "red", "green"],
            "y": [0, 1, 0, 1, 0, 1, 0, 1, 0, 1],
        }
    )


@pytest.fixture
def heart_csv(heart_data: pd.DataFrame, temp_dir: Path) -> Path:
    """Write the heart dataset to CSV using '?' for missing cells."""
    path = temp_dir / "heart.csv"
    heart_data.to_csv(path, index=False, na_rep="?")
    return path


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def heart_config() -> PipelineConfig:
    """Config preparing both tasks on the heart dataset."""
    return (
        PipelineConfig.builder()
        .regression_target("chol")
        .classification_target("target")
        .categorical_columns(CATEGORICAL_COLUMNS)
        .train_fraction(0.7)
        .random_seed(42)
        .build()
    )


# =============================================================================
# Utility Fixtures
# =============================================================================


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs.

    Yields:
        Path to temporary directory (cleaned up after test).
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def progress_tracker() -> dict[str, Any]:
    """Create a progress tracker for testing callbacks.

    Returns:
        Dictionary to store progress updates.
    """
    tracker: dict[str, Any] = {
        "updates": [],
        "stages": [],
        "final_progress": 0.0,
    }
    return tracker


def make_progress_callback(tracker: dict[str, Any]):
    """Create a progress callback that stores updates in the tracker."""
    from tabprep import ProgressUpdate

    def callback(update: ProgressUpdate) -> None:
        tracker["updates"].append(update)
        tracker["stages"].append(update.stage)
        tracker["final_progress"] = update.progress

    return callback


# =============================================================================
# Markers
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (full pipeline)"
    )
