"""Task bundle serialization and deserialization."""

from __future__ import annotations

import logging
import pickle
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from ..config import ProblemType
from ..core import Task
from ..errors import BundleNotFoundError, InvalidDataError

logger = logging.getLogger(__name__)

# Current bundle version
BUNDLE_VERSION = "1.0"


@dataclass(eq=False)
class TaskBundle:
    """Named tasks saved together.

    The tasks of one pipeline run share a single table; pickling the bundle
    keeps that sharing, so the table is stored once.
    """

    version: str
    created_at: str
    tasks: dict[str, Task] = field(default_factory=dict)

    def get(self, name: str) -> Task | None:
        """Task by name."""
        return self.tasks.get(name)

    def by_problem_type(self, problem_type: ProblemType) -> list[Task]:
        """Tasks of the given problem type."""
        return [t for t in self.tasks.values() if t.problem_type == problem_type]

    def get_info(self) -> dict[str, Any]:
        """Plain-dict description of the bundle."""
        return {
            "version": self.version,
            "created_at": self.created_at,
            "tasks": {name: task.summary() for name, task in self.tasks.items()},
        }


def create_bundle(tasks: dict[str, Task]) -> TaskBundle:
    """Create a new task bundle.

    Args:
        tasks: Tasks keyed by name.

    Returns:
        TaskBundle ready for serialization.
    """
    return TaskBundle(
        version=BUNDLE_VERSION,
        created_at=datetime.now().isoformat(),
        tasks=dict(tasks),
    )


def save_bundle(bundle: TaskBundle, path: str | Path) -> None:
    """Save a task bundle to disk.

    Args:
        bundle: The bundle to save.
        path: Path to save the bundle (typically .pkl extension).
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "wb") as f:
        pickle.dump(bundle, f, protocol=pickle.HIGHEST_PROTOCOL)

    logger.info(f"Saved {len(bundle.tasks)} tasks to {path}")


def load_bundle(path: str | Path) -> TaskBundle:
    """Load a task bundle from disk.

    Args:
        path: Path to the saved bundle.

    Returns:
        Loaded TaskBundle.

    Raises:
        BundleNotFoundError: If the file does not exist.
        InvalidDataError: If the file does not hold a TaskBundle.
    """
    path = Path(path)

    if not path.exists():
        raise BundleNotFoundError(str(path))

    with open(path, "rb") as f:
        bundle = pickle.load(f)

    if not isinstance(bundle, TaskBundle):
        raise InvalidDataError(f"{path} does not contain a task bundle")

    return bundle
