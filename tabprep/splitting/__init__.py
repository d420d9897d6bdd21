"""Train/test splitting and task construction."""

from __future__ import annotations

from .splitter import random_split, stratified_split, train_size
from .tasks import make_task

__all__ = [
    "make_task",
    "random_split",
    "stratified_split",
    "train_size",
]
