"""Persisting prepared tasks."""

from __future__ import annotations

from .bundle import BUNDLE_VERSION, TaskBundle, create_bundle, load_bundle, save_bundle

__all__ = [
    "BUNDLE_VERSION",
    "TaskBundle",
    "create_bundle",
    "load_bundle",
    "save_bundle",
]
