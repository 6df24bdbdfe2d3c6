"""Snapshot source adapters."""

from .json_file import JsonFileSnapshotSource
from .memory import InMemorySnapshotSource

__all__ = ["InMemorySnapshotSource", "JsonFileSnapshotSource"]
