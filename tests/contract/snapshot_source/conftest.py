"""Pytest fixtures for SnapshotSource contract tests.

Provided fixtures
-----------------
- **make_source**: Parametrized factory that turns a JSON-style document into
  a `SnapshotSource` of the requested backend. `"memory"` decodes the
  document up front and serves the resulting graph; `"json"` writes it to a
  file under tmp_path and reads it back on `load()`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import pytest

from catdoc.adapters.snapshot import InMemorySnapshotSource, JsonFileSnapshotSource
from catdoc.adapters.snapshot.json_file import decode_knowledge_graph

if TYPE_CHECKING:
    from catdoc.interfaces.snapshot_source import SnapshotSource


@pytest.fixture(params=["memory", "json"])
def make_source(
    request: pytest.FixtureRequest, write_snapshot
) -> Callable[[dict[str, Any]], SnapshotSource]:
    """Return a factory building the requested backend from a document."""

    def _make(document: dict[str, Any]) -> SnapshotSource:
        match request.param:
            case "memory":
                return InMemorySnapshotSource(decode_knowledge_graph(document))
            case "json":
                return JsonFileSnapshotSource(write_snapshot(document))
            case _:
                raise ValueError(f"unknown source type: {request.param}")

    return _make
