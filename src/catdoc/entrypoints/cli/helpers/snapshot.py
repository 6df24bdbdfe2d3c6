"""Snapshot loading for CLI commands.

Resolves the snapshot location (explicit option or `CATDOC_SNAPSHOT`) and
turns loading failures into `click.ClickException`s with guidance.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from catdoc import config
from catdoc.adapters.snapshot import JsonFileSnapshotSource
from catdoc.domain.snapshot import KnowledgeGraph
from catdoc.interfaces.errors import SnapshotError

logger = logging.getLogger(__name__)

MISSING_SNAPSHOT_MSG = (
    f"No snapshot given and {config.SNAPSHOT_ENV_VAR} is not set.\n\n"
    "Pass one explicitly, e.g.:\n"
    "  catdoc validate --snapshot graph.json\n"
    "or set it once:\n"
    f"  export {config.SNAPSHOT_ENV_VAR}=graph.json"
)


def load_snapshot(path: Path | None) -> KnowledgeGraph:
    """Load the knowledge graph the CLI should operate on.

    Args:
        path: Explicit snapshot path, or None to fall back to the environment.

    Returns:
        KnowledgeGraph: The decoded snapshot.

    Raises:
        click.ClickException: If no location is configured, or the snapshot
            is missing, unreadable or malformed.
    """
    if path is None:
        try:
            path = config.get_snapshot_path()
        except config.SnapshotPathNotSetError as e:
            raise click.ClickException(MISSING_SNAPSHOT_MSG) from e

    logger.info("Loading snapshot from %s", path)
    try:
        return JsonFileSnapshotSource(path).load()
    except SnapshotError as e:
        raise click.ClickException(str(e)) from e
