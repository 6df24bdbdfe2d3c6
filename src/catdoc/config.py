"""Configuration utilities for CATDOC.

Environment variable names and the default locations derived from them live
here so the CLI and the tests agree on them.
"""

import os
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "catdoc"  # pragma: no mutate
SNAPSHOT_ENV_VAR = "CATDOC_SNAPSHOT"  # pragma: no mutate
LOG_FILE_NAME = "latest.log"  # pragma: no mutate


class SnapshotPathNotSetError(Exception):
    """Raised when the CATDOC_SNAPSHOT environment variable is not set."""


def get_snapshot_path() -> Path:
    """Get the snapshot path from the environment.

    Returns:
        The value of the `CATDOC_SNAPSHOT` environment variable as a path.

    Raises:
        SnapshotPathNotSetError: If `CATDOC_SNAPSHOT` is unset or empty.
    """
    if not (path := os.environ.get(SNAPSHOT_ENV_VAR)):
        raise SnapshotPathNotSetError
    return Path(path)


def default_log_path() -> Path:
    """Per-user location of the flight-recorder log."""
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILE_NAME
