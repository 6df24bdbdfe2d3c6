"""CLI helpers for CATDOC.

Utilities used by the command-line interface: styled stderr messages with
emoji→ASCII fallbacks, logger-level option parsing, snapshot loading with
user-facing errors, and the `--snapshot`/`--json` options shared by the
snapshot-reading commands.
"""

from .messages import error, success, warn
from .options import echo_json, json_option, snapshot_option
from .snapshot import load_snapshot

__all__ = [
    "echo_json",
    "error",
    "json_option",
    "load_snapshot",
    "snapshot_option",
    "success",
    "warn",
]
