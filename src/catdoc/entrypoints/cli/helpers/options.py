"""Options shared by the snapshot-reading commands."""

from __future__ import annotations

import json
from pathlib import Path

import click

SNAPSHOT_OPTION_HELP = (
    "Path to the JSON snapshot. Defaults to the CATDOC_SNAPSHOT environment variable."
)

snapshot_option = click.option(
    "--snapshot",
    "snapshot_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=SNAPSHOT_OPTION_HELP,
)
json_option = click.option(
    "--json", "as_json", is_flag=True, help="Print the result as JSON."
)


def echo_json(data: object) -> None:
    """Write `data` to stdout as indented UTF-8 JSON."""
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))
