"""``catdoc validate``: verify a snapshot against the category laws.

Errors and warnings go to **stderr**, one per line; with ``--json`` the full
report is written to **stdout** instead. The exit code is 1 when the
snapshot is invalid, or when ``--strict`` is set and any warning was raised.
"""

from __future__ import annotations

from pathlib import Path

import click

from catdoc.service_layer.validation import validate_knowledge_graph

from .helpers import (
    echo_json,
    error,
    load_snapshot,
    snapshot_option,
    success,
    warn,
)


@click.command()
@snapshot_option
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON.")
@click.option(
    "--strict", is_flag=True, help="Treat warnings as failures for the exit code."
)
@click.pass_context
def validate(
    ctx: click.Context, snapshot_path: Path | None, as_json: bool, strict: bool
) -> None:
    """Validate categories, functors and natural transformations."""
    graph = load_snapshot(snapshot_path)
    report = validate_knowledge_graph(graph)

    if as_json:
        echo_json(report.to_dict())
    else:
        for message in report.errors:
            error(message)
        for message in report.warnings:
            warn(message)
        summary = (
            f"Checked {report.categories_checked} categories, "
            f"{report.functors_checked} functors, "
            f"{report.natural_transformations_checked} natural transformations: "
            f"{len(report.errors)} error(s), {len(report.warnings)} warning(s)."
        )
        if report.is_valid:
            success(summary)
        else:
            click.echo(summary, err=True)

    if not report.is_valid or (strict and report.warnings):
        ctx.exit(1)
