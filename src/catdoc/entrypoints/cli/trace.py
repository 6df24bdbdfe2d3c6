"""``catdoc trace``: find paths inside a category or routes across categories."""

from __future__ import annotations

from pathlib import Path

import click
import click_extra as clickx

from catdoc.service_layer.tracing import (
    DomainTrace,
    PathTrace,
    trace_domain_path,
    trace_path,
)
from catdoc.service_layer.traversal import MAX_DEPTH

from .helpers import echo_json, json_option, load_snapshot, snapshot_option


@click.group(cls=clickx.ExtraGroup)
def trace() -> None:
    """Trace morphism paths and cross-category routes."""


@trace.command("path")
@click.argument("source")
@click.argument("target")
@click.option(
    "--category", "category_id", required=True, help="Id of the category to search."
)
@click.option("--all", "find_all", is_flag=True, help="List every simple path.")
@click.option(
    "--max-depth",
    type=click.IntRange(min=0),
    default=MAX_DEPTH,
    show_default=True,
    help="Longest path (in morphisms) considered with --all.",
)
@snapshot_option
@json_option
@click.pass_context
def trace_path_command(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    source: str,
    target: str,
    category_id: str,
    find_all: bool,
    max_depth: int,
    snapshot_path: Path | None,
    as_json: bool,
) -> None:
    """Find a path of morphisms from SOURCE to TARGET."""
    graph = load_snapshot(snapshot_path)
    category = graph.get_category(category_id)
    if category is None:
        raise click.ClickException(f"Category '{category_id}' not found in snapshot.")

    result = trace_path(
        source, target, category, find_all=find_all, max_depth=max_depth
    )
    if as_json:
        echo_json(result.to_dict())
    else:
        _echo_path_trace(result)
    if not result.found:
        ctx.exit(1)


@trace.command("domain")
@click.argument("source_object")
@click.argument("target_category")
@snapshot_option
@json_option
@click.pass_context
def trace_domain_command(
    ctx: click.Context,
    source_object: str,
    target_category: str,
    snapshot_path: Path | None,
    as_json: bool,
) -> None:
    """Find functor routes from SOURCE_OBJECT into TARGET_CATEGORY."""
    graph = load_snapshot(snapshot_path)
    result = trace_domain_path(source_object, target_category, graph)
    if as_json:
        echo_json(result.to_dict())
    else:
        _echo_domain_trace(result)
    if not result.found:
        ctx.exit(1)


def _echo_path_trace(result: PathTrace) -> None:
    if not result.found:
        click.echo(f"No path from {result.source} to {result.target}.")
        return
    for path in result.paths:
        if not path:
            click.echo(f"{result.source} (trivial path)")
            continue
        hops = " ".join(f"-[{m.name}]-> {m.target}" for m in path)
        click.echo(f"{result.source} {hops}")


def _echo_domain_trace(result: DomainTrace) -> None:
    if not result.found:
        click.echo(f"No route from {result.source} to {result.target_category}.")
        return
    for route in result.routes:
        steps = " ".join(f"=[{s.name}]=>" for s in route.steps)
        parts = [result.source, steps, route.result_object] if steps else [
            result.source,
            "(already in target category)",
        ]
        click.echo(" ".join(parts))
