"""``catdoc search``: find objects by text and resolve mapping entries.

Every subcommand exits with 1 when nothing matched, so the commands can be
used as predicates in shell scripts.
"""

from __future__ import annotations

from pathlib import Path

import click
import click_extra as clickx

from catdoc.service_layer.search import (
    DEFAULT_SEARCH_LIMIT,
    search_by_functor,
    search_by_natural_transformation,
    search_objects,
)

from .helpers import echo_json, json_option, load_snapshot, snapshot_option


@click.group(cls=clickx.ExtraGroup)
def search() -> None:
    """Search objects, functor images and natural-transformation components."""


@search.command("objects")
@click.argument("query", required=False, default="")
@click.option("--domain", default=None, help="Only objects of exactly this domain.")
@click.option(
    "--limit",
    type=click.IntRange(min=0),
    default=DEFAULT_SEARCH_LIMIT,
    show_default=True,
    help="Maximum number of matches shown.",
)
@snapshot_option
@json_option
@click.pass_context
def search_objects_command(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    query: str,
    domain: str | None,
    limit: int,
    snapshot_path: Path | None,
    as_json: bool,
) -> None:
    """Find objects whose id, title, domain or content contains QUERY.

    Matching ignores case. Without QUERY every object (of --domain) matches.
    """
    graph = load_snapshot(snapshot_path)
    result = search_objects(graph.all_objects(), query, domain=domain, limit=limit)
    if as_json:
        echo_json(result.to_dict())
    else:
        for obj in result.matches:
            click.echo(f"{obj.id}\t{obj.title}\t[{obj.domain}]")
        click.echo(
            f"{len(result.matches)} of {result.total_matches} match(es).", err=True
        )
    if not result.found:
        ctx.exit(1)


@search.command("functor")
@click.argument("functor_id")
@click.argument("source_id")
@snapshot_option
@json_option
@click.pass_context
def search_functor_command(
    ctx: click.Context,
    functor_id: str,
    source_id: str,
    snapshot_path: Path | None,
    as_json: bool,
) -> None:
    """Show what FUNCTOR_ID maps the object or morphism SOURCE_ID to."""
    graph = load_snapshot(snapshot_path)
    functor = graph.get_functor(functor_id)
    if functor is None:
        raise click.ClickException(f"Functor '{functor_id}' not found in snapshot.")

    result = search_by_functor(functor, source_id)
    if as_json:
        echo_json(result.to_dict())
    elif result.found:
        click.echo(f"{functor_id}({source_id}) = {result.mapped_to} ({result.kind})")
    else:
        click.echo(f"Functor {functor_id} does not map {source_id}.")
    if not result.found:
        ctx.exit(1)


@search.command("component")
@click.argument("nt_id")
@click.argument("object_id")
@snapshot_option
@json_option
@click.pass_context
def search_component_command(
    ctx: click.Context,
    nt_id: str,
    object_id: str,
    snapshot_path: Path | None,
    as_json: bool,
) -> None:
    """Show the component of natural transformation NT_ID at OBJECT_ID."""
    graph = load_snapshot(snapshot_path)
    nt = graph.get_natural_transformation(nt_id)
    if nt is None:
        raise click.ClickException(
            f"Natural transformation '{nt_id}' not found in snapshot."
        )

    result = search_by_natural_transformation(nt, object_id)
    if as_json:
        echo_json(result.to_dict())
    else:
        arrow = f"{result.source_functor} => {result.target_functor}"
        if result.found:
            click.echo(f"{nt_id}_{object_id} = {result.component} ({arrow})")
        else:
            click.echo(f"{nt_id} ({arrow}) has no component at {object_id}.")
    if not result.found:
        ctx.exit(1)
