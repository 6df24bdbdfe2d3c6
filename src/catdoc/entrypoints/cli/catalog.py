"""``catdoc list`` and ``catdoc show``: browse the contents of a snapshot.

Listings print one entry per line on stdout and a "Showing N of M" footer on
stderr. ``show`` commands exit with 1 when the id is unknown.
"""

from __future__ import annotations

from pathlib import Path

import click
import click_extra as clickx

from catdoc.domain.entities import CategoryObject, Morphism
from catdoc.domain.snapshot import KnowledgeGraph
from catdoc.service_layer.catalog import (
    Listing,
    list_categories,
    list_morphisms,
    list_objects,
    show_category,
    show_functor,
    show_object,
)

from .helpers import echo_json, json_option, load_snapshot, snapshot_option

limit_option = click.option(
    "--limit",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum number of entries shown.  [default: all]",
)
offset_option = click.option(
    "--offset",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Number of entries skipped before the first one shown.",
)
category_option = click.option(
    "--category",
    "category_id",
    default=None,
    help="Only entries of this category.",
)


# ============================================================================
#                           catdoc list
# ============================================================================


@click.group("list", cls=clickx.ExtraGroup)
def list_group() -> None:
    """List categories, objects or morphisms."""


@list_group.command("categories")
@limit_option
@offset_option
@snapshot_option
@json_option
def list_categories_command(
    limit: int | None, offset: int, snapshot_path: Path | None, as_json: bool
) -> None:
    """List every category with its object and morphism counts."""
    graph = load_snapshot(snapshot_path)
    listing = list_categories(graph.categories, limit=limit, offset=offset)
    _echo_listing(
        listing,
        as_json,
        lambda s: f"{s.id}\t{s.name}\t{s.object_count} objects, "
        f"{s.morphism_count} morphisms",
    )


@list_group.command("objects")
@category_option
@click.option("--domain", default=None, help="Only objects of exactly this domain.")
@limit_option
@offset_option
@snapshot_option
@json_option
def list_objects_command(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    category_id: str | None,
    domain: str | None,
    limit: int | None,
    offset: int,
    snapshot_path: Path | None,
    as_json: bool,
) -> None:
    """List objects, from all categories unless --category is given."""
    graph = load_snapshot(snapshot_path)
    objects = _scoped(graph, category_id, "objects")
    listing = list_objects(objects, domain=domain, limit=limit, offset=offset)
    _echo_listing(listing, as_json, _object_line)


@list_group.command("morphisms")
@category_option
@click.option("--source", default=None, help="Only morphisms leaving this object.")
@click.option("--target", default=None, help="Only morphisms entering this object.")
@limit_option
@offset_option
@snapshot_option
@json_option
def list_morphisms_command(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    category_id: str | None,
    source: str | None,
    target: str | None,
    limit: int | None,
    offset: int,
    snapshot_path: Path | None,
    as_json: bool,
) -> None:
    """List morphisms, from all categories unless --category is given."""
    graph = load_snapshot(snapshot_path)
    morphisms = _scoped(graph, category_id, "morphisms")
    listing = list_morphisms(
        morphisms, source=source, target=target, limit=limit, offset=offset
    )
    _echo_listing(listing, as_json, _morphism_line)


# ============================================================================
#                           catdoc show
# ============================================================================


@click.group("show", cls=clickx.ExtraGroup)
def show_group() -> None:
    """Show one object, category or functor in detail."""


@show_group.command("object")
@click.argument("object_id")
@snapshot_option
@json_option
@click.pass_context
def show_object_command(
    ctx: click.Context, object_id: str, snapshot_path: Path | None, as_json: bool
) -> None:
    """Show OBJECT_ID with its outgoing and incoming morphisms."""
    detail = show_object(object_id, load_snapshot(snapshot_path))
    if as_json:
        echo_json(detail.to_dict())
    elif detail.obj is None:
        click.echo(f"Object {object_id} not found.")
    else:
        click.echo(_object_line(detail.obj))
        if detail.obj.content:
            click.echo(detail.obj.content)
        click.echo(f"Outgoing ({len(detail.outgoing)}):")
        for m in detail.outgoing:
            click.echo(f"  {_morphism_line(m)}")
        click.echo(f"Incoming ({len(detail.incoming)}):")
        for m in detail.incoming:
            click.echo(f"  {_morphism_line(m)}")
    if not detail.found:
        ctx.exit(1)


@show_group.command("category")
@click.argument("category_id")
@snapshot_option
@json_option
@click.pass_context
def show_category_command(
    ctx: click.Context, category_id: str, snapshot_path: Path | None, as_json: bool
) -> None:
    """Show CATEGORY_ID with all its objects and morphisms."""
    detail = show_category(category_id, load_snapshot(snapshot_path))
    if as_json:
        echo_json(detail.to_dict())
    elif detail.category is None:
        click.echo(f"Category {category_id} not found.")
    else:
        category = detail.category
        click.echo(f"{category.id}: {category.name}")
        click.echo(f"Objects ({len(category.objects)}):")
        for obj in category.objects:
            click.echo(f"  {_object_line(obj)}")
        click.echo(f"Morphisms ({len(category.morphisms)}):")
        for m in category.morphisms:
            click.echo(f"  {_morphism_line(m)}")
    if not detail.found:
        ctx.exit(1)


@show_group.command("functor")
@click.argument("functor_id")
@snapshot_option
@json_option
@click.pass_context
def show_functor_command(
    ctx: click.Context, functor_id: str, snapshot_path: Path | None, as_json: bool
) -> None:
    """Show FUNCTOR_ID with its object and morphism mappings."""
    detail = show_functor(functor_id, load_snapshot(snapshot_path))
    if as_json:
        echo_json(detail.to_dict())
    elif detail.functor is None:
        click.echo(f"Functor {functor_id} not found.")
    else:
        functor = detail.functor
        click.echo(
            f"{functor.id}: {functor.name} "
            f"({functor.source_category} → {functor.target_category})"
        )
        click.echo(f"Objects ({len(detail.object_mappings)}):")
        for source, target in detail.object_mappings:
            click.echo(f"  {source} ↦ {target}")
        click.echo(f"Morphisms ({len(detail.morphism_mappings)}):")
        for source, target in detail.morphism_mappings:
            click.echo(f"  {source} ↦ {target}")
    if not detail.found:
        ctx.exit(1)


# ============================================================================
#                           Helpers
# ============================================================================


def _scoped(graph: KnowledgeGraph, category_id: str | None, kind: str) -> list:
    """Objects or morphisms of one category, or of the whole snapshot."""
    if category_id is None:
        return graph.all_objects() if kind == "objects" else graph.all_morphisms()
    category = graph.get_category(category_id)
    if category is None:
        raise click.ClickException(f"Category '{category_id}' not found in snapshot.")
    return list(category.objects if kind == "objects" else category.morphisms)


def _echo_listing(listing: Listing, as_json: bool, render) -> None:
    if as_json:
        echo_json(listing.to_dict())
        return
    for item in listing.items:
        click.echo(render(item))
    click.echo(f"Showing {len(listing.items)} of {listing.total_count}.", err=True)


def _object_line(obj: CategoryObject) -> str:
    return f"{obj.id}\t{obj.title}\t[{obj.domain}]"


def _morphism_line(m: Morphism) -> str:
    return f"{m.id}\t{m.source} -[{m.name}]-> {m.target}"
