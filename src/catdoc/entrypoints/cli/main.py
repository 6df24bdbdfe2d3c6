"""CATDOC CLI entry point.

Defines the top-level ``catdoc`` command (via Click-Extra) and registers the
subcommands exposed by the project.

Currently available commands
- ``catdoc validate``: check every category, functor and natural
  transformation of a snapshot against the category-theory laws.
- ``catdoc trace path`` / ``catdoc trace domain``: find morphism paths inside
  a category, or functor routes into another category.
- ``catdoc search objects|functor|component``: free-text object search and
  mapping lookups.
- ``catdoc list categories|objects|morphisms`` and
  ``catdoc show object|category|functor``: browse the snapshot.

Examples
    $ catdoc --version
    $ catdoc validate --snapshot graph.json
    $ catdoc trace path A C --category algebra --snapshot graph.json
    $ catdoc search objects ring --snapshot graph.json
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from catdoc import __version__, config
from catdoc.logging import (
    DEFAULT_FLIGHT_RECORDER_CAPACITY,
    LoggingSettings,
    configure_logging,
    console_level,
    log_startup,
)

from .catalog import list_group, show_group
from .helpers.log_level_parser import parse_log_level
from .search import search as search_group
from .trace import trace as trace_group
from .validate import validate as validate_command

logger = logging.getLogger(__name__)


HELP = """CATDOC command-line interface.

    CATDOC models a knowledge graph as categories of documents connected by
    morphisms, with functors and natural transformations relating domains.
    The CLI verifies a snapshot against the category laws and traces paths
    within and across categories. It can also search and browse the
    snapshot's contents.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=config.default_log_path(),
    envvar="CATDOC_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=DEFAULT_FLIGHT_RECORDER_CAPACITY,
    hidden=True,
    envvar="CATDOC_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "at DEBUG granularity (unaffected by -v/-q) and writes them to "
        "--log-path when a WARNING/ERROR occurs, or on clean exit if "
        "--force-flush is set."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Force-flush the flight recorder buffer to --log-path on program exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="CATDOC_LOGGER_LEVELS",
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L catdoc.service_layer=DEBUG)."
    ),
    default=("click_extra=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def catdoc(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """CATDOC command-line interface."""
    settings = LoggingSettings(
        console_level=console_level(verbose_count, quiet_count),
        debug=debug,
        log_path=log_path,
        flight_recorder=flight_recorder,
        capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings, color=ctx.color is not False)
    log_startup(logger, settings, handlers, app_version=__version__)

    ctx.call_on_close(logging.shutdown)


catdoc.add_command(validate_command)
catdoc.add_command(trace_group)
catdoc.add_command(search_group)
catdoc.add_command(list_group)
catdoc.add_command(show_group)
