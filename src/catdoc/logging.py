"""Logging setup for the CATDOC command line.

Two handlers hang off the root logger:

- a Rich console handler on stderr whose threshold follows ``-v``/``-q``;
- a "flight recorder": a `MemoryHandler` that keeps recent records at DEBUG
  granularity and writes them to a log file once something goes wrong.

Library code never configures logging; it only uses module loggers.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from catdoc import config

if TYPE_CHECKING:
    from logging import Handler, Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "catdoc"
DEFAULT_FLIGHT_RECORDER_CAPACITY = 2000

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    """Logging choices collected from the global CLI options.

    Attributes:
        console_level: Threshold of the console handler.
        debug: Developer mode; console drops to DEBUG and shows source paths.
        log_path: Destination of the flight-recorder file.
        flight_recorder: Whether the flight recorder is attached at all.
        capacity: Number of records the flight recorder buffers.
        force_flush: Write the buffer on exit even without a WARNING.
        logger_levels: Per-logger minimum levels (name → numeric level).
    """

    console_level: int = logging.WARNING
    debug: bool = False
    log_path: Path | None = None
    flight_recorder: bool = True
    capacity: int = DEFAULT_FLIGHT_RECORDER_CAPACITY
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)


def console_level(verbose_count: int, quiet_count: int) -> int:
    """Shift WARNING one level per ``-v`` (down) or ``-q`` (up).

    The result is clamped to the DEBUG..CRITICAL range.
    """
    level = logging.WARNING - 10 * verbose_count + 10 * quiet_count
    return max(logging.DEBUG, min(logging.CRITICAL, level))


class ThirdPartyPrefixFilter(logging.Filter):
    """Set `record.prefix` to ``[package]`` for records from outside CATDOC.

    Project records get an empty prefix. Nothing is ever filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.partition('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the Rich console handler.

    Args:
        level: Minimum level shown; forced to DEBUG in debug mode.
        debug_mode: Show timestamps, logger names and source locations.
        color: Allow Rich to emit colour.

    Returns:
        RichHandler: Handler writing to stderr.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = DEFAULT_FLIGHT_RECORDER_CAPACITY,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder.

    Records are buffered in memory and written to `path` (truncated on the
    first write of the run) when a record at `flush_level` or above arrives,
    when the buffer is full, or on close if `flush_on_close` is set. Missing
    parent directories are created.

    Returns:
        MemoryHandler: Buffering handler whose target is a FileHandler.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LoggingSettings, color: bool = True) -> list[Handler]:
    """Attach the CATDOC handlers to the root logger.

    Replaces any handlers already on the root logger, leaves filtering to the
    handlers, then applies `settings.logger_levels`.

    Returns:
        list[Handler]: The handlers now attached to the root logger.
    """
    handlers: list[Handler] = [
        config_console_handler(
            level=settings.console_level, debug_mode=settings.debug, color=color
        )
    ]
    if settings.flight_recorder and settings.log_path is not None:
        handlers.append(
            config_flight_recorder(
                path=settings.log_path,
                capacity=settings.capacity,
                flush_on_close=settings.force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(
    logger: Logger,
    settings: LoggingSettings,
    handlers: list[Handler],
    *,
    app_version: str,
) -> None:
    """Log a one-line INFO banner followed by DEBUG diagnostics.

    The diagnostics end up in the flight-recorder file, which makes a
    flushed log self-describing: interpreter, platform, process, working
    directory, snapshot location, handlers and logger overrides.
    """
    logger.info(
        "CATDOC %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.console_level),
        "ON" if settings.flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug(
        "Snapshot: %s=%s",
        config.SNAPSHOT_ENV_VAR,
        os.environ.get(config.SNAPSHOT_ENV_VAR) or "<unset>",
    )
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path or "<none>",
            settings.capacity,
            settings.force_flush,
        )
    overrides = {
        name: logging.getLevelName(level)
        for name, level in settings.logger_levels.items()
    }
    logger.debug("Per-logger overrides: %s", overrides or "<none>")
