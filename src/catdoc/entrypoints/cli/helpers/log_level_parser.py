"""Parsing of ``-L NAME=LEVEL`` logger-level options.

Values arrive either as a tuple (repeated flags) or as a single string (from
the ``CATDOC_LOGGER_LEVELS`` environment variable) holding comma or
whitespace separated pairs.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _split(value: str | list[str] | tuple[str, ...]) -> list[str]:
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL pairs into a name→level dict.

    `DEFAULT_LIB_LEVELS` is applied first; later pairs override earlier ones.

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split(value or ()):
        name, sep, level_name = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        level = logging.getLevelName(level_name.strip().upper())
        if not isinstance(level, int):
            raise click.BadParameter(f"Invalid log level: {level_name}")
        levels[name.strip()] = level
    return levels
