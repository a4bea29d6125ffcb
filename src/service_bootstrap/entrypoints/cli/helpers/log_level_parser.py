"""Parse ``-L NAME=LEVEL`` logger-level options.

Values may be repeated on the command line or given as one comma/space
separated string (as they arrive from an environment variable).
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"asyncio": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten ``value`` into non-empty ``NAME=LEVEL`` fragments."""
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Starts from DEFAULT_LIB_LEVELS; later pairs override earlier ones. Level
    names are case-insensitive standard logging names (DEBUG, INFO, ...).

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    known_levels = logging.getLevelNamesMapping()
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, separator, level_str = item.partition("=")
        if not separator:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        if (lvl := known_levels.get(level_str.strip().upper())) is None:
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
