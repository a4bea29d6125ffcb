"""Logging setup for the service-bootstrap CLI.

Two handlers can be installed on the root logger:

- a Rich console handler on stderr, filtered by the -v/-q verbosity;
- a "flight recorder", a `MemoryHandler` that keeps recent records at DEBUG
  and writes them to a file once something goes wrong (a WARNING or worse),
  or on exit when asked to.

Library code never calls into this module; it only logs through
``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "service_bootstrap"

CONSOLE_FORMAT = "%(origin)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


class OriginFilter(logging.Filter):
    """Tag each record with where it came from.

    Records from outside the project get ``record.origin`` set to the top-level
    package of their logger, e.g. ``[asyncio]``; project records get ``""``.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        own = record.name == PROJECT_PREFIX or record.name.startswith(PROJECT_PREFIX + ".")
        record.origin = "" if own else f"[{record.name.partition('.')[0]}]"
        return True


def console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    In debug mode everything down to DEBUG is shown, with timestamps, logger
    names and source locations. Otherwise records are shown at ``level`` and
    above, prefixed with their origin when they come from another package.

    ``color=False`` mirrors click-extra's ``--no-color``.
    """
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system="auto" if color else None, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(OriginFilter())
    return handler


def flight_recorder_handler(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build a flight recorder writing to ``path``.

    Args:
        path: File the buffered records are written to (truncated on open).
        capacity: Records kept in memory before an automatic flush.
        flush_level: Records at this level or above flush the buffer.
        flush_on_close: Also flush whatever is buffered when logging shuts down.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(  # pylint: disable=too-many-arguments
    *,
    level: int,
    debug_mode: bool = False,
    color: bool = True,
    log_path: Path | None = None,
    flight_recorder_capacity: int = 2000,
    force_flush: bool = False,
    logger_levels: dict[str, int] | None = None,
) -> list[logging.Handler]:
    """Replace the root logger's handlers and return the ones installed.

    The root logger itself lets everything through; each handler applies its
    own threshold. ``logger_levels`` sets levels on the named loggers, so those
    overrides hold for the console and the flight recorder alike.
    ``log_path=None`` leaves the flight recorder out.
    """
    handlers: list[logging.Handler] = [
        console_handler(level=level, debug_mode=debug_mode, color=color)
    ]
    if log_path is not None:
        handlers.append(
            flight_recorder_handler(
                log_path, capacity=flight_recorder_capacity, flush_on_close=force_flush
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, logger_level in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(logger_level)
    return handlers


def _dist_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "<not installed>"


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Announce the run at INFO and dump environment details at DEBUG.

    The DEBUG lines end up in the flight recorder even when the console is
    quiet, which is what makes a flushed recording useful on its own.
    """
    logger.info(
        "service-bootstrap %s (console=%s, flight-recorder=%s)",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    for dist in ("click", "click-extra", "rich"):
        logger.debug("%s: %s", dist.title().replace("-", " "), _dist_version(dist))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            log_path or "<none>",
            flight_capacity,
            force_flush_fr,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
