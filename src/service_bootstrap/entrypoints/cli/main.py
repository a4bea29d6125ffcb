"""service-bootstrap CLI entry point.

The top-level ``service-bootstrap`` group (a Click-Extra group) only sets up
logging; the work happens in its subcommands:

- ``service-bootstrap plan`` prints the ordered bootstrap plan of a map file.
- ``service-bootstrap run`` bootstraps the services of a map file.

Examples
    $ service-bootstrap --version
    $ service-bootstrap plan bootstrap.toml
    $ service-bootstrap -v run bootstrap.toml --services app.services:registry
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from service_bootstrap import __version__
from service_bootstrap.logging import configure_logging, log_startup

from .commands import plan, run
from .helpers.log_level_parser import parse_log_level

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("service-bootstrap", appauthor=False, ensure_exists=True))
    / "latest.log"
)

HELP = """Start an application's services in the order a bootstrap map declares.

    Each service is located, handed its configuration, and finishes its
    bootstrap method before the next one is started.
    """


def effective_level(verbose_count: int, quiet_count: int) -> int:
    """WARNING, moved one level per -v (down) or -q (up), clamped to DEBUG..CRITICAL."""
    level = logging.WARNING + 10 * (quiet_count - verbose_count)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


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
    "--verbose", "-v", "verbose_count", count=True, default=0,
    help="Show one more level of console logs per repetition (default: WARNING).",
)
@click.option(
    "--quiet", "-q", "quiet_count", count=True, default=0,
    help="Show one less level of console logs per repetition.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything to the console, with timestamps and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="SERVICE_BOOTSTRAP_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="SERVICE_BOOTSTRAP_FLIGHT_RECORDER_CAPACITY",
    help="Number of log records the flight recorder keeps.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    show_envvar=True,
    help=(
        "Keep recent DEBUG records in memory and write them to --log-path as "
        "soon as a warning or error is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    default=False,
    show_default=True,
    show_envvar=True,
    help="Write the flight recorder to --log-path on exit, even after a clean run.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("asyncio=WARNING",),
    show_default=True,
    show_envvar=True,
    help="Minimum level for a named logger, as NAME=LEVEL. Repeatable.",
)
@clickx.pass_context
def service_bootstrap(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """service-bootstrap command-line interface."""
    level = effective_level(verbose_count, quiet_count)
    handlers = configure_logging(
        level=level,
        debug_mode=debug,
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        flight_recorder_capacity=flight_recorder_capacity,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush,
        logger_levels=logger_levels,
    )
    # Flushes the flight recorder (when --force-flush) and closes its file.
    ctx.call_on_close(logging.shutdown)


service_bootstrap.add_command(plan)
service_bootstrap.add_command(run)
