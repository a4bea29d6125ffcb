"""``plan`` and ``run`` commands.

Behavior
- The bootstrap map file is given as an argument or via ``SERVICE_BOOTSTRAP_MAP``.
- ``plan`` never imports or calls any locator; it prints one line per entry to
  **stdout** so the output can be piped.
- ``run`` imports the service locator named by ``--services`` and bootstraps
  every active entry in order. Human-oriented notices go to **stderr**.
- ``run`` on a map whose entries are all skipped only warns and exits 0.

Failure modes
- Missing map path, unreadable or unsupported file, or a malformed map →
  ``ClickException`` with guidance.
- A failing service → the error and its cause chain on stderr, exit status 1.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from service_bootstrap import config, wiring
from service_bootstrap.adapters import ImportReferenceError
from service_bootstrap.service_layer import (
    BootstrapError,
    BootstrapFailed,
    plan_entries,
    run_bootstrap,
)
from service_bootstrap.service_layer.validation import validate_bootstrap_map

from .helpers import report_bootstrap_error, success, warn

logger = logging.getLogger(__name__)

MISSING_MAP_MSG = (
    "No bootstrap map given.\n\n"
    "Pass it as an argument or set it before running this command, e.g.:\n"
    "  export SERVICE_BOOTSTRAP_MAP=bootstrap.toml\n"
    "  or in PowerShell:\n"
    "  $env:SERVICE_BOOTSTRAP_MAP='bootstrap.toml'"
)

MAP_ARGUMENT = click.argument(
    "map_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)


def _resolve_map_path(map_path: Path | None) -> Path:
    if map_path is not None:
        return map_path
    try:
        return config.get_map_path()
    except config.MapPathNotSetError as e:
        raise click.ClickException(MISSING_MAP_MSG) from e


def _check_map(bootstrap_map: dict) -> None:
    try:
        validate_bootstrap_map(bootstrap_map)
    except BootstrapError as e:
        raise click.ClickException(f"{e} ({e.__cause__})") from e


def _load_map(map_path: Path) -> dict:
    try:
        bootstrap_map = wiring.build_bootstrap_map(map_path)
    except (config.UnsupportedDocumentError, config.DocumentLoadError) as e:
        raise click.ClickException(str(e)) from e
    _check_map(bootstrap_map)
    return bootstrap_map


@click.command()
@MAP_ARGUMENT
def plan(map_path: Path | None) -> None:
    """Show the ordered bootstrap plan of MAP_PATH without starting anything."""
    bootstrap_map = _load_map(_resolve_map_path(map_path))
    for position, entry in enumerate(plan_entries(bootstrap_map), start=1):
        if entry.active:
            click.echo(f"{position}. {entry.service_key} (config: {entry.config_key})")
        else:
            click.echo(f"{position}. {entry.service_key} (skipped)")


@click.command()
@MAP_ARGUMENT
@click.option(
    "--services",
    "-s",
    required=True,
    envvar=config.SERVICES_ENV,
    show_envvar=True,
    help=(
        "Import reference of the service locator, as module:attribute. Either a "
        "callable or an object with a 'locate' method."
    ),
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    envvar=config.CONFIG_PATH_ENV,
    show_envvar=True,
    help="JSON or TOML document holding each service's configuration.",
)
def run(map_path: Path | None, services: str, config_path: Path | None) -> None:
    """Bootstrap the services of MAP_PATH in declaration order."""
    try:
        container = wiring.wire(_resolve_map_path(map_path), services, config_path)
    except (config.UnsupportedDocumentError, config.DocumentLoadError) as e:
        raise click.ClickException(str(e)) from e
    except ImportReferenceError as e:
        raise click.ClickException(str(e)) from e
    except BootstrapError as e:
        raise click.ClickException(f"{e} ({services})") from e
    _check_map(container.bootstrap_map)

    started = sum(1 for entry in plan_entries(container.bootstrap_map) if entry.active)
    if not started:
        warn("Every entry of the bootstrap map is skipped; nothing to start.")
        return

    logger.info(
        "Bootstrapping %d declared services with locator %s",
        len(container.bootstrap_map),
        services,
    )
    try:
        run_bootstrap(
            container.bootstrap_map, container.config_locator, container.service_locator
        )
    except BootstrapFailed as e:
        report_bootstrap_error(e)
        raise click.exceptions.Exit(1) from e

    success(f"Bootstrapped {started} service{'s' if started != 1 else ''}.")
