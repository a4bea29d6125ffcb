"""Sequential bootstrap of the services named in a bootstrap map.

`bootstrap` validates its arguments, normalizes both locators once and then
activates each active entry strictly in map order. Every activation settles
before the next one starts, so a service may rely on the services declared
before it having completed their own bootstrap. The first failure aborts the
sequence; services that already started are left as they are.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from dataclasses import dataclass
from typing import Any

from service_bootstrap.interfaces import BootstrapMap, ConfigLocator, ServiceLocator

from .config_path import config_key_for, resolve_config
from .errors import BootstrapFailed, InvalidServiceInterface
from .locators import Locator, normalize_config_locator, normalize_service_locator
from .validation import (
    validate_bootstrap_map,
    validate_config_locator,
    validate_service_locator,
)

logger = logging.getLogger(__name__)

LIFECYCLE_METHOD = "bootstrap"


@dataclass(frozen=True)
class BootstrapEntry:
    """One planned step of a bootstrap run.

    Attributes:
        name: The identifier declared in the bootstrap map.
        active: ``False`` when the entry is declared but skipped.
        service_key: Key passed to the service locator.
        config_key: Key passed to the config locator (``None`` when inactive).
    """

    name: str
    active: bool
    service_key: str
    config_key: str | None


def plan_entries(bootstrap_map: BootstrapMap) -> list[BootstrapEntry]:
    """Derive the ordered bootstrap plan from a validated map.

    A ``False`` descriptor yields an inactive entry. ``True`` uses the
    identifier for both lookups; a string descriptor names the configuration
    key while the service is still located by its identifier.
    """
    entries = []
    for name, descriptor in bootstrap_map.items():
        if descriptor is False:
            entries.append(BootstrapEntry(name, False, name, None))
        else:
            entries.append(
                BootstrapEntry(name, True, name, config_key_for(name, descriptor))
            )
    return entries


def _log_activation(sink: Any, entry: BootstrapEntry, config: Any) -> None:
    try:
        if config is None:
            sink.info(
                "Bootstrapping %s without configuration (looked up %r)",
                entry.service_key,
                entry.config_key,
            )
        else:
            sink.info(
                "Bootstrapping %s with configuration from %r",
                entry.service_key,
                entry.config_key,
            )
    except Exception:  # pylint: disable=broad-except
        logger.debug("Diagnostic logger %r failed", sink, exc_info=True)


async def activate(
    entry: BootstrapEntry,
    locate_service: Locator,
    locate_config: Locator,
    sink: Any = logger,
) -> None:
    """Locate, configure and bootstrap a single service.

    Args:
        entry: The active entry to bootstrap.
        locate_service: Normalized service locator.
        locate_config: Normalized config locator.
        sink: Diagnostic logger receiving one record per reached service.

    Raises:
        BootstrapFailed: If locating the service, resolving its configuration,
            or running its ``bootstrap`` method fails. The original exception
            (e.g. `InvalidServiceInterface`) is the ``__cause__``.
    """
    try:
        service = await locate_service(entry.service_key)
        config = await resolve_config(locate_config, entry.config_key)

        lifecycle = getattr(service, LIFECYCLE_METHOD, None)
        if not callable(lifecycle):
            raise InvalidServiceInterface(entry.service_key)

        _log_activation(sink, entry, config)

        result = lifecycle(config)
        if inspect.isawaitable(result):
            await result
    except Exception as e:  # pylint: disable=broad-except
        logger.exception("Failed to bootstrap %s: %s", entry.service_key, e)
        raise BootstrapFailed(entry.service_key) from e


async def bootstrap(
    bootstrap_map: BootstrapMap,
    config_locator: ConfigLocator,
    service_locator: ServiceLocator,
    *,
    diagnostic_logger: Any = None,
) -> None:
    """Bootstrap every active service of ``bootstrap_map`` in declaration order.

    Args:
        bootstrap_map: Ordered mapping of service identifier to descriptor
            (``False`` to skip, ``True`` or a configuration key to activate).
        config_locator: Callable ``(key) -> config | None`` or an object with a
            ``find`` method. May be asynchronous.
        service_locator: Callable ``(key) -> service`` or an object with a
            ``locate`` method. May be asynchronous.
        diagnostic_logger: Optional diagnostic logger (anything with an
            ``info`` method). Defaults to this module's logger.

    Raises:
        InvalidBootstrapMap: If the map is malformed.
        InvalidConfigLocator: If the config locator has the wrong shape.
        InvalidServiceLocator: If the service locator has the wrong shape.
        BootstrapFailed: If any entry fails; later entries are not attempted.
    """
    validate_bootstrap_map(bootstrap_map)
    validate_config_locator(config_locator)
    validate_service_locator(service_locator)

    locate_config = normalize_config_locator(config_locator)
    locate_service = normalize_service_locator(service_locator)
    sink = logger if diagnostic_logger is None else diagnostic_logger

    for entry in plan_entries(bootstrap_map):
        if not entry.active:
            logger.debug("Skipping inactive service %s", entry.name)
            continue
        await activate(entry, locate_service, locate_config, sink)


def run_bootstrap(
    bootstrap_map: BootstrapMap,
    config_locator: ConfigLocator,
    service_locator: ServiceLocator,
    *,
    diagnostic_logger: Any = None,
) -> None:
    """Run `bootstrap` to completion from synchronous code."""
    asyncio.run(
        bootstrap(
            bootstrap_map,
            config_locator,
            service_locator,
            diagnostic_logger=diagnostic_logger,
        )
    )
