"""Composition root for the service-bootstrap CLI.

Assembles what a bootstrap run needs from files and import references: the
bootstrap map, a config locator filled from a configuration document, and the
application's service locator. No bootstrap rules live here; this is assembly
only.

Import rules:
- Entry points import *this* module (not adapters/service_layer directly).
- This module may import `service_bootstrap.adapters`,
  `service_bootstrap.service_layer` and `service_bootstrap.config`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from service_bootstrap import config
from service_bootstrap.adapters import InMemoryConfigStore, import_object
from service_bootstrap.service_layer.validation import validate_service_locator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """Everything a single bootstrap run is given."""

    bootstrap_map: dict[str, Any]
    config_locator: Any
    service_locator: Any


def build_bootstrap_map(path: Path) -> dict[str, Any]:
    """Load the bootstrap map document at ``path`` (key order preserved)."""
    bootstrap_map = config.load_document(path)
    logger.debug("Loaded bootstrap map with %d entries from %s", len(bootstrap_map), path)
    return bootstrap_map


def build_config_locator(path: Path | None) -> InMemoryConfigStore:
    """Build a config store filled from the document at ``path``.

    An empty store is returned when ``path`` is ``None``.
    """
    store = InMemoryConfigStore()
    if path is not None:
        store.assign(config.load_document(path))
        logger.debug("Loaded %d configuration entries from %s", len(store), path)
    return store


def build_service_locator(reference: str) -> Any:
    """Import the service locator named by ``reference`` (``module:attribute``).

    Raises:
        ImportReferenceError: If the reference cannot be resolved.
        InvalidServiceLocator: If the resolved object cannot locate services.
    """
    locator = import_object(reference)
    validate_service_locator(locator)
    logger.debug("Using service locator %r from %s", locator, reference)
    return locator


def wire(map_path: Path, services: str, config_path: Path | None = None) -> AppContainer:
    """Assemble an `AppContainer` from a map file, a locator reference and a config file."""
    return AppContainer(
        bootstrap_map=build_bootstrap_map(map_path),
        config_locator=build_config_locator(config_path),
        service_locator=build_service_locator(services),
    )
