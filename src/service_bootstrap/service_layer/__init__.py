"""Service layer for service-bootstrap.

Holds the bootstrap core: argument validation, locator normalization,
configuration key resolution and the sequential activation of services.
"""

from .errors import (
    BootstrapError,
    BootstrapFailed,
    InvalidBootstrapMap,
    InvalidConfigLocator,
    InvalidServiceInterface,
    InvalidServiceLocator,
)
from .sequencer import BootstrapEntry, bootstrap, plan_entries, run_bootstrap

__all__ = [
    "BootstrapEntry",
    "BootstrapError",
    "BootstrapFailed",
    "InvalidBootstrapMap",
    "InvalidConfigLocator",
    "InvalidServiceInterface",
    "InvalidServiceLocator",
    "bootstrap",
    "plan_entries",
    "run_bootstrap",
]
