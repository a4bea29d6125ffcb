"""service-bootstrap

Sequences the start-up ("bootstrap") of an application's services. An ordered
bootstrap map names the services to start; each one is located through a
service locator, given its configuration from a config locator, and has its
``bootstrap(config)`` method awaited before the next service starts.
"""

from .service_layer import (
    BootstrapError,
    BootstrapFailed,
    InvalidBootstrapMap,
    InvalidConfigLocator,
    InvalidServiceInterface,
    InvalidServiceLocator,
    bootstrap,
    run_bootstrap,
)

__all__ = [
    "BootstrapError",
    "BootstrapFailed",
    "InvalidBootstrapMap",
    "InvalidConfigLocator",
    "InvalidServiceInterface",
    "InvalidServiceLocator",
    "__version__",
    "bootstrap",
    "run_bootstrap",
]
__version__ = "0.1.0"
