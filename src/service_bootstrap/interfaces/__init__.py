"""Interfaces (application boundary) for service-bootstrap.

Defines the framework-free contracts the bootstrap core consumes: the
config finder, the service registry, and the lifecycle protocol a service
implements. Concrete stores and registries live in `service_bootstrap.adapters`
or in the calling application.

Dependency rule: this package is independent. Do not import from any other
`service_bootstrap.*` modules here.
"""

from .locators import (
    Bootstrappable,
    BootstrapMap,
    ConfigFinder,
    ConfigLocator,
    Descriptor,
    ServiceLocator,
    ServiceRegistry,
)

__all__ = [
    "BootstrapMap",
    "Bootstrappable",
    "ConfigFinder",
    "ConfigLocator",
    "Descriptor",
    "ServiceLocator",
    "ServiceRegistry",
]
