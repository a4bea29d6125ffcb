"""Adapters (infrastructure) for service-bootstrap.

Concrete collaborators for the bootstrap core: in-memory config store and
service registry for tests and small applications, and import-based lookup
used by the CLI to find an application's service locator.

Dependency rule: may import `service_bootstrap.interfaces`; the service layer
must not import this package.
"""

from .importer import ImportReferenceError, import_object
from .memory import InMemoryConfigStore, InMemoryServiceRegistry, ServiceNotFoundError

__all__ = [
    "ImportReferenceError",
    "InMemoryConfigStore",
    "InMemoryServiceRegistry",
    "ServiceNotFoundError",
    "import_object",
]
