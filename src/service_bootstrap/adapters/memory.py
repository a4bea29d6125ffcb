"""In-memory config store and service registry.

Tiny, dependency-free collaborators meant for **tests**, examples, and small
applications that wire their services by hand. Nothing is persisted and no
lazy instantiation is performed: a registered object is returned as is.

Typical usage
-------------
    registry = InMemoryServiceRegistry()
    registry.set("mailer", Mailer())
    registry.config.assign({"mailer": {"host": "localhost"}})
    await bootstrap({"mailer": True}, registry.config, registry)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = ["InMemoryConfigStore", "InMemoryServiceRegistry", "ServiceNotFoundError"]


class ServiceNotFoundError(LookupError):
    """Raised when no service is registered under the requested key.

    Attributes:
        key (str): The requested key.
    """

    def __init__(self, key: str) -> None:
        super().__init__(f'No service registered under "{key}"')
        self.key = key


class InMemoryConfigStore:
    """Configuration keyed by name, held in a plain dict.

    Implements the ``find`` contract of a config locator and is also callable,
    so it can be passed in either shape.
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(data or {})

    def assign(self, data: Mapping[str, Any]) -> None:
        """Merge ``data`` into the store; existing top-level keys are replaced."""
        self._data.update(data)

    def find(self, key: str) -> Any:
        """Return the configuration stored under ``key``, or ``None``."""
        return self._data.get(key)

    def __call__(self, key: str) -> Any:
        return self.find(key)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)


class InMemoryServiceRegistry:
    """Service instances keyed by name.

    Args:
        config: Config store to expose as ``registry.config``. A fresh empty
            store is created when omitted.
    """

    def __init__(self, config: InMemoryConfigStore | None = None) -> None:
        self._services: dict[str, Any] = {}
        self.config = config if config is not None else InMemoryConfigStore()

    def set(self, key: str, service: Any) -> None:
        """Register ``service`` under ``key``, replacing any previous one."""
        self._services[key] = service

    def locate(self, key: str) -> Any:
        """Return the service registered under ``key``.

        Raises:
            ServiceNotFoundError: If nothing is registered under ``key``.
        """
        try:
            return self._services[key]
        except KeyError as e:
            raise ServiceNotFoundError(key) from e

    def keys(self) -> list[str]:
        """Registered keys in registration order."""
        return list(self._services)
