"""Locator and lifecycle protocols consumed by the bootstrap core."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Protocol, TypeAlias, runtime_checkable

# pylint: disable=too-few-public-methods

Descriptor: TypeAlias = bool | str
"""Activation descriptor: ``False`` skips, ``True`` uses the service's own
identifier, a string names the configuration key."""

BootstrapMap: TypeAlias = Mapping[str, Descriptor]


@runtime_checkable
class ConfigFinder(Protocol):
    """An object that finds configuration by key.

    ``find`` returns ``None`` when nothing is stored under the key. It may
    return an awaitable.
    """

    def find(self, key: str) -> Any | Awaitable[Any]:
        """Return the configuration stored under ``key``, or ``None``."""


@runtime_checkable
class ServiceRegistry(Protocol):
    """An object that locates service instances by key. May return an awaitable."""

    def locate(self, key: str) -> Any | Awaitable[Any]:
        """Return the service registered under ``key``."""


@runtime_checkable
class Bootstrappable(Protocol):
    """A service with a one-time startup lifecycle method."""

    def bootstrap(self, config: Any) -> None | Awaitable[None]:
        """Start the service with its resolved configuration (possibly ``None``)."""


ConfigLocator: TypeAlias = ConfigFinder | Callable[[str], Any]
ServiceLocator: TypeAlias = ServiceRegistry | Callable[[str], Any]
