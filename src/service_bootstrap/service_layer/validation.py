"""Pre-flight validation of the arguments handed to `bootstrap`.

These checks only inspect argument shapes. They run before any locator is
called, so a rejected call has no side effects.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import InvalidBootstrapMap, InvalidConfigLocator, InvalidServiceLocator

_MISSING = object()


def describe_type(value: Any) -> str:
    """Return a short type name for diagnostics (``"<missing>"`` for absent members)."""
    if value is _MISSING:
        return "<missing>"
    return type(value).__name__


def validate_bootstrap_map(bootstrap_map: Any) -> None:
    """Check that ``bootstrap_map`` maps string names to bool/str descriptors.

    Raises:
        InvalidBootstrapMap: If the map is not a mapping, or one of its keys or
            descriptors has the wrong type. The cause describes the offender.
    """
    if not isinstance(bootstrap_map, Mapping):
        error = InvalidBootstrapMap()
        error.__cause__ = TypeError(
            f'Invalid bootstrap_map type "{describe_type(bootstrap_map)}"'
        )
        raise error

    for name, descriptor in bootstrap_map.items():
        if not isinstance(name, str):
            error = InvalidBootstrapMap("BootstrapMap keys must be strings")
            error.__cause__ = TypeError(
                f'Invalid service identifier type "{describe_type(name)}" for {name!r}'
            )
            raise error
        if not isinstance(descriptor, (bool, str)):
            error = InvalidBootstrapMap(
                "BootstrapMap descriptors must be a boolean or a string"
            )
            error.__cause__ = TypeError(
                f'Invalid descriptor type "{describe_type(descriptor)}" for "{name}"'
            )
            raise error


def _has_callable_member(value: Any, member: str) -> bool:
    return callable(getattr(value, member, None))


def _locator_reason(value: Any, argument: str, member: str) -> TypeError:
    """Build the two-level cause chain: the member's type, then the value's type."""
    reason = TypeError(
        f'Invalid {argument}.{member} type '
        f'"{describe_type(getattr(value, member, _MISSING))}"'
    )
    reason.__cause__ = TypeError(f'Invalid {argument} type "{describe_type(value)}"')
    return reason


def validate_config_locator(config_locator: Any) -> None:
    """Check that ``config_locator`` is callable or has a callable ``find``.

    Raises:
        InvalidConfigLocator: With a cause chain describing ``find`` and the
            locator itself.
    """
    if callable(config_locator) or _has_callable_member(config_locator, "find"):
        return
    error = InvalidConfigLocator()
    error.__cause__ = _locator_reason(config_locator, "config_locator", "find")
    raise error


def validate_service_locator(service_locator: Any) -> None:
    """Check that ``service_locator`` is callable or has a callable ``locate``.

    Raises:
        InvalidServiceLocator: With a cause chain describing ``locate`` and the
            locator itself.
    """
    if callable(service_locator) or _has_callable_member(service_locator, "locate"):
        return
    error = InvalidServiceLocator()
    error.__cause__ = _locator_reason(service_locator, "service_locator", "locate")
    raise error
