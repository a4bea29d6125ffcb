"""Normalization of config and service locators.

A locator may be handed to `bootstrap` either as a bare callable or as an
object exposing a lookup method (``find`` for configuration, ``locate`` for
services). Both shapes are adapted once, at the start of a bootstrap call, into
a `Locator` that is awaited uniformly whether the underlying lookup is
synchronous or asynchronous.
"""

from __future__ import annotations

import abc
import inspect
from collections.abc import Callable
from typing import Any

from service_bootstrap.interfaces import ConfigLocator, ServiceLocator

# pylint: disable=too-few-public-methods

CONFIG_LOOKUP_METHOD = "find"
SERVICE_LOOKUP_METHOD = "locate"


class Locator(abc.ABC):
    """Uniform, awaitable ``(key) -> value`` lookup."""

    async def __call__(self, key: str) -> Any:
        result = self._lookup(key)
        if inspect.isawaitable(result):
            result = await result
        return result

    @abc.abstractmethod
    def _lookup(self, key: str) -> Any:
        """Perform the raw lookup; may return an awaitable."""


class CallableLocator(Locator):
    """Adapter for a locator that is itself a callable."""

    def __init__(self, fn: Callable[[str], Any]) -> None:
        self._fn = fn

    def _lookup(self, key: str) -> Any:
        return self._fn(key)

    def __repr__(self) -> str:
        return f"CallableLocator({self._fn!r})"


class MethodLocator(Locator):
    """Adapter for an object exposing a named lookup method.

    The method is bound once, so later lookups keep the owner as receiver.
    """

    def __init__(self, owner: Any, method_name: str) -> None:
        self.owner = owner
        self.method_name = method_name
        self._method: Callable[[str], Any] = getattr(owner, method_name)

    def _lookup(self, key: str) -> Any:
        return self._method(key)

    def __repr__(self) -> str:
        return f"MethodLocator({type(self.owner).__name__}.{self.method_name})"


def normalize_locator(locator: Any, method_name: str) -> Locator:
    """Adapt ``locator`` to a `Locator`.

    An object exposing a callable ``method_name`` is dispatched through that
    method; otherwise the locator must already be callable.

    Args:
        locator: A callable, or an object with a callable ``method_name``.
        method_name: Name of the lookup method to prefer.

    Returns:
        Locator: The adapted locator.
    """
    if callable(getattr(locator, method_name, None)):
        return MethodLocator(locator, method_name)
    return CallableLocator(locator)


def normalize_config_locator(config_locator: ConfigLocator) -> Locator:
    """Adapt a config locator (callable or object with ``find``)."""
    return normalize_locator(config_locator, CONFIG_LOOKUP_METHOD)


def normalize_service_locator(service_locator: ServiceLocator) -> Locator:
    """Adapt a service locator (callable or object with ``locate``)."""
    return normalize_locator(service_locator, SERVICE_LOOKUP_METHOD)
