"""Configuration key derivation and fallback resolution.

Services are often referred to by a namespaced identifier (``@acme/mailer``)
while their configuration is stored under the plain name (``mailer``). The
resolver first looks up the full key and, when nothing is found, retries once
with the leading ``@`` segment stripped.
"""

from __future__ import annotations

import logging
from typing import Any

from .locators import Locator

logger = logging.getLogger(__name__)

NAMESPACE_MARKER = "@"
SEGMENT_SEPARATOR = "/"


def config_key_for(service_name: str, descriptor: bool | str) -> str:
    """Return the configuration key for an active entry.

    ``True`` means the service's own identifier, a string is used verbatim.
    """
    if descriptor is True:
        return service_name
    return str(descriptor)


def simplify_key(key: str) -> str | None:
    """Strip a leading namespace segment from ``key``.

    Examples:
        >>> simplify_key("@acme/mailer")
        'mailer'
        >>> simplify_key("@acme/mail/smtp")
        'mail/smtp'
        >>> simplify_key("mailer") is None
        True

    Returns:
        str | None: The simplified key, or ``None`` when the first segment is
        not namespaced or nothing would remain after stripping it.
    """
    head, separator, rest = key.partition(SEGMENT_SEPARATOR)
    if not head.startswith(NAMESPACE_MARKER) or not separator or not rest:
        return None
    return rest


async def resolve_config(locate_config: Locator, key: str) -> Any:
    """Resolve the configuration for ``key`` with a simplified-key fallback.

    Args:
        locate_config: The normalized config locator.
        key: The full configuration key.

    Returns:
        Any: The configuration found under the full key, else under the
        simplified key, else ``None``. Absence is not an error.
    """
    config = await locate_config(key)
    if config is not None:
        return config

    simplified = simplify_key(key)
    if simplified is None:
        return None

    logger.debug("No configuration under %r, falling back to %r", key, simplified)
    return await locate_config(simplified)
