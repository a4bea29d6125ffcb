"""Errors raised while bootstrapping services.

Every error carries a stable ``code`` so callers can branch on it without
matching on messages. Pre-flight errors (invalid map or locators) are raised
before any locator is called; per-entry failures are always surfaced as
`BootstrapFailed` with the original exception chained as ``__cause__``.
"""

from __future__ import annotations

# ============================================================================
#                               Base error
# ============================================================================


class BootstrapError(Exception):
    """Base class for all bootstrap errors."""

    code = "E_BOOTSTRAP_ERROR"


# ============================================================================
#                             Pre-flight errors
# ============================================================================


class InvalidBootstrapMap(BootstrapError, TypeError):
    """Raised when the bootstrap map is not a mapping of names to descriptors."""

    code = "E_BOOTSTRAP_INVALID_MAP"

    def __init__(self, message: str = "BootstrapMap must be a mapping") -> None:
        super().__init__(message)


class InvalidConfigLocator(BootstrapError, TypeError):
    """Raised when the config locator is neither callable nor has a ``find`` method."""

    code = "E_BOOTSTRAP_INVALID_CONFIG_LOCATOR"

    def __init__(self) -> None:
        super().__init__(
            'ConfigLocator must be a callable, or an object with a "find" method'
        )


class InvalidServiceLocator(BootstrapError, TypeError):
    """Raised when the service locator is neither callable nor has a ``locate`` method."""

    code = "E_BOOTSTRAP_INVALID_SERVICE_LOCATOR"

    def __init__(self) -> None:
        super().__init__(
            'ServiceLocator must be a callable, or an object with a "locate" method'
        )


# ============================================================================
#                             Per-entry errors
# ============================================================================


class InvalidServiceInterface(BootstrapError, TypeError):
    """Raised when a located service does not expose a callable ``bootstrap``.

    Attributes:
        service_key (str): The key the service was located with.
    """

    code = "E_BOOTSTRAP_INVALID_SERVICE_INTERFACE"

    def __init__(self, service_key: str) -> None:
        super().__init__(
            f'Expecting the service "{service_key}" to have a "bootstrap" method'
        )
        self.service_key = service_key


class BootstrapFailed(BootstrapError):
    """Raised when a single entry could not be bootstrapped.

    The original failure is available as ``__cause__``.

    Attributes:
        service_key (str): The key of the service that failed.
    """

    code = "E_BOOTSTRAP"

    def __init__(self, service_key: str) -> None:
        super().__init__(
            f'Could not fulfill the bootstrap process for "{service_key}"'
        )
        self.service_key = service_key


def iter_causes(error: BaseException):
    """Yield ``error`` followed by every exception in its ``__cause__`` chain."""
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__
