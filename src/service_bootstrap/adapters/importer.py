"""Resolve ``package.module:attribute`` references to Python objects."""

import importlib
from typing import Any


class ImportReferenceError(ImportError):
    """Raised when an import reference is malformed or cannot be resolved."""

    def __init__(self, reference: str, reason: str) -> None:
        super().__init__(f"Cannot import {reference!r}: {reason}")
        self.reference = reference


def import_object(reference: str) -> Any:
    """Import the object named by ``reference``.

    Args:
        reference: ``"package.module:attribute"``; the attribute part may be
            dotted (``"app.services:container.registry"``).

    Returns:
        Any: The resolved object.

    Raises:
        ImportReferenceError: If the reference is malformed, the module cannot
            be imported, or the attribute does not exist.
    """
    module_name, separator, attribute = reference.partition(":")
    if not separator or not module_name or not attribute:
        raise ImportReferenceError(reference, "expected 'module:attribute'")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise ImportReferenceError(reference, str(e)) from e

    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ImportReferenceError(
                reference, f"module {module_name!r} has no attribute {attribute!r}"
            ) from e
    return obj
