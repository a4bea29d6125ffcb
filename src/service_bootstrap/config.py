"""Configuration utilities for service-bootstrap.

This module centralizes small helpers and constants related to application
configuration: environment variables and loading of bootstrap map and
configuration documents from JSON or TOML files.
"""

import json
import os
import tomllib
from pathlib import Path
from typing import Any

MAP_PATH_ENV = "SERVICE_BOOTSTRAP_MAP"  # pragma: no mutate
CONFIG_PATH_ENV = "SERVICE_BOOTSTRAP_CONFIG"  # pragma: no mutate
SERVICES_ENV = "SERVICE_BOOTSTRAP_SERVICES"  # pragma: no mutate

SUPPORTED_SUFFIXES = (".json", ".toml")


class MapPathNotSetError(Exception):
    """Raised when no bootstrap map path is given and SERVICE_BOOTSTRAP_MAP is not set."""


class UnsupportedDocumentError(ValueError):
    """Raised when a document has a file extension that cannot be loaded."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"Unsupported document type {path.suffix!r} for {path}; "
            f"expected one of {', '.join(SUPPORTED_SUFFIXES)}"
        )
        self.path = path


class DocumentLoadError(ValueError):
    """Raised when a document cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not load {path}: {reason}")
        self.path = path


def get_map_path() -> Path:
    """Get the bootstrap map path from the environment.

    Returns:
        The value of the `SERVICE_BOOTSTRAP_MAP` environment variable as a path.

    Raises:
        MapPathNotSetError: If `SERVICE_BOOTSTRAP_MAP` is not set.
    """
    if not (path := os.environ.get(MAP_PATH_ENV)):
        raise MapPathNotSetError
    return Path(path)


def load_document(path: Path) -> dict[str, Any]:
    """Load a JSON or TOML document into a dict.

    Key order of the document is preserved, which the bootstrap map relies on.

    Args:
        path: Path to a ``.json`` or ``.toml`` file.

    Returns:
        The parsed top-level table.

    Raises:
        UnsupportedDocumentError: If the file extension is not supported.
        DocumentLoadError: If the file cannot be read, cannot be parsed, or its
            top level is not a table/object.
    """
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise UnsupportedDocumentError(path)

    try:
        if suffix == ".toml":
            with path.open("rb") as fp:
                document = tomllib.load(fp)
        else:
            with path.open(encoding="utf-8") as fp:
                document = json.load(fp)
    except OSError as e:
        raise DocumentLoadError(path, e.strerror or str(e)) from e
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
        raise DocumentLoadError(path, str(e)) from e

    if not isinstance(document, dict):
        raise DocumentLoadError(path, "top level must be a table/object")
    return document
