"""Global pytest fixtures and default marks for service-bootstrap."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from service_bootstrap.adapters import InMemoryConfigStore, InMemoryServiceRegistry

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
SUITE_MARKERS = ("unit", "integration", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark each item with its suite (`unit`, `integration`, `e2e`) by directory."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        for marker_name in SUITE_MARKERS:
            if TESTS_ROOT / marker_name in path.parents:
                if not any(m.name == marker_name for m in item.iter_markers()):
                    item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture
def registry() -> InMemoryServiceRegistry:
    """A fresh service registry with an empty config store as ``registry.config``."""
    return InMemoryServiceRegistry()


@pytest.fixture
def config_store(registry: InMemoryServiceRegistry) -> InMemoryConfigStore:
    """The config store attached to ``registry``."""
    return registry.config


@pytest.fixture
def journal() -> list[tuple[str, Any]]:
    """Shared bootstrap journal, in call order."""
    return []
