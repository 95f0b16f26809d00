"""Global pytest fixtures for FORKBOOTER."""

from __future__ import annotations

import pytest

from forkbooter.adapters.properties import InMemoryPropertyStore
from forkbooter.domain import Classpath

pytest_plugins = [
    "tests.fixtures.classpaths",
]


@pytest.fixture
def memory_store() -> InMemoryPropertyStore:
    """Return a fresh, empty in-memory property store."""
    return InMemoryPropertyStore()


@pytest.fixture
def empty_classpath() -> Classpath:
    """Return a fresh, empty classpath."""
    return Classpath()
