"""Pytest fixtures for property store contract tests.

Provided fixtures
-----------------
- **store**: Parametrized backend factory that returns a **fresh**
  `PropertyStore` per test. Supports `"memory"` (`InMemoryPropertyStore`)
  and `"environment"` (`EnvironmentPropertyStore` over a private dict, so
  the real process environment is never touched).
"""

from __future__ import annotations

import pytest

from forkbooter.adapters.properties import (
    EnvironmentPropertyStore,
    InMemoryPropertyStore,
)
from forkbooter.interfaces.properties import PropertyStore


@pytest.fixture(params=["memory", "environment"])
def store(request: pytest.FixtureRequest) -> PropertyStore:
    """Return a fresh, empty property store for the requested backend."""

    match request.param:
        case "memory":
            return InMemoryPropertyStore()
        case "environment":
            return EnvironmentPropertyStore({})
        case _:
            raise ValueError(f"unknown store type: {request.param}")
