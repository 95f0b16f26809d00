"""Process-environment property store.

The environment is the process-wide key/value surface a child process
inherits from its parent, which makes it the place a classpath string is
published for a fork. Writes are visible to every reader in the process
immediately; no locking is done, so concurrent writers to the same key race
and the last write wins.
"""

from __future__ import annotations

import os
from collections.abc import MutableMapping

from forkbooter.interfaces.properties import PropertyStore

__all__ = ["EnvironmentPropertyStore"]


class EnvironmentPropertyStore(PropertyStore):
    """`PropertyStore` over `os.environ` (or an injected mapping).

    Args:
        environ: Mapping to read and write. Defaults to `os.environ`; tests
            pass a plain dict so the real environment stays untouched.
    """

    def __init__(self, environ: MutableMapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, key: str) -> str | None:
        return self._environ.get(key)

    def set(self, key: str, value: str) -> None:
        # os.environ raises ValueError for names/values the OS rejects
        self._environ[key] = value

    def keys(self) -> list[str]:
        return list(self._environ)
