"""In-memory property store backend.

Keys keep their insertion order (re-setting a key keeps its position), which
makes saved files and test assertions deterministic. All access happens under
an `RLock`, so a single store can be shared between threads.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping

from forkbooter.interfaces.properties import PropertyStore

__all__ = ["InMemoryPropertyStore"]


class InMemoryPropertyStore(PropertyStore):
    """Dict-backed `PropertyStore`.

    Example
    -------
        store = InMemoryPropertyStore({"test0": "foo.jar"})
        store.set("test1", "bar.jar")
        store.get("test1")  # "bar.jar"
        store.get("test2")  # None
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})
        self._lock = threading.RLock()

    # ---- PropertyStore ----

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._values[key] = value

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._values)

    def remove(self, key: str) -> None:
        """Delete *key* if present."""
        with self._lock:
            self._values.pop(key, None)

    # (inherits: __contains__, items)

    def as_dict(self) -> dict[str, str]:
        """Return a snapshot copy of the stored values."""
        with self._lock:
            return dict(self._values)

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.as_dict()!r})"
