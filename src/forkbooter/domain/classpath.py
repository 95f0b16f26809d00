"""Classpath value holder.

A `Classpath` is the ordered, duplicate-free collection of locators that
makes up the code-loading search path of a forked child process.

Serialization targets
---------------------
- **System property**: a single string ``E1<sep>E2<sep>...En<sep>`` where
  ``<sep>`` is `os.pathsep`. The empty classpath writes ``""``.
- **Fork properties**: one key per element, ``<prefix>0``, ``<prefix>1``, ...
  holding the raw locator. Readers stop at the first missing index.

Both targets are written through an injected `PropertyStore`, so the class
never touches process-wide state on its own.

Typical usage
-------------
    classpath = Classpath()
    classpath.add_class_path_element_url("target/classes")
    classpath.add_class_path_element_url("lib/junit.jar")
    classpath.write_to_fork_properties(store, "classPathUrl.")
    ...
    restored = Classpath.read_from_fork_properties(store, "classPathUrl.")
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from .errors import InvalidClasspathElementError
from .locators import file_name, to_url

if TYPE_CHECKING:
    from forkbooter.interfaces.properties import PropertySink, PropertyStore

logger = logging.getLogger(__name__)


class Classpath:
    """Ordered set of classpath locators.

    Duplicates are suppressed on insert: adding a locator that is already
    present is a no-op, so every element keeps the position of its first
    occurrence. Accessors hand out copies, never the backing list.

    Instances are mutable and therefore unhashable.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, locators: Iterable[str] | None = None) -> None:
        self._elements: list[str] = []
        self._seen: set[str] = set()
        for locator in locators or ():
            self.add_class_path_element_url(locator)

    # ---- Construction ----

    @classmethod
    def join(cls, first: Classpath | None, second: Classpath | None) -> Classpath:
        """Return a new classpath with the elements of *first* then *second*.

        ``None`` stands for an empty classpath. Elements of *second* already
        contributed by *first* are not added again. Neither input is mutated.
        """
        joined = cls()
        for source in (first, second):
            if source is None:
                continue
            for locator in source.get_class_path():
                joined.add_class_path_element_url(locator)
        return joined

    @classmethod
    def read_from_fork_properties(cls, store: PropertyStore, prefix: str) -> Classpath:
        """Rebuild a classpath from indexed keys ``<prefix>0``, ``<prefix>1``, ...

        The scan stops at the first missing index; keys after a gap are never
        read. An empty store yields an empty classpath.
        """
        classpath = cls()
        index = 0
        while (locator := store.get(f"{prefix}{index}")) is not None:
            classpath.add_class_path_element_url(locator)
            index += 1
        logger.debug("Read %d classpath element(s) under prefix %r", index, prefix)
        return classpath

    @classmethod
    def read_from_system_property(
        cls, property_name: str, source: PropertyStore
    ) -> Classpath:
        """Rebuild a classpath from a path-separator joined property value.

        Inverse of `write_to_system_property`. Empty fragments (the trailing
        separator, or an empty value) are ignored; an unset property yields
        an empty classpath.
        """
        value = source.get(property_name) or ""
        return cls(fragment for fragment in value.split(os.pathsep) if fragment)

    # ---- Mutation ----

    def add_class_path_element_url(self, locator: str) -> None:
        """Append *locator* unless an equal string is already present.

        Args:
            locator: Filesystem path or URL of the classpath element.

        Raises:
            InvalidClasspathElementError: If *locator* is None or not a string.
                Raised before any state change.
        """
        if not isinstance(locator, str):
            raise InvalidClasspathElementError(locator)
        if locator in self._seen:
            logger.debug("Skipping duplicate classpath element %r", locator)
            return
        self._seen.add(locator)
        self._elements.append(locator)

    # ---- Projections ----

    def get_class_path(self) -> list[str]:
        """Return a copy of the elements in insertion order."""
        return list(self._elements)

    def get_as_url_list(self) -> list[str]:
        """Return the URL form of every element, in insertion order.

        Raises:
            LocatorResolutionError: If any element cannot be resolved; no
                partial list is returned.
        """
        return [to_url(locator) for locator in self._elements]

    def write_to_system_property(self, property_name: str, sink: PropertySink) -> None:
        """Store the separator-joined classpath on a process-wide sink.

        Every element is followed by `os.pathsep`, so ``[A, B]`` becomes
        ``"A<sep>B<sep>"`` and the empty classpath becomes ``""``. Any prior
        value under *property_name* is overwritten. No locking is done here;
        concurrent writers to the same key race and the last write wins.
        """
        value = "".join(f"{locator}{os.pathsep}" for locator in self._elements)
        sink.set(property_name, value)

    def write_to_fork_properties(self, store: PropertyStore, prefix: str) -> None:
        """Set ``<prefix><i>`` to the raw locator at position ``i``.

        Only the keys ``<prefix>0`` .. ``<prefix><n-1>`` are written; other
        keys in *store*, including stale higher indices, are left alone.
        """
        for index, locator in enumerate(self._elements):
            store.set(f"{prefix}{index}", locator)
        logger.debug(
            "Wrote %d classpath element(s) under prefix %r",
            len(self._elements),
            prefix,
        )

    def get_log_message(self, description: str) -> str:
        """Describe the classpath for diagnostics, one locator after another."""
        return description + " " + "".join(f"{e}  " for e in self._elements)

    def get_compact_log_message(self, description: str) -> str:
        """Like `get_log_message`, with each locator reduced to its file name."""
        return description + " " + "".join(f"{file_name(e)}  " for e in self._elements)

    # ---- Python protocol ----

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_class_path())

    def __contains__(self, locator: object) -> bool:
        return isinstance(locator, str) and locator in self._seen

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Classpath):
            return NotImplemented
        return self._elements == other._elements

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._elements!r})"
