"""Flat key/value property store interface definitions."""

import abc
from collections.abc import Iterator


class PropertyStore(abc.ABC):
    """Abstract base class for string-keyed, string-valued property stores.

    A property store is the medium a classpath travels through when it
    crosses a process boundary: a properties file handed to a forked
    process, or the process environment a child inherits.
    """

    # --- Core Operations ---

    @abc.abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under `key`.

        Args:
            key (str): The property name.

        Returns:
            str | None: The stored value, or None if the key is not set.
        """

    @abc.abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store `value` under `key`, replacing any previous value.

        Args:
            key (str): The property name.
            value (str): The property value.
        """

    @abc.abstractmethod
    def keys(self) -> list[str]:
        """Return a snapshot of the keys currently set.

        Returns:
            list[str]: Keys in the store's natural order.
        """

    # --- Convenience Methods ---

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def items(self) -> Iterator[tuple[str, str]]:
        """Iterate over `(key, value)` pairs of a key snapshot.

        Keys removed concurrently with the iteration are skipped.
        """
        for key in self.keys():
            if (value := self.get(key)) is not None:
                yield key, value


# Used in signatures where only `set` is called on the store, e.g. the
# process-wide system property surface.
PropertySink = PropertyStore
