"""Classpath configuration of a forked test process.

A forked process needs two classpaths: the *test* classpath (code under
test and its dependencies) and the *provider* classpath (the test framework
integration that boots it). Both travel through the same fork properties
store under distinct prefixes, next to two class-loading flags.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from forkbooter.domain.classpath import Classpath
from forkbooter.interfaces.properties import PropertyStore

logger = logging.getLogger(__name__)

TEST_CLASSPATH_PREFIX = "classPathUrl."
PROVIDER_CLASSPATH_PREFIX = "surefireClassPathUrl."
ENABLE_ASSERTIONS = "enableAssertions"
CHILD_DELEGATION = "childDelegation"


def _format_flag(value: bool) -> str:
    return "true" if value else "false"


def _parse_flag(raw: str | None, default: bool) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() == "true"


@dataclass(frozen=True)
class ClasspathConfiguration:
    """Test and provider classpaths plus class-loading flags.

    Attributes:
        test_classpath: Classpath of the code under test. ``None`` becomes empty.
        provider_classpath: Classpath of the test provider. ``None`` becomes empty.
        enable_assertions: Whether the child enables assertions.
        child_delegation: Whether the child class loader looks in its own
            classpath before delegating to its parent.
    """

    test_classpath: Classpath | None = None
    provider_classpath: Classpath | None = None
    enable_assertions: bool = True
    child_delegation: bool = False

    def __post_init__(self) -> None:
        # frozen dataclass: normalise through object.__setattr__
        if self.test_classpath is None:
            object.__setattr__(self, "test_classpath", Classpath())
        if self.provider_classpath is None:
            object.__setattr__(self, "provider_classpath", Classpath())

    def create_merged_classpath(self) -> Classpath:
        """Return the test classpath followed by the provider classpath."""
        return Classpath.join(self.test_classpath, self.provider_classpath)

    def write_to(self, store: PropertyStore) -> None:
        """Write both classpaths and both flags into *store*."""
        assert self.test_classpath is not None
        assert self.provider_classpath is not None
        self.test_classpath.write_to_fork_properties(store, TEST_CLASSPATH_PREFIX)
        self.provider_classpath.write_to_fork_properties(
            store, PROVIDER_CLASSPATH_PREFIX
        )
        store.set(ENABLE_ASSERTIONS, _format_flag(self.enable_assertions))
        store.set(CHILD_DELEGATION, _format_flag(self.child_delegation))
        logger.debug(
            "Wrote classpath configuration: %d test / %d provider element(s)",
            len(self.test_classpath),
            len(self.provider_classpath),
        )

    @classmethod
    def read_from(cls, store: PropertyStore) -> ClasspathConfiguration:
        """Rebuild a configuration written by `write_to`.

        Missing flags take the field defaults; flag values are compared to
        ``"true"`` case-insensitively.
        """
        return cls(
            test_classpath=Classpath.read_from_fork_properties(
                store, TEST_CLASSPATH_PREFIX
            ),
            provider_classpath=Classpath.read_from_fork_properties(
                store, PROVIDER_CLASSPATH_PREFIX
            ),
            enable_assertions=_parse_flag(store.get(ENABLE_ASSERTIONS), True),
            child_delegation=_parse_flag(store.get(CHILD_DELEGATION), False),
        )
