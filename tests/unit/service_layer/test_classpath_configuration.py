"""Unit tests for `ClasspathConfiguration`."""

from __future__ import annotations

import pytest

from forkbooter.adapters.properties import InMemoryPropertyStore
from forkbooter.domain import Classpath
from forkbooter.service_layer import ClasspathConfiguration
from forkbooter.service_layer.classpath_configuration import (
    CHILD_DELEGATION,
    ENABLE_ASSERTIONS,
)


@pytest.fixture
def configuration() -> ClasspathConfiguration:
    """Configuration with overlapping test and provider classpaths."""
    return ClasspathConfiguration(
        test_classpath=Classpath(["target/classes", "lib/junit.jar"]),
        provider_classpath=Classpath(["lib/provider.jar", "lib/junit.jar"]),
        enable_assertions=False,
        child_delegation=True,
    )


def test_none_classpaths_become_empty():
    """Absent classpaths are normalised to empty ones."""
    configuration = ClasspathConfiguration()
    assert configuration.test_classpath == Classpath()
    assert configuration.provider_classpath == Classpath()


def test_merged_classpath_puts_test_first_without_duplicates(configuration):
    """The merged classpath is test then provider, deduplicated."""
    merged = configuration.create_merged_classpath()
    assert merged.get_class_path() == [
        "target/classes",
        "lib/junit.jar",
        "lib/provider.jar",
    ]


def test_write_to_uses_known_keys(configuration):
    """Both prefixes and both flags end up in the store."""
    store = InMemoryPropertyStore()
    configuration.write_to(store)
    assert store.as_dict() == {
        "classPathUrl.0": "target/classes",
        "classPathUrl.1": "lib/junit.jar",
        "surefireClassPathUrl.0": "lib/provider.jar",
        "surefireClassPathUrl.1": "lib/junit.jar",
        ENABLE_ASSERTIONS: "false",
        CHILD_DELEGATION: "true",
    }


def test_round_trip(configuration):
    """read_from rebuilds what write_to stored."""
    store = InMemoryPropertyStore()
    configuration.write_to(store)
    assert ClasspathConfiguration.read_from(store) == configuration


def test_read_from_empty_store_uses_defaults():
    """Missing keys give empty classpaths and the default flags."""
    configuration = ClasspathConfiguration.read_from(InMemoryPropertyStore())
    assert configuration == ClasspathConfiguration()
    assert configuration.enable_assertions is True
    assert configuration.child_delegation is False


@pytest.mark.parametrize(("raw", "expected"), [("TRUE", True), ("yes", False)])
def test_flags_parse_case_insensitively(raw, expected):
    """Only a case-insensitive "true" enables a flag."""
    store = InMemoryPropertyStore({CHILD_DELEGATION: raw})
    assert ClasspathConfiguration.read_from(store).child_delegation is expected
