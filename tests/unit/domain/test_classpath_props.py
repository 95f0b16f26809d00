"""Hypothesis property tests for `Classpath`.

- **Set semantics**: any sequence of adds yields each distinct value once,
  in order of first occurrence.
- **Fork properties round-trip**: writing under a prefix and reading back
  gives an equal classpath.
- **System property round-trip**: for locators free of the path separator,
  the joined string reads back to an equal classpath.
- **Join**: equals adding all of the first then all of the second.
"""

from __future__ import annotations

import os

import pytest
from hypothesis import given
from hypothesis import strategies as st

from forkbooter.adapters.properties import InMemoryPropertyStore
from forkbooter.domain import Classpath

pytestmark = [pytest.mark.property]

locators = st.text(min_size=1, max_size=20)
separator_free_locators = locators.filter(lambda s: os.pathsep not in s)


def first_occurrences(values: list[str]) -> list[str]:
    """Return *values* without repeats, keeping first occurrences."""
    return list(dict.fromkeys(values))


@given(st.lists(locators, max_size=30))
def test_adds_keep_first_occurrence_order(values):
    """Each distinct added value appears exactly once, in first-seen order."""
    classpath = Classpath()
    for value in values:
        classpath.add_class_path_element_url(value)
    assert classpath.get_class_path() == first_occurrences(values)


@given(st.lists(locators, max_size=30), st.text(max_size=10))
def test_fork_properties_round_trip(values, prefix):
    """Write then read under the same prefix reproduces the classpath."""
    classpath = Classpath(values)
    store = InMemoryPropertyStore()
    classpath.write_to_fork_properties(store, prefix)
    assert Classpath.read_from_fork_properties(store, prefix) == classpath


@given(st.lists(separator_free_locators, max_size=30))
def test_system_property_round_trip(values):
    """The separator-joined string reads back to the same classpath."""
    classpath = Classpath(values)
    store = InMemoryPropertyStore()
    classpath.write_to_system_property("prop", store)
    assert store.get("prop").count(os.pathsep) == len(classpath)
    assert Classpath.read_from_system_property("prop", store) == classpath


@given(st.lists(locators, max_size=15), st.lists(locators, max_size=15))
def test_join_matches_sequential_adds(first, second):
    """Join is the same as adding the first list and then the second."""
    joined = Classpath.join(Classpath(first), Classpath(second))
    assert joined.get_class_path() == first_occurrences(first + second)
