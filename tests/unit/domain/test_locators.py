"""Unit tests for `forkbooter.domain.locators`."""

from __future__ import annotations

from pathlib import Path

import pytest

from forkbooter.domain.errors import LocatorResolutionError
from forkbooter.domain.locators import file_name, has_url_scheme, to_url


@pytest.mark.parametrize(
    ("locator", "expected"),
    [
        ("file:/opt/lib/a.jar", True),
        ("https://repo.example.org/a.jar", True),
        ("jar:file:/opt/a.jar!/", True),
        ("foo.jar", False),
        ("/opt/lib/a.jar", False),
        ("C:\\lib\\a.jar", False),  # drive letter, not a scheme
        ("lib/a:b.jar", False),
    ],
)
def test_has_url_scheme(locator, expected):
    """Schemes need two or more characters and must start the locator."""
    assert has_url_scheme(locator) is expected


def test_relative_path_resolves_against_cwd(tmp_path, monkeypatch):
    """Relative paths become file URLs under the working directory."""
    monkeypatch.chdir(tmp_path)
    url = to_url("lib/foo.jar")
    assert url.startswith("file://")
    assert url == (tmp_path / "lib" / "foo.jar").as_uri()
    assert url.endswith("foo.jar")


def test_absolute_path_resolves_to_itself(tmp_path):
    """Absolute paths keep their location."""
    jar = tmp_path / "bar.jar"
    assert to_url(str(jar)) == jar.as_uri()


def test_urls_are_returned_unchanged():
    """A locator that is already a URL is not touched."""
    assert to_url("https://repo.example.org/a.jar") == "https://repo.example.org/a.jar"


def test_nul_byte_cannot_be_resolved():
    """No filesystem accepts NUL; resolution fails with the locator attached."""
    with pytest.raises(LocatorResolutionError) as excinfo:
        to_url("bad\x00.jar")
    assert excinfo.value.locator == "bad\x00.jar"


def test_spaces_are_percent_encoded(tmp_path):
    """File URLs escape characters that are not allowed in URLs."""
    url = to_url(str(tmp_path / "my lib.jar"))
    assert url.endswith("my%20lib.jar")
    assert Path(tmp_path / "my lib.jar").as_uri() == url


@pytest.mark.parametrize(
    ("locator", "expected"),
    [
        ("foo.jar", "foo.jar"),
        ("/opt/lib/foo.jar", "foo.jar"),
        ("target/classes/", "classes"),
        ("C:\\lib\\foo.jar", "foo.jar"),
        ("https://repo.example.org/lib/foo.jar", "foo.jar"),
        ("/", "/"),
    ],
)
def test_file_name(locator, expected):
    """The last path component is kept, whatever the separator."""
    assert file_name(locator) == expected
