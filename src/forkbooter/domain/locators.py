"""Locator resolution helpers.

A *locator* is the string identifying one classpath element: either a
filesystem path (relative or absolute) or a URL. These helpers turn locators
into URLs and short display names. They are pure functions with no I/O
besides reading the current working directory.
"""

import re
from pathlib import Path

from .errors import LocatorResolutionError

# RFC 3986 scheme followed by ':'; single letters are Windows drive letters.
_URL_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]+:")
_SEPARATORS_RE = re.compile(r"[\\/]")


def has_url_scheme(locator: str) -> bool:
    """Return True if *locator* already is a URL (e.g. ``file:``, ``jar:``)."""
    return _URL_SCHEME_RE.match(locator) is not None


def to_url(locator: str) -> str:
    """Resolve a locator into a URL string.

    URLs are returned unchanged. Anything else is treated as a filesystem
    path, made absolute against the current working directory (symlinks and
    ``..`` segments are kept as written) and rendered as a ``file://`` URL.

    Args:
        locator: Classpath element as stored in a `Classpath`.

    Returns:
        str: The URL form of the locator.

    Raises:
        LocatorResolutionError: If the locator contains a NUL byte, which no
            filesystem accepts.
    """
    if "\x00" in locator:
        raise LocatorResolutionError(locator, "embedded NUL byte")
    if has_url_scheme(locator):
        return locator
    return Path(locator).absolute().as_uri()


def file_name(locator: str) -> str:
    """Return the last path component of a locator.

    Works for paths using either separator and for URLs; trailing separators
    are ignored so ``"classes/"`` gives ``"classes"``.
    """
    trimmed = locator.rstrip("/\\")
    if not trimmed:
        return locator
    return _SEPARATORS_RE.split(trimmed)[-1]
