"""`.properties` file adapter.

Reads and writes the line-oriented ``key=value`` text format a parent hands
to a forked booter process. The supported subset follows the usual
``.properties`` rules:

- Blank lines and lines starting with ``#`` or ``!`` are ignored.
- The key ends at the first unescaped ``=``, ``:`` or whitespace; whitespace
  around the separator is dropped.
- A line ending in an odd number of backslashes continues on the next line
  (leading whitespace of the continuation is dropped).
- Escapes: ``\\t``, ``\\n``, ``\\r``, ``\\f``, ``\\uXXXX``; any other escaped
  character stands for itself (``\\=``, ``\\:``, ``\\ ``, ``\\\\`` ...).

Files are UTF-8. Saving is atomic: the content goes to a temporary file in
the target directory which then replaces the destination.
"""

from __future__ import annotations

import logging
import os
import re
import string
import tempfile
from pathlib import Path

from forkbooter.interfaces.properties import PropertyStore

from .memory import InMemoryPropertyStore

__all__ = ["PropertiesFile", "PropertiesFileError", "format_properties", "parse_properties"]

logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\f"
_KEY_TERMINATORS = "=:" + _WHITESPACE
_UNESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_ESCAPES = {"\\": "\\\\", "\t": "\\t", "\n": "\\n", "\r": "\\r", "\f": "\\f"}


class PropertiesFileError(Exception):
    """Raised when a properties file cannot be parsed."""

    def __init__(self, message: str, line: str | None = None) -> None:
        super().__init__(message if line is None else f"{message} in line {line!r}")
        self.line = line


# ============================================================================
#                                 Parsing
# ============================================================================


def _logical_lines(text: str):
    pending: str | None = None
    for raw in _LINE_BREAK_RE.split(text):
        line = raw.lstrip(_WHITESPACE)
        if pending is None and (not line or line[0] in "#!"):
            continue
        trailing = len(line) - len(line.rstrip("\\"))
        continued = trailing % 2 == 1
        if continued:
            line = line[:-1]
        pending = line if pending is None else pending + line
        if not continued:
            yield pending
            pending = None
    if pending is not None:
        yield pending


def _unescape(text: str, line: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        if i + 1 >= len(text):
            # dangling backslash at end of input
            break
        escaped = text[i + 1]
        if escaped == "u":
            digits = text[i + 2 : i + 6]
            if len(digits) != 4 or any(c not in string.hexdigits for c in digits):
                raise PropertiesFileError("Malformed \\uXXXX escape", line)
            out.append(chr(int(digits, 16)))
            i += 6
            continue
        out.append(_UNESCAPES.get(escaped, escaped))
        i += 2
    return "".join(out)


def _split_entry(line: str) -> tuple[str, str]:
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch in _KEY_TERMINATORS:
            break
        i += 1
    raw_key = line[:i]
    rest = line[i:].lstrip(_WHITESPACE)
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(_WHITESPACE)
    return _unescape(raw_key, line), _unescape(rest, line)


def parse_properties(text: str) -> InMemoryPropertyStore:
    """Parse ``.properties`` text into a new in-memory store.

    Later duplicates of a key override earlier ones.

    Raises:
        PropertiesFileError: On a malformed ``\\uXXXX`` escape.
    """
    store = InMemoryPropertyStore()
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        store.set(key, value)
    return store


# ============================================================================
#                                Formatting
# ============================================================================


def _escape(text: str, *, is_key: bool) -> str:
    out: list[str] = []
    for index, ch in enumerate(text):
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch in "=:#!":
            out.append("\\" + ch)
        elif ch == " " and (is_key or index == 0):
            out.append("\\ ")
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    return "".join(out)


def format_properties(store: PropertyStore, comment: str | None = None) -> str:
    """Render *store* as ``.properties`` text, keys in store order."""
    lines: list[str] = []
    if comment:
        lines.extend(f"# {part}" for part in comment.splitlines())
    for key, value in store.items():
        lines.append(f"{_escape(key, is_key=True)}={_escape(value, is_key=False)}")
    return "".join(f"{line}\n" for line in lines)


# ============================================================================
#                                 Adapter
# ============================================================================


class PropertiesFile:
    """A ``.properties`` file on the local filesystem.

    Example
    -------
        props = PropertiesFile("target/booter.properties")
        store = props.load() if props.exists() else InMemoryPropertyStore()
        classpath.write_to_fork_properties(store, "classPathUrl.")
        props.save(store)
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        """Return True if the file is present."""
        return self.path.is_file()

    def load(self) -> InMemoryPropertyStore:
        """Read the file into a new in-memory store.

        Raises:
            FileNotFoundError: If the file does not exist.
            PropertiesFileError: If the content is malformed.
        """
        text = self.path.read_text(encoding="utf-8")
        store = parse_properties(text)
        logger.debug("Loaded %d propert(ies) from %s", len(store), self.path)
        return store

    def save(self, store: PropertyStore, comment: str | None = None) -> None:
        """Atomically replace the file with the content of *store*."""
        content = format_properties(store, comment)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        with tempfile.NamedTemporaryFile(  # pragma: no mutate
            "w",
            encoding="utf-8",
            newline="\n",
            dir=self.path.parent,
            prefix=f".{self.path.name}.",
            delete=False,
        ) as tmp:
            tmp_path = Path(tmp.name)
            tmp.write(content)

        try:
            os.replace(tmp_path, self.path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
        logger.debug("Saved properties to %s", self.path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"
