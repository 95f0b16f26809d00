"""OSC-8 hyperlink utilities for the forkbooter CLI.

Detects whether the active text stream is likely to render OSC-8 terminal
hyperlinks and renders URLs accordingly, falling back to plain text.
"""

import os
import sys
from typing import TextIO

_OSC8_TERMINALS = {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Heuristically detect whether the target stream supports OSC-8 hyperlinks.

    Args:
        stream: File-like text stream to probe; defaults to ``sys.stdout``.

    Returns:
        bool: ``True`` if hyperlinks should be emitted; ``False`` otherwise.
        Non-TTY streams (pipes, redirects) always give ``False``.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    terminal_program = (os.getenv("TERM_PROGRAM") or "").lower()
    return bool(
        terminal_program in _OSC8_TERMINALS
        or os.getenv("WT_SESSION")  # Windows Terminal
        or os.getenv("VTE_VERSION")  # GNOME Terminal, Tilix, etc.
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str, label: str | None = None) -> str:
    """Return an OSC-8 hyperlink, or the plain text on unsupported terminals.

    Args:
        url: Target URL.
        label: Visible text; defaults to the URL itself.
    """
    text = label or url
    if not supports_osc8():
        return text
    return f"\x1b]8;;{url}\x07{text}\x1b]8;;\x07"  # OSC 8 ; ; URL BEL
