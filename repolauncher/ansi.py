"""ANSI-aware text measurement helpers.

Menu framing is sized in terminal columns, so color codes must not count
toward width while wide characters such as emoji count as two.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns, and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return the visible column width of ``text`` ignoring escape codes."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def center_text(text: str, width: int) -> str:
    """Pad ``text`` with spaces to ``width`` columns, extra space on the right."""
    padding = max(0, width - display_width(text))
    left = padding // 2
    return " " * left + text + " " * (padding - left)
