"""ANSI-aware text measurement for column alignment.

Escape sequences take no columns, combining marks take none, and East Asian
wide/fullwidth characters (most emoji glyphs) take two.
"""

from __future__ import annotations

import re
import unicodedata

ESCAPE_SEQUENCE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Cells one character of a name or glyph occupies at column ``col``."""
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    """Remove escape sequences, leaving only printable text."""
    return ESCAPE_SEQUENCE_RE.sub("", text)


def display_width(text: str) -> int:
    """Number of terminal columns ``text`` occupies once printed."""
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def pad_left(text: str, width: int) -> str:
    """Right-align ``text`` within ``width`` display columns.

    Text already at least ``width`` columns wide is returned unchanged.
    """
    missing = width - display_width(text)
    if missing <= 0:
        return text
    return " " * missing + text
