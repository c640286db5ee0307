"""Column rendering for resolved directory entries.

Turns an ordered entry collection into display lines: a header, a blank
separator, then one line per entry built from the configured column order.
In column format every cell is right-aligned to the widest value of its
column; in simple format values keep their natural width.
"""

from __future__ import annotations

from pathlib import Path

from pygments.console import ansiformat, colorize

from .ansi import display_width, pad_left
from .config import (
    COLUMN_GROUP,
    COLUMN_ICON,
    COLUMN_MODIFIED,
    COLUMN_NAME,
    COLUMN_OWNER,
    COLUMN_PERMISSIONS,
    COLUMN_VOCABULARY,
    Config,
)
from .entry_model import ResolvedEntry

EMPTY_DIRECTORY_MESSAGE = "📭 Empty directory"
HEADER_ICON = "📂"
ICON_PADDING = " "

# pygments.console color keys per column.
COLUMN_COLORS: dict[str, str] = {
    COLUMN_PERMISSIONS: "yellow",
    COLUMN_OWNER: "green",
    COLUMN_GROUP: "cyan",
    COLUMN_MODIFIED: "magenta",
}
DIRECTORY_NAME_STYLE = "*blue*"


def column_value(entry: ResolvedEntry, column: str) -> str | None:
    """Return the plain text for ``column``, or ``None`` for unknown ids."""
    values = {
        COLUMN_ICON: entry.icon,
        COLUMN_PERMISSIONS: entry.permissions,
        COLUMN_OWNER: entry.owner,
        COLUMN_GROUP: entry.group,
        COLUMN_MODIFIED: entry.modified,
        COLUMN_NAME: entry.name,
    }
    return values.get(column)


def column_widths(entries: list[ResolvedEntry], config: Config) -> dict[str, int]:
    """Max display width per vocabulary column; disabled columns get 0."""
    widths: dict[str, int] = {}
    for column in COLUMN_VOCABULARY:
        if not config.column_enabled(column):
            widths[column] = 0
            continue
        widths[column] = max((display_width(column_value(entry, column) or "") for entry in entries), default=0)
    return widths


def style_cell(entry: ResolvedEntry, column: str, text: str, color: bool = True) -> str:
    """Wrap one already-padded cell in its column color."""
    if column == COLUMN_ICON:
        return f"{text}{ICON_PADDING}"
    if not color:
        return text
    if column == COLUMN_NAME:
        return ansiformat(DIRECTORY_NAME_STYLE, text) if entry.is_dir else text
    color_key = COLUMN_COLORS.get(column)
    return colorize(color_key, text) if color_key else text


def format_entry_line(
    entry: ResolvedEntry,
    config: Config,
    widths: dict[str, int] | None = None,
    color: bool = True,
) -> str:
    """Render one entry; ``widths`` switches on right alignment."""
    cells: list[str] = []
    for column in config.visible_columns():
        value = column_value(entry, column) or ""
        if widths is not None:
            value = pad_left(value, widths.get(column, 0))
        cells.append(style_cell(entry, column, value, color=color))
    return " ".join(cells)


def format_header(directory: Path | str, count: int) -> str:
    return f"{HEADER_ICON} {directory} ({count} items)"


def render_entry_lines(entries: list[ResolvedEntry], config: Config, color: bool = True) -> list[str]:
    """One line per entry, aligned when ``config.column_format`` is set."""
    widths = column_widths(entries, config) if config.column_format else None
    return [format_entry_line(entry, config, widths=widths, color=color) for entry in entries]


def render_listing(
    directory: Path | str,
    entries: list[ResolvedEntry],
    config: Config,
    color: bool = True,
) -> list[str]:
    """Return every output line for one directory listing.

    An empty collection produces only the empty-directory message.
    """
    if not entries:
        return [EMPTY_DIRECTORY_MESSAGE]
    return [format_header(directory, len(entries)), "", *render_entry_lines(entries, config, color=color)]


__all__ = [
    "EMPTY_DIRECTORY_MESSAGE",
    "COLUMN_COLORS",
    "column_value",
    "column_widths",
    "style_cell",
    "format_entry_line",
    "format_header",
    "render_entry_lines",
    "render_listing",
]
