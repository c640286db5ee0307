"""Domain model for one directory listing.

This package contains the non-rendering half of the pipeline:
- the resolved entry datatype
- uid/gid name lookups built once per run
- modified-time formatting (fuzzy age or epoch breakdown)
- extension-based type glyphs
- directory scanning, per-entry resolution, and display ordering
"""

from __future__ import annotations

from .types import ResolvedEntry
from .identity import IdentityCache
from .fuzzy_time import format_epoch_breakdown, format_fuzzy_duration, format_modified
from .icons import DEFAULT_ICON, DIRECTORY_ICON, EXTENSION_ICONS, HIDDEN_ICON, classify, file_extension
from .fs import (
    UNKNOWN_MODIFIED,
    display_name,
    format_permissions,
    is_hidden_name,
    list_directory_entries,
    modified_label,
    resolve_entry,
)
from .ordering import entry_sort_key, order_entries

__all__ = [
    "ResolvedEntry",
    "IdentityCache",
    "format_epoch_breakdown",
    "format_fuzzy_duration",
    "format_modified",
    "DEFAULT_ICON",
    "DIRECTORY_ICON",
    "EXTENSION_ICONS",
    "HIDDEN_ICON",
    "classify",
    "file_extension",
    "UNKNOWN_MODIFIED",
    "display_name",
    "format_permissions",
    "is_hidden_name",
    "list_directory_entries",
    "modified_label",
    "resolve_entry",
    "entry_sort_key",
    "order_entries",
]
