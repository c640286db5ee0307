"""Filesystem scanning and per-entry metadata resolution.

Listing is best-effort: hidden names are filtered before any metadata read,
and an entry whose metadata cannot be read is dropped without a report.
Only failure to open the target directory itself propagates.
"""

from __future__ import annotations

import math
import os
import stat
import time
from pathlib import Path

from ..config import Config
from .fuzzy_time import format_modified
from .icons import classify
from .identity import IdentityCache
from .types import ResolvedEntry

UNKNOWN_MODIFIED = "unknown"


def is_hidden_name(name: str) -> bool:
    return name.startswith(".")


def display_name(name: str) -> str:
    """Printable form of a filesystem name; undecodable bytes become U+FFFD."""
    return os.fsencode(name).decode("utf-8", "replace")


def format_permissions(mode: int) -> str:
    """Low nine permission bits as zero-padded three-digit octal."""
    return format(mode & 0o777, "03o")


def modified_label(stat_result: os.stat_result, use_fuzzy: bool, now: float | None = None) -> str:
    """Return modified-time text, or ``"unknown"`` when no usable mtime exists."""
    mtime = getattr(stat_result, "st_mtime", None)
    if mtime is None or not math.isfinite(mtime):
        return UNKNOWN_MODIFIED
    try:
        return format_modified(mtime, use_fuzzy, now=now)
    except (OverflowError, ValueError):
        return UNKNOWN_MODIFIED


def resolve_entry(
    name: str,
    stat_result: os.stat_result,
    identity_cache: IdentityCache,
    config: Config,
    now: float | None = None,
) -> ResolvedEntry:
    """Compose one render-ready entry from already-read metadata."""
    is_dir = stat.S_ISDIR(stat_result.st_mode)
    return ResolvedEntry(
        name=name,
        permissions=format_permissions(stat_result.st_mode),
        owner=identity_cache.resolve_user(stat_result.st_uid),
        group=identity_cache.resolve_group(stat_result.st_gid),
        modified=modified_label(stat_result, config.use_fuzzy_time, now=now),
        icon=classify(name, is_dir),
        is_dir=is_dir,
    )


def list_directory_entries(
    directory: Path,
    identity_cache: IdentityCache,
    config: Config,
    now: float | None = None,
) -> list[ResolvedEntry]:
    """Resolve every visible child of ``directory`` in enumeration order.

    Raises ``OSError`` when ``directory`` cannot be opened. ``now`` pins the
    clock for fuzzy ages; it defaults to one wall-clock read per listing.
    """
    if now is None and config.use_fuzzy_time:
        now = time.time()

    entries: list[ResolvedEntry] = []
    with os.scandir(directory) as children:
        for child in children:
            name = child.name
            if not config.show_hidden and is_hidden_name(name):
                continue
            try:
                stat_result = child.stat(follow_symlinks=False)
            except OSError:
                continue
            entries.append(resolve_entry(display_name(name), stat_result, identity_cache, config, now=now))
    return entries


__all__ = [
    "UNKNOWN_MODIFIED",
    "is_hidden_name",
    "display_name",
    "format_permissions",
    "modified_label",
    "resolve_entry",
    "list_directory_entries",
]
