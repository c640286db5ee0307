"""Stable display ordering for resolved entries."""

from __future__ import annotations

from ..config import Config
from .types import ResolvedEntry


def entry_sort_key(entry: ResolvedEntry, sort_dirs_first: bool) -> tuple[bool, str] | str:
    if sort_dirs_first:
        return (not entry.is_dir, entry.name.lower())
    return entry.name.lower()


def order_entries(entries: list[ResolvedEntry], config: Config) -> list[ResolvedEntry]:
    """Sort ``entries`` in place by case-insensitive name and return them.

    Directories lead when ``config.sort_dirs_first`` is set. The sort is
    stable, so names equal after lower-casing keep enumeration order.
    """
    entries.sort(key=lambda entry: entry_sort_key(entry, config.sort_dirs_first))
    return entries


__all__ = [
    "entry_sort_key",
    "order_entries",
]
