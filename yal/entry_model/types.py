"""Domain datatypes for resolved directory listing entries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedEntry:
    """Render-ready metadata for one directory entry.

    Every field except ``is_dir`` is already a display string; ``name`` is the
    raw entry name and is not sanitized.
    """

    name: str
    permissions: str
    owner: str
    group: str
    modified: str
    icon: str
    is_dir: bool = False


__all__ = [
    "ResolvedEntry",
]
