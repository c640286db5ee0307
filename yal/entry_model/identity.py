"""Numeric uid/gid to name lookups built once from the system databases.

Users and groups live in two separate read-only mappings so the two numeric
spaces never cross-resolve. Unreadable databases produce an empty half and
lookups fall back to the decimal id.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


def _read_user_names() -> dict[int, str]:
    """Return ``uid -> login name`` for every passwd record, or ``{}``."""
    try:
        import pwd

        records = pwd.getpwall()
    except (ImportError, OSError, KeyError):
        return {}
    names: dict[int, str] = {}
    for record in records:
        names.setdefault(record.pw_uid, record.pw_name)
    return names


def _read_group_names() -> dict[int, str]:
    """Return ``gid -> group name`` for every group record, or ``{}``."""
    try:
        import grp

        records = grp.getgrall()
    except (ImportError, OSError, KeyError):
        return {}
    names: dict[int, str] = {}
    for record in records:
        names.setdefault(record.gr_gid, record.gr_name)
    return names


def _frozen(mapping: Mapping[int, str] | None) -> Mapping[int, str]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class IdentityCache:
    """Read-only owner/group name tables shared across one listing run."""

    users: Mapping[int, str] = field(default_factory=dict)
    groups: Mapping[int, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "users", _frozen(self.users))
        object.__setattr__(self, "groups", _frozen(self.groups))

    @classmethod
    def from_system(cls) -> IdentityCache:
        """Read the passwd and group databases in full."""
        return cls(users=_read_user_names(), groups=_read_group_names())

    def resolve_user(self, uid: int) -> str:
        """Return the login name for ``uid`` or ``str(uid)`` on a miss."""
        name = self.users.get(uid)
        return name if name is not None else str(uid)

    def resolve_group(self, gid: int) -> str:
        """Return the group name for ``gid`` or ``str(gid)`` on a miss."""
        name = self.groups.get(gid)
        return name if name is not None else str(gid)


__all__ = [
    "IdentityCache",
]
