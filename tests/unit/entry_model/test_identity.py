"""Tests for the uid/gid name cache."""

from __future__ import annotations

import unittest
from types import SimpleNamespace
from unittest import mock

from yal.entry_model import IdentityCache


class IdentityCacheTests(unittest.TestCase):
    def test_known_ids_resolve_to_names(self) -> None:
        cache = IdentityCache(users={0: "root", 1000: "alice"}, groups={0: "wheel"})
        self.assertEqual(cache.resolve_user(1000), "alice")
        self.assertEqual(cache.resolve_group(0), "wheel")

    def test_missing_id_falls_back_to_decimal_string(self) -> None:
        cache = IdentityCache(users={0: "root"}, groups={})
        self.assertEqual(cache.resolve_user(4242), "4242")
        self.assertEqual(cache.resolve_group(0), "0")

    def test_user_and_group_tables_never_cross_resolve(self) -> None:
        cache = IdentityCache(users={50: "svc"}, groups={60: "staff"})
        self.assertEqual(cache.resolve_group(50), "50")
        self.assertEqual(cache.resolve_user(60), "60")

    def test_tables_are_read_only(self) -> None:
        source = {1: "daemon"}
        cache = IdentityCache(users=source, groups={})
        with self.assertRaises(TypeError):
            cache.users[2] = "bin"  # type: ignore[index]
        source[3] = "sys"
        self.assertEqual(cache.resolve_user(3), "3")

    def test_from_system_reads_both_databases(self) -> None:
        users = [SimpleNamespace(pw_uid=0, pw_name="root"), SimpleNamespace(pw_uid=0, pw_name="toor")]
        groups = [SimpleNamespace(gr_gid=100, gr_name="users")]
        with mock.patch("pwd.getpwall", return_value=users), mock.patch("grp.getgrall", return_value=groups):
            cache = IdentityCache.from_system()
        self.assertEqual(cache.resolve_user(0), "root")
        self.assertEqual(cache.resolve_group(100), "users")

    def test_unreadable_database_leaves_that_half_empty(self) -> None:
        groups = [SimpleNamespace(gr_gid=100, gr_name="users")]
        with mock.patch("pwd.getpwall", side_effect=OSError("no passwd")), mock.patch(
            "grp.getgrall", return_value=groups
        ):
            cache = IdentityCache.from_system()
        self.assertEqual(dict(cache.users), {})
        self.assertEqual(cache.resolve_user(0), "0")
        self.assertEqual(cache.resolve_group(100), "users")


if __name__ == "__main__":
    unittest.main()
