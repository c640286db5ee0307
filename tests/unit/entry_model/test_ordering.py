"""Tests for stable name/directory-first ordering."""

from __future__ import annotations

import unittest

from yal.config import Config
from yal.entry_model import ResolvedEntry, order_entries


def _entry(name: str, is_dir: bool = False, owner: str = "root") -> ResolvedEntry:
    return ResolvedEntry(
        name=name,
        permissions="644",
        owner=owner,
        group="root",
        modified="now",
        icon="📄",
        is_dir=is_dir,
    )


class OrderEntriesTests(unittest.TestCase):
    def test_directories_first_then_case_insensitive_name(self) -> None:
        entries = [_entry("b.txt"), _entry("zeta", is_dir=True), _entry("A", is_dir=True), _entry("a.rs")]
        ordered = order_entries(entries, Config(sort_dirs_first=True))
        self.assertEqual([entry.name for entry in ordered], ["A", "zeta", "a.rs", "b.txt"])

    def test_sorts_in_place(self) -> None:
        entries = [_entry("b"), _entry("a")]
        result = order_entries(entries, Config())
        self.assertIs(result, entries)
        self.assertEqual([entry.name for entry in entries], ["a", "b"])

    def test_without_dirs_first_types_are_mixed(self) -> None:
        entries = [_entry("b.txt"), _entry("Zeta", is_dir=True), _entry("a.rs"), _entry("C", is_dir=True)]
        ordered = order_entries(entries, Config(sort_dirs_first=False))
        self.assertEqual([entry.name for entry in ordered], ["a.rs", "b.txt", "C", "Zeta"])

    def test_case_insensitive_ties_keep_enumeration_order(self) -> None:
        first = _entry("readme", owner="first")
        second = _entry("README", owner="second")
        third = _entry("ReadMe", owner="third")
        for sort_dirs_first in (True, False):
            with self.subTest(sort_dirs_first=sort_dirs_first):
                ordered = order_entries([first, second, third], Config(sort_dirs_first=sort_dirs_first))
                self.assertEqual([entry.owner for entry in ordered], ["first", "second", "third"])
                reordered = order_entries([third, first, second], Config(sort_dirs_first=sort_dirs_first))
                self.assertEqual([entry.owner for entry in reordered], ["third", "first", "second"])

    def test_duplicate_directory_names_stay_stable(self) -> None:
        entries = [_entry("x", owner="1"), _entry("Dir", is_dir=True, owner="2"), _entry("dir", is_dir=True, owner="3")]
        ordered = order_entries(entries, Config(sort_dirs_first=True))
        self.assertEqual([entry.owner for entry in ordered], ["2", "3", "1"])


if __name__ == "__main__":
    unittest.main()
