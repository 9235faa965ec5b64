"""Tests for directory scanning, entry classification, and name ordering."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from lstree.file_tree_model import (
    EntryKind,
    TreeEntry,
    compare_names,
    display_name,
    list_directory_children,
    never_executable,
    sort_children,
)
from lstree.options import TreeOptions


def _names(children: list[TreeEntry]) -> list[str]:
    return [child.name for child in children]


class CompareNamesTests(unittest.TestCase):
    def test_orders_case_insensitively_first(self) -> None:
        self.assertLess(compare_names("A.txt", "b.txt"), 0)
        self.assertGreater(compare_names("b.txt", "A.txt"), 0)
        self.assertLess(compare_names("apple", "Banana"), 0)

    def test_lowercase_variant_wins_case_tie(self) -> None:
        self.assertLess(compare_names("readme", "README"), 0)
        self.assertGreater(compare_names("README", "readme"), 0)
        self.assertLess(compare_names("readMe", "README"), 0)

    def test_identical_names_compare_equal(self) -> None:
        self.assertEqual(compare_names("same", "same"), 0)

    def test_sort_children_interleaves_kinds_alphabetically(self) -> None:
        root = Path("/virtual")
        children = [
            TreeEntry("sub", root / "sub", EntryKind.DIRECTORY),
            TreeEntry("README", root / "README", EntryKind.FILE, executable=False),
            TreeEntry("b.txt", root / "b.txt", EntryKind.FILE, executable=False),
            TreeEntry("readme", root / "readme", EntryKind.FILE, executable=False),
            TreeEntry("A.txt", root / "A.txt", EntryKind.FILE, executable=False),
        ]

        self.assertEqual(_names(sort_children(children)), ["A.txt", "b.txt", "readme", "README", "sub"])


class DisplayNameTests(unittest.TestCase):
    def test_plain_names_are_unchanged(self) -> None:
        self.assertEqual(display_name("résumé.txt"), "résumé.txt")

    def test_control_characters_are_escaped(self) -> None:
        self.assertEqual(display_name("evil\x1b[31m.txt"), "evil\\x1b[31m.txt")
        self.assertEqual(display_name("tab\there"), "tab\\x09here")

    def test_undecodable_bytes_become_replacement_characters(self) -> None:
        raw = os.fsdecode(b"bad\xffname")
        self.assertEqual(display_name(raw), "bad�name")


class ListDirectoryChildrenTests(unittest.TestCase):
    def _make_tree(self, root: Path) -> None:
        (root / "b.txt").write_text("b", encoding="utf-8")
        (root / "A.txt").write_text("a", encoding="utf-8")
        (root / ".hidden").write_text("h", encoding="utf-8")
        (root / "sub").mkdir()
        (root / ".git").mkdir()

    def test_hides_dot_entries_by_default(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._make_tree(root)

            children, scan_error = list_directory_children(root, TreeOptions(), never_executable)

            self.assertIsNone(scan_error)
            self.assertEqual(_names(children), ["A.txt", "b.txt", "sub"])

    def test_show_hidden_includes_dot_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._make_tree(root)

            children, _scan_error = list_directory_children(root, TreeOptions(show_hidden=True), never_executable)

            self.assertEqual(_names(children), [".git", ".hidden", "A.txt", "b.txt", "sub"])

    def test_hidden_filter_only_looks_at_entry_name(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            hidden_parent = Path(tmp) / ".config"
            hidden_parent.mkdir()
            (hidden_parent / "visible.txt").write_text("v", encoding="utf-8")

            children, _scan_error = list_directory_children(hidden_parent, TreeOptions(), never_executable)

            self.assertEqual(_names(children), ["visible.txt"])

    def test_directory_only_keeps_directories(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._make_tree(root)

            children, _scan_error = list_directory_children(root, TreeOptions(directory_only=True), never_executable)

            self.assertEqual(_names(children), ["sub"])
            self.assertTrue(all(child.kind is EntryKind.DIRECTORY for child in children))

    def test_file_only_keeps_regular_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._make_tree(root)

            children, _scan_error = list_directory_children(root, TreeOptions(file_only=True), never_executable)

            self.assertEqual(_names(children), ["A.txt", "b.txt"])

    def test_conflicting_only_flags_list_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._make_tree(root)

            children, scan_error = list_directory_children(
                root,
                TreeOptions(directory_only=True, file_only=True),
                never_executable,
            )

            self.assertEqual(children, [])
            self.assertIsNone(scan_error)

    def test_executable_flag_is_resolved_for_files_only(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._make_tree(root)
            seen: list[Path] = []

            def classifier(path: Path) -> bool:
                seen.append(path)
                return path.name == "A.txt"

            children, _scan_error = list_directory_children(root, TreeOptions(), classifier)
            by_name = {child.name: child for child in children}

            self.assertTrue(by_name["A.txt"].executable)
            self.assertFalse(by_name["b.txt"].executable)
            self.assertIsNone(by_name["sub"].executable)
            self.assertEqual(sorted(path.name for path in seen), ["A.txt", "b.txt"])

    def test_missing_directory_reports_scan_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            children, scan_error = list_directory_children(Path(tmp) / "missing", TreeOptions(), never_executable)

            self.assertEqual(children, [])
            self.assertIsInstance(scan_error, FileNotFoundError)


@unittest.skipUnless(hasattr(os, "symlink"), "symlinks unsupported")
class SymlinkClassificationTests(unittest.TestCase):
    def test_symlinks_are_never_followed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "real_dir").mkdir()
            (root / "real_file").write_text("x", encoding="utf-8")
            os.symlink(root / "real_dir", root / "link_dir")
            os.symlink(root / "real_file", root / "link_file")
            os.symlink(root / "nowhere", root / "link_dangling")

            children, _scan_error = list_directory_children(root, TreeOptions(), never_executable)
            kinds = {child.name: child.kind for child in children}

            self.assertEqual(kinds["real_dir"], EntryKind.DIRECTORY)
            self.assertEqual(kinds["real_file"], EntryKind.FILE)
            self.assertEqual(kinds["link_dir"], EntryKind.SYMBOLIC_LINK)
            self.assertEqual(kinds["link_file"], EntryKind.SYMBOLIC_LINK)
            self.assertEqual(kinds["link_dangling"], EntryKind.SYMBOLIC_LINK)

    def test_symlinked_directory_is_not_a_directory_for_directory_only(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "real_dir").mkdir()
            os.symlink(root / "real_dir", root / "link_dir")

            children, _scan_error = list_directory_children(root, TreeOptions(directory_only=True), never_executable)

            self.assertEqual(_names(children), ["real_dir"])


@unittest.skipUnless(hasattr(os, "mkfifo"), "fifos unsupported")
class UnknownKindTests(unittest.TestCase):
    def test_fifo_is_unknown(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            os.mkfifo(root / "pipe")

            children, _scan_error = list_directory_children(root, TreeOptions(), never_executable)

            self.assertEqual([(child.name, child.kind) for child in children], [("pipe", EntryKind.UNKNOWN)])


if __name__ == "__main__":
    unittest.main()
