"""Status output parsing tests.

Covers the conflict-flag header, rename/copy path canonicalization, and
degenerate input that must parse to an empty list instead of failing.
"""

from __future__ import annotations

import unittest

from lazyjj.details.file_list import FileStatus
from lazyjj.details.status_parser import canonical_file_name, parse_status


class ParseStatusTests(unittest.TestCase):
    def test_flags_pair_with_entries_in_order(self) -> None:
        items = parse_status("true false\nM path/to/file1.txt\nR old.txt => new.txt")

        self.assertEqual(len(items), 2)
        self.assertEqual(items[0].status, FileStatus.MODIFIED)
        self.assertEqual(items[0].file_name, "path/to/file1.txt")
        self.assertTrue(items[0].conflict)
        self.assertEqual(items[1].status, FileStatus.RENAMED)
        self.assertEqual(items[1].file_name, "new.txt")
        self.assertEqual(items[1].display_name, "old.txt => new.txt")
        self.assertFalse(items[1].conflict)

    def test_empty_output_parses_to_empty_list(self) -> None:
        self.assertEqual(parse_status(""), [])

    def test_header_without_entries_parses_to_empty_list(self) -> None:
        self.assertEqual(parse_status("\n"), [])
        self.assertEqual(parse_status("true\n"), [])

    def test_blank_lines_are_skipped_without_consuming_flags(self) -> None:
        items = parse_status("false true\nA a.txt\n\n   \nD b.txt\n")

        self.assertEqual([item.file_name for item in items], ["a.txt", "b.txt"])
        self.assertEqual([item.conflict for item in items], [False, True])
        self.assertEqual([item.status for item in items], [FileStatus.ADDED, FileStatus.DELETED])

    def test_missing_flag_reads_as_no_conflict(self) -> None:
        items = parse_status("true\nM a.txt\nM b.txt\n")

        self.assertEqual([item.conflict for item in items], [True, False])

    def test_unknown_status_character_is_treated_as_modified(self) -> None:
        items = parse_status("false\nX weird.txt\n")

        self.assertEqual(items[0].status, FileStatus.MODIFIED)
        self.assertEqual(items[0].file_name, "weird.txt")

    def test_copied_entry_uses_destination(self) -> None:
        items = parse_status("false\nC src/{a.py => b.py}\n")

        self.assertEqual(items[0].status, FileStatus.COPIED)
        self.assertEqual(items[0].file_name, "src/b.py")
        self.assertEqual(items[0].display_name, "src/{a.py => b.py}")

    def test_selected_names_mark_matching_items(self) -> None:
        items = parse_status("false false\nM a.txt\nM b.txt\n", selected_names=["b.txt"])

        self.assertEqual([item.selected for item in items], [False, True])

    def test_item_count_matches_non_blank_entry_lines(self) -> None:
        entries = ["M one.txt", "A two.txt", "", "D three.txt", "R x => y"]
        raw = "false false false false\n" + "\n".join(entries)

        self.assertEqual(len(parse_status(raw)), 4)


class CanonicalFileNameTests(unittest.TestCase):
    def test_whole_path_rename_with_spaces(self) -> None:
        self.assertEqual(
            canonical_file_name(FileStatus.RENAMED, "old dir/a.txt => new dir/a.txt"),
            "new dir/a.txt",
        )

    def test_brace_rename_inside_directory(self) -> None:
        self.assertEqual(canonical_file_name(FileStatus.RENAMED, "dir/{a.txt => b.txt}"), "dir/b.txt")

    def test_brace_rename_of_directory_segment(self) -> None:
        self.assertEqual(
            canonical_file_name(FileStatus.RENAMED, "src/{old => new}/mod.py"),
            "src/new/mod.py",
        )

    def test_brace_rename_into_parent_directory_is_normalized(self) -> None:
        self.assertEqual(canonical_file_name(FileStatus.RENAMED, "{sub => }/file.txt"), "file.txt")

    def test_non_rename_paths_are_verbatim(self) -> None:
        self.assertEqual(canonical_file_name(FileStatus.MODIFIED, "a => b"), "a => b")
        self.assertEqual(canonical_file_name(FileStatus.ADDED, "dir/{x}.txt"), "dir/{x}.txt")


if __name__ == "__main__":
    unittest.main()
