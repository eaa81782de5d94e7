"""Selection list cursor, check-mark and scroll-window tests."""

from __future__ import annotations

import unittest

from lazyjj.details.file_list import FileItem, FileStatus, SelectionList


def _items(*names: str) -> list[FileItem]:
    return [FileItem(status=FileStatus.MODIFIED, display_name=name, file_name=name) for name in names]


class SelectionListTests(unittest.TestCase):
    def test_cursor_moves_saturate_at_both_ends(self) -> None:
        files = SelectionList(_items("a", "b"))

        files.cursor_up()
        self.assertEqual(files.cursor, 0)
        files.cursor_down()
        files.cursor_down()
        self.assertEqual(files.cursor, 1)

    def test_empty_list_has_no_current_item(self) -> None:
        files = SelectionList()

        files.cursor_down()
        self.assertIsNone(files.current())
        self.assertIsNone(files.toggle_current_selected())
        self.assertEqual(files.effective_selection(), [])

    def test_toggle_flips_flag_then_advances_cursor(self) -> None:
        files = SelectionList(_items("a", "b"))

        toggled = files.toggle_current_selected()

        self.assertEqual(toggled.file_name, "a")
        self.assertTrue(files.items[0].selected)
        self.assertEqual(files.cursor, 1)

    def test_toggle_on_last_row_keeps_cursor_in_place(self) -> None:
        files = SelectionList(_items("a", "b"))
        files.cursor_down()

        files.toggle_current_selected()
        files.toggle_current_selected()

        self.assertEqual(files.cursor, 1)
        self.assertFalse(files.items[1].selected)

    def test_effective_selection_falls_back_to_cursor_file(self) -> None:
        files = SelectionList(_items("a", "b", "c"))
        files.cursor_down()

        self.assertEqual(files.effective_selection(), ["b"])
        self.assertTrue(files.is_effectively_selected(1))
        self.assertFalse(files.is_effectively_selected(0))

    def test_effective_selection_prefers_checked_files_in_list_order(self) -> None:
        files = SelectionList(_items("a", "b", "c"))
        files.items[2].selected = True
        files.items[0].selected = True
        files.cursor_down()

        self.assertEqual(files.effective_selection(), ["a", "c"])
        self.assertFalse(files.is_effectively_selected(1))

    def test_replace_carries_checks_by_name_and_resets_window(self) -> None:
        files = SelectionList(_items("a", "b", "c"))
        files.cursor = 2
        files.list_start = 1

        files.replace(_items("c", "x", "a"), ["a", "c", "gone"])

        self.assertEqual(files.checked_names(), ["c", "a"])
        self.assertEqual(files.cursor, 0)
        self.assertEqual(files.list_start, 0)

    def test_scroll_to_cursor_keeps_cursor_visible(self) -> None:
        files = SelectionList(_items(*"abcdefgh"))
        files.cursor = 6

        self.assertEqual(files.scroll_to_cursor(3), 4)
        files.cursor = 1
        self.assertEqual(files.scroll_to_cursor(3), 1)
        self.assertEqual(files.scroll_to_cursor(20), 0)


if __name__ == "__main__":
    unittest.main()
