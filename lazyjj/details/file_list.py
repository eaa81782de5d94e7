"""Changed-file records and the cursor-addressed selection list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class FileStatus(Enum):
    """Change kind reported by ``jj`` for one file."""

    ADDED = "A"
    DELETED = "D"
    MODIFIED = "M"
    RENAMED = "R"
    COPIED = "C"

    @property
    def glyph(self) -> str:
        return self.value


@dataclass
class FileItem:
    """One changed file.

    ``display_name`` is the raw summary text (rename notation included) and
    is only shown to the user. ``file_name`` is the clean path every command
    operates on.
    """

    status: FileStatus
    display_name: str
    file_name: str
    selected: bool = False
    conflict: bool = False


class SelectionList:
    """Ordered file items with a cursor, checked flags, and a scroll window."""

    def __init__(self, items: Iterable[FileItem] = ()) -> None:
        self.items: list[FileItem] = list(items)
        self.cursor = 0
        self.list_start = 0

    def __len__(self) -> int:
        return len(self.items)

    def current(self) -> FileItem | None:
        if not self.items:
            return None
        return self.items[self.cursor]

    def cursor_up(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def cursor_down(self) -> None:
        if self.cursor < len(self.items) - 1:
            self.cursor += 1

    def toggle_current_selected(self) -> FileItem | None:
        """Flip the cursor item's checked flag, then move down one row."""
        current = self.current()
        if current is None:
            return None
        current.selected = not current.selected
        self.cursor_down()
        return current

    def checked_names(self) -> list[str]:
        return [item.file_name for item in self.items if item.selected]

    def effective_selection(self) -> list[str]:
        """Checked files, or the cursor file when nothing is checked."""
        checked = self.checked_names()
        if checked:
            return checked
        current = self.current()
        if current is None:
            return []
        return [current.file_name]

    def is_effectively_selected(self, index: int) -> bool:
        item = self.items[index]
        if item.selected:
            return True
        return index == self.cursor and not any(other.selected for other in self.items)

    def replace(self, items: Iterable[FileItem], previously_selected: Iterable[str]) -> None:
        """Install a fresh load, carrying checked state over by file name."""
        selected_names = set(previously_selected)
        self.items = list(items)
        for item in self.items:
            if item.file_name in selected_names:
                item.selected = True
        self.cursor = 0
        self.list_start = 0

    def scroll_to_cursor(self, visible_rows: int) -> int:
        """Clamp ``list_start`` so the cursor row is inside the window."""
        rows = max(1, visible_rows)
        if self.cursor < self.list_start:
            self.list_start = self.cursor
        elif self.cursor >= self.list_start + rows:
            self.list_start = self.cursor - rows + 1
        self.list_start = max(0, min(self.list_start, max(0, len(self.items) - rows)))
        return self.list_start


__all__ = ["FileItem", "FileStatus", "SelectionList"]
