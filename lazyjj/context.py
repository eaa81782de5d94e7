"""Shared cross-view selection registry.

Views that can check items (files here, revisions in the graph view) record
them in one ``SelectionRegistry`` handed to each view at construction, so a
later command can act on everything the user checked across views.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectedFile:
    """One file of one revision, as checked or highlighted in the details view."""

    change_id: str
    commit_id: str
    file: str


class SelectionRegistry:
    """Checked items plus the currently highlighted item.

    Adds and removes compare by equality and are idempotent.
    """

    def __init__(self) -> None:
        self._checked: list[object] = []
        self.selected_item: object | None = None

    def add_checked_item(self, item: object) -> None:
        if item not in self._checked:
            self._checked.append(item)

    def remove_checked_item(self, item: object) -> None:
        self._checked = [checked for checked in self._checked if checked != item]

    def clear_checked_items(self, kind: type | None = None) -> None:
        """Drop every checked item, or only those of ``kind``."""
        if kind is None:
            self._checked.clear()
            return
        self._checked = [checked for checked in self._checked if not isinstance(checked, kind)]

    def checked_items(self, kind: type | None = None) -> tuple[object, ...]:
        if kind is None:
            return tuple(self._checked)
        return tuple(checked for checked in self._checked if isinstance(checked, kind))

    def set_selected_item(self, item: object) -> None:
        self.selected_item = item


__all__ = ["SelectedFile", "SelectionRegistry"]
