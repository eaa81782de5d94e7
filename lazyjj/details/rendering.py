"""Compose the details list and confirmation overlay into one block.

Rendering is side-effect free apart from clamping the list's scroll window
to the rows that fit.
"""

from __future__ import annotations

from ..ansi import place_block
from ..ui_theme import UITheme
from .confirmation import ConfirmationGate
from .file_list import FileItem, FileStatus, SelectionList

# Header, spacing and footer rows the host draws around the block.
CHROME_ROWS = 5
CHECK_MARK = "✓"


def status_style(status: FileStatus, theme: UITheme) -> str:
    return {
        FileStatus.ADDED: theme.details_added,
        FileStatus.DELETED: theme.details_deleted,
        FileStatus.MODIFIED: theme.details_modified,
        FileStatus.RENAMED: theme.details_renamed,
        FileStatus.COPIED: theme.details_copied,
    }[status]


def format_file_row(item: FileItem, *, is_cursor: bool, hint: str, theme: UITheme) -> str:
    reset = theme.reset
    check = CHECK_MARK if item.selected else " "
    name_style = theme.details_selected if item.selected else theme.details_text
    row = f"{status_style(item.status, theme)}{item.status.glyph}{reset}{check} {name_style}{item.display_name}{reset}"
    if item.conflict:
        row += f" {theme.details_conflict}conflict{reset}"
    if is_cursor:
        row = f"{theme.details_cursor}{row}{reset}{theme.details_cursor_suffix}"
    if hint:
        row += f" {theme.details_dimmed}{hint}{reset}"
    return row


def visible_row_count(height: int, overlay_rows: int, item_count: int) -> int:
    return max(1, min(height - CHROME_ROWS - overlay_rows, item_count))


def render_details(
    files: SelectionList,
    confirmation: ConfirmationGate,
    theme: UITheme,
    height: int,
) -> list[str]:
    """Render rows plus overlay, trimmed and padded to a uniform rectangle."""
    if not files.items:
        return [f"{theme.details_dimmed}No changes{theme.reset}"]

    overlay = confirmation.render(theme)
    rows = visible_row_count(height, len(overlay), len(files.items))
    start = files.scroll_to_cursor(rows)
    pending = confirmation.pending

    lines: list[str] = []
    for index in range(start, min(len(files.items), start + rows)):
        hint = ""
        if pending is not None:
            hint = pending.selected_hint if files.is_effectively_selected(index) else pending.unselected_hint
        lines.append(
            format_file_row(
                files.items[index],
                is_cursor=index == files.cursor,
                hint=hint,
                theme=theme,
            )
        )
    lines.extend(overlay)
    # Whitespace-only padding would show the terminal's own background colour.
    return place_block([line.strip() for line in lines], theme.details_background_sgr)


__all__ = ["CHECK_MARK", "CHROME_ROWS", "format_file_row", "render_details", "status_style", "visible_row_count"]
