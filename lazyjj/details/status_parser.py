"""Parser for the details status output.

The first line carries one ``true``/``false`` conflict flag per file, in
order. Every following non-blank line is ``<STATUS> <path>``, where renames
and copies use ``{old => new}`` spans (``dir/{a.txt => b.txt}``) or, for a
whole-path rename, ``old => new``.
"""

from __future__ import annotations

import posixpath
import re
from collections.abc import Iterable

from .file_list import FileItem, FileStatus

_RENAME_SPAN_RE = re.compile(r"\{[^}]*? => \s*([^}]*?)\s*\}")
_RENAME_ARROW = " => "
_STATUS_BY_CHAR: dict[str, FileStatus] = {status.value: status for status in FileStatus}


def canonical_file_name(status: FileStatus, path: str) -> str:
    """Return the operation-usable path for one summary entry."""
    if status not in (FileStatus.RENAMED, FileStatus.COPIED):
        return path
    if "{" in path:
        return posixpath.normpath(_RENAME_SPAN_RE.sub(r"\1", path)).lstrip("/")
    if _RENAME_ARROW in path:
        _old, _arrow, new = path.partition(_RENAME_ARROW)
        return posixpath.normpath(new.strip())
    return path


def parse_status(raw: str, selected_names: Iterable[str] = ()) -> list[FileItem]:
    """Turn status output into file items.

    Output without the conflict-flag header yields an empty list. Blank
    lines are skipped without consuming a flag. Unknown status characters
    are treated as modifications.
    """
    lines = raw.splitlines()
    if not lines:
        return []

    conflicts = [flag == "true" for flag in lines[0].split(" ")]
    selected = set(selected_names)
    items: list[FileItem] = []
    for raw_line in lines[1:]:
        entry = raw_line.strip()
        if not entry:
            continue
        status = _STATUS_BY_CHAR.get(entry[0], FileStatus.MODIFIED)
        display_name = entry[2:]
        file_name = canonical_file_name(status, display_name)
        index = len(items)
        items.append(
            FileItem(
                status=status,
                display_name=display_name,
                file_name=file_name,
                selected=file_name in selected,
                conflict=conflicts[index] if index < len(conflicts) else False,
            )
        )
    return items


__all__ = ["canonical_file_name", "parse_status"]
