"""Details view public exports.

The view lists the changed files of one revision, tracks checked files,
and turns key presses into ``jj`` command effects behind a confirmation
gate.
"""

from .confirmation import ConfirmationGate, ConfirmOption, PendingConfirmation
from .file_list import FileItem, FileStatus, SelectionList
from .operation import DetailsOperation
from .rendering import render_details
from .status_parser import parse_status

__all__ = [
    "ConfirmOption",
    "ConfirmationGate",
    "DetailsOperation",
    "FileItem",
    "FileStatus",
    "PendingConfirmation",
    "SelectionList",
    "parse_status",
    "render_details",
]
