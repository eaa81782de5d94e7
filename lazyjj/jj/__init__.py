"""jj command builders, process runner, and revision identity."""

from .commands import JJCommand, escape_file_name
from .revision import Revision, resolve_revision
from .runner import CommandResult, CommandRunner

__all__ = [
    "CommandResult",
    "CommandRunner",
    "JJCommand",
    "Revision",
    "escape_file_name",
    "resolve_revision",
]
