"""Messages and effect descriptors exchanged between the view and its host.

Operations never call ``jj`` or touch the terminal themselves. They return
plain records from this module: *effects* ask the host to run something,
*messages* are posted back into the event loop when work completes or when
another view needs to know about a change.
"""

from __future__ import annotations

from dataclasses import dataclass

from .context import SelectedFile
from .jj.commands import JJCommand
from .jj.revision import Revision


# Messages


@dataclass(frozen=True)
class Refresh:
    """Reload the inspected revision from ``jj``."""


@dataclass(frozen=True)
class Close:
    """Close the details view."""


@dataclass(frozen=True)
class CloseConfirmation:
    """Dismiss the confirmation overlay, if any."""


@dataclass(frozen=True)
class ShowDiff:
    text: str


@dataclass(frozen=True)
class SelectionChanged:
    """The highlighted file changed; sibling views follow it."""

    item: SelectedFile


@dataclass(frozen=True)
class StartSquash:
    revision: Revision
    files: tuple[str, ...]


@dataclass(frozen=True)
class UpdateRevset:
    """Replace the revision browser's active query."""

    revset: str


@dataclass(frozen=True)
class StatusLoaded:
    """Status output for ``change_id``, tagged so stale loads can be dropped."""

    change_id: str
    summary: str
    selected_files: tuple[str, ...]
    commit_id: str = ""


@dataclass(frozen=True)
class CommandCompleted:
    command: str
    output: str
    error: Exception | None = None


# Effects


@dataclass(frozen=True)
class LoadStatus:
    """Snapshot the working copy, then fetch status for ``revision``."""

    revision: Revision
    selected_files: tuple[str, ...]


@dataclass(frozen=True)
class FetchDiff:
    """Run ``command`` synchronously and show its output as a diff."""

    command: JJCommand


@dataclass(frozen=True)
class RunAsync:
    """Run ``command`` in the background; post ``on_success`` when it succeeds."""

    command: JJCommand
    on_success: tuple[object, ...] = ()


@dataclass(frozen=True)
class RunInteractive:
    """Suspend the UI, run ``command`` in the foreground, then post ``on_success``."""

    command: JJCommand
    on_success: tuple[object, ...] = ()


COMMAND_EFFECTS = (LoadStatus, FetchDiff, RunAsync, RunInteractive)


__all__ = [
    "COMMAND_EFFECTS",
    "Close",
    "CloseConfirmation",
    "CommandCompleted",
    "FetchDiff",
    "LoadStatus",
    "Refresh",
    "RunAsync",
    "RunInteractive",
    "SelectionChanged",
    "ShowDiff",
    "StartSquash",
    "StatusLoaded",
    "UpdateRevset",
]
