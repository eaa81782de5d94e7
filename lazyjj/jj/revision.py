"""Revision identity and revset resolution."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import LazyJJError
from . import commands
from .runner import CommandRunner


@dataclass(frozen=True)
class Revision:
    """A jj revision: the stable change id plus the current commit id."""

    change_id: str
    commit_id: str

    @property
    def short_change_id(self) -> str:
        return self.change_id[:12]

    @property
    def short_commit_id(self) -> str:
        return self.commit_id[:12]


def parse_revision_line(output: str) -> Revision | None:
    """Parse ``<change_id> <commit_id>`` emitted by the revision template."""
    for line in output.splitlines():
        parts = line.split()
        if len(parts) == 2:
            return Revision(change_id=parts[0], commit_id=parts[1])
    return None


def resolve_revision(runner: CommandRunner, revset: str) -> Revision:
    """Resolve ``revset`` to a single revision.

    Raises the runner's error when ``jj`` fails, or ``LazyJJError`` when the
    revset matched nothing.
    """
    result = runner.run_sync(commands.resolve_revision(revset))
    if result.error is not None:
        raise result.error
    revision = parse_revision_line(result.output)
    if revision is None:
        raise LazyJJError(f"revset {revset!r} did not resolve to a revision")
    return revision


__all__ = ["Revision", "parse_revision_line", "resolve_revision"]
