"""Argument builders for every ``jj`` invocation the details view issues.

Builders are pure: they only assemble argv tuples. Execution lives in
:mod:`lazyjj.jj.runner`. File arguments are always passed as quoted
``file:`` filesets so paths with spaces or glob characters stay literal.
"""

from __future__ import annotations

import shlex
from collections.abc import Iterable
from dataclasses import dataclass

# One boolean per changed file, space separated, followed by the summary lines.
STATUS_TEMPLATE = 'self.diff().files().map(|x| x.target().conflict()).join(" ") ++ "\\n"'
REVISION_TEMPLATE = 'change_id ++ " " ++ commit_id ++ "\\n"'


@dataclass(frozen=True)
class JJCommand:
    """One ``jj`` invocation without the executable name."""

    args: tuple[str, ...]

    def argv(self, binary: str = "jj") -> list[str]:
        return [binary, *self.args]

    def __str__(self) -> str:
        return shlex.join(["jj", *self.args])


def escape_file_name(file_name: str) -> str:
    """Quote ``file_name`` as a jj string literal."""
    escaped = file_name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def file_pattern(file_name: str) -> str:
    return f"file:{escape_file_name(file_name)}"


def _file_patterns(files: Iterable[str]) -> tuple[str, ...]:
    return tuple(file_pattern(name) for name in files)


def snapshot() -> JJCommand:
    return JJCommand(("debug", "snapshot"))


def status(revision: str) -> JJCommand:
    return JJCommand(
        (
            "log",
            "-r",
            revision,
            "--summary",
            "--no-graph",
            "--color",
            "never",
            "--quiet",
            "--ignore-working-copy",
            "--template",
            STATUS_TEMPLATE,
        )
    )


def resolve_revision(revset: str) -> JJCommand:
    return JJCommand(
        (
            "log",
            "-r",
            revset,
            "--no-graph",
            "--limit",
            "1",
            "--color",
            "never",
            "--ignore-working-copy",
            "--template",
            REVISION_TEMPLATE,
        )
    )


def diff(revision: str, file_name: str) -> JJCommand:
    return JJCommand(
        (
            "diff",
            "-r",
            revision,
            "--git",
            "--color",
            "never",
            "--ignore-working-copy",
            file_pattern(file_name),
        )
    )


def split(revision: str, files: Iterable[str], parallel: bool) -> JJCommand:
    args = ["split", "-r", revision]
    if parallel:
        args.append("--parallel")
    args.extend(_file_patterns(files))
    return JJCommand(tuple(args))


def split_interactive(revision: str, file_name: str) -> JJCommand:
    return JJCommand(("split", "-r", revision, "--interactive", file_pattern(file_name)))


def restore(revision: str, files: Iterable[str]) -> JJCommand:
    return JJCommand(("restore", "--changes-in", revision, *_file_patterns(files)))


def restore_interactive(revision: str, file_name: str) -> JJCommand:
    return JJCommand(("restore", "--changes-in", revision, "--interactive", file_pattern(file_name)))


def absorb(revision: str, *files: str) -> JJCommand:
    return JJCommand(("absorb", "--from", revision, *_file_patterns(files)))


def squash(revision: str, files: Iterable[str]) -> JJCommand:
    return JJCommand(("squash", "--from", revision, *_file_patterns(files)))


__all__ = [
    "JJCommand",
    "STATUS_TEMPLATE",
    "absorb",
    "diff",
    "escape_file_name",
    "file_pattern",
    "resolve_revision",
    "restore",
    "restore_interactive",
    "snapshot",
    "split",
    "split_interactive",
    "squash",
    "status",
]
