"""Command-line front door for lazyjj.

Parses CLI options, sets up logging and the ``jj`` runner, resolves the
revision, then runs the details view (or renders it once with ``--render``).
"""

from __future__ import annotations

import argparse
import os
import shutil
import sys
from pathlib import Path

from .errors import LazyJJError
from .highlight import DEFAULT_STYLE
from .jj import commands as jj
from .jj.revision import resolve_revision
from .jj.runner import CommandRunner
from .keymap import DetailsKeyMap
from .runtime import run_details_app
from .runtime.app import AppOutcome, render_details_once
from .runtime.config import (
    load_command_timeout,
    load_jj_binary,
    load_key_overrides,
    load_theme_name,
    save_theme_name,
)
from .runtime.log import configure_logging, get_logger
from .ui_theme import available_theme_names, normalize_theme_name, resolve_theme

LOG_LEVEL_ENV = "LAZYJJ_LOG_LEVEL"
DEFAULT_REVSET = "@"

logger = get_logger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _default_render_width() -> int:
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyjj",
        description="Browse the changed files of a jj revision and split, restore or absorb them.",
    )
    parser.add_argument("-R", "--repository", default=None, help="Repository path. Defaults to current directory.")
    parser.add_argument("-r", "--revision", default=DEFAULT_REVSET, help="Revset naming the revision (default: @).")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}); remembered for later runs.",
    )
    parser.add_argument("--style", default=DEFAULT_STYLE, help="Pygments style name for diffs.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--render", action="store_true", help="Print the file list once and exit.")
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Column width for --render output (default: terminal width).",
    )
    parser.add_argument("--log-level", default=None, help=f"Write logs at this level (or set ${LOG_LEVEL_ENV}).")
    parser.add_argument("--log-file", type=Path, default=None, help="Log file path (default: per-user log dir).")
    return parser


def format_outcome(outcome: AppOutcome) -> str | None:
    """Text printed after the TUI closes, for shell follow-up."""
    if outcome.squash is not None:
        return str(jj.squash(outcome.squash.revision.change_id, outcome.squash.files))
    if outcome.revset is not None:
        return outcome.revset
    return None


def _setup_logging(args: argparse.Namespace) -> None:
    level = args.log_level or os.environ.get(LOG_LEVEL_ENV, "").strip()
    if not level and args.log_file is not None:
        level = "INFO"
    if not level:
        return
    try:
        path = configure_logging(level, args.log_file)
    except OSError as exc:
        raise SystemExit(f"lazyjj: cannot open log file: {exc}") from exc
    logger.info("logging to %s", path)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and open the details view for one revision."""
    args = build_parser().parse_args(argv)
    _setup_logging(args)

    repository = Path(args.repository) if args.repository else Path.cwd()
    if not repository.is_dir():
        raise SystemExit(f"Repository not found: {repository}")

    runner = CommandRunner(repository, binary=load_jj_binary(), timeout_seconds=load_command_timeout())
    try:
        revision = resolve_revision(runner, args.revision)
    except LazyJJError as exc:
        raise SystemExit(f"lazyjj: {exc}") from exc

    theme = resolve_theme(args.theme or load_theme_name(), no_color=args.no_color)
    if args.theme:
        save_theme_name(normalize_theme_name(args.theme))

    if args.render:
        max_cols = args.max_cols if args.max_cols is not None else _default_render_width()
        sys.stdout.write(render_details_once(runner, revision, theme=theme, width=max_cols))
        return

    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        raise SystemExit("lazyjj: interactive mode needs a terminal; use --render to print the view.")

    outcome = run_details_app(
        runner,
        revision,
        theme=theme,
        style=args.style,
        no_color=args.no_color,
        keymap=DetailsKeyMap().with_overrides(load_key_overrides()),
    )
    text = format_outcome(outcome)
    if text is not None:
        print(text)


if __name__ == "__main__":
    main()
