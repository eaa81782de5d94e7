"""Host for the details view: message queue, effects, diff viewer, outcome.

``DetailsApp`` is terminal-agnostic; ``run_main_loop`` feeds it keys and
writes the frames it renders. Worker threads only ever call ``post``.
"""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from queue import Empty, Queue
from typing import ContextManager

from ..context import SelectedFile, SelectionRegistry
from ..details import DetailsOperation
from ..details.rendering import CHROME_ROWS
from ..diff_view import DiffViewer
from ..highlight import DEFAULT_STYLE
from ..jj.revision import Revision
from ..jj.runner import CommandRunner
from ..keymap import DetailsKeyMap
from ..messages import (
    Close,
    CommandCompleted,
    SelectionChanged,
    ShowDiff,
    StartSquash,
    StatusLoaded,
    UpdateRevset,
)
from ..operations import Operation
from ..render import format_help_line
from ..ui_theme import DEFAULT_THEME, UITheme
from .effects import EffectExecutor
from .log import get_logger
from .terminal import TerminalController

STATUS_MESSAGE_SECONDS = 4.0
QUIT_KEYS = frozenset({"CTRL_C"})

logger = get_logger(__name__)


@dataclass(frozen=True)
class AppOutcome:
    """How the session ended: a new revset to browse, or a squash to start."""

    revset: str | None = None
    squash: StartSquash | None = None


class DetailsApp:
    def __init__(
        self,
        operation: Operation,
        runner: CommandRunner,
        *,
        revision: Revision,
        theme: UITheme = DEFAULT_THEME,
        style: str | None = DEFAULT_STYLE,
        no_color: bool = False,
        suspend: Callable[[], ContextManager[object]] | None = None,
        background: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.operation = operation
        self.revision = revision
        self.theme = theme
        self.style = style
        self.no_color = no_color
        self.background = background
        self.clock = clock
        self.messages: Queue[object] = Queue()
        self.executor = EffectExecutor(runner, self.post, suspend)
        self.diff_viewer: DiffViewer | None = None
        self.selected_file: SelectedFile | None = None
        self.outcome = AppOutcome()
        self.running = True
        self.dirty = True
        self.status_message = ""
        self.status_is_error = False
        self.status_message_until = 0.0

    def post(self, message: object) -> None:
        self.messages.put(message)

    def start(self) -> None:
        self.apply_effects(self.operation.init())

    def quit(self, outcome: AppOutcome | None = None) -> None:
        if outcome is not None:
            self.outcome = outcome
        self.running = False

    def apply_effects(self, effects: Iterable[object]) -> None:
        """Execute command effects; everything else is a message for the loop."""
        for effect in effects:
            if self.executor.handles(effect):
                self.executor.execute(effect, background=self.background)
            else:
                self.post(effect)

    def drain_messages(self) -> int:
        handled = 0
        while self.running:
            try:
                message = self.messages.get_nowait()
            except Empty:
                break
            self.handle_message(message)
            handled += 1
        if handled:
            self.dirty = True
        return handled

    def handle_message(self, message: object) -> None:
        if isinstance(message, Close):
            self.quit()
        elif isinstance(message, UpdateRevset):
            self.quit(AppOutcome(revset=message.revset))
        elif isinstance(message, StartSquash):
            self.quit(AppOutcome(squash=message))
        elif isinstance(message, ShowDiff):
            title = self.selected_file.file if self.selected_file is not None else ""
            self.diff_viewer = DiffViewer(
                message.text,
                title=title,
                style=self.style,
                no_color=self.no_color,
                theme=self.theme,
            )
        elif isinstance(message, SelectionChanged):
            self.selected_file = message.item
        elif isinstance(message, StatusLoaded):
            if message.commit_id and message.change_id == self.revision.change_id:
                self.revision = Revision(change_id=message.change_id, commit_id=message.commit_id)
            self.apply_effects(self.operation.handle_message(message))
        elif isinstance(message, CommandCompleted):
            self._show_command_result(message)
        else:
            self.apply_effects(self.operation.handle_message(message))

    def handle_key(self, key: str) -> None:
        self.dirty = True
        if key in QUIT_KEYS:
            self.quit()
            return
        if self.diff_viewer is not None:
            if not self.diff_viewer.handle_key(key):
                self.diff_viewer = None
            return
        self.apply_effects(self.operation.handle_key(key))

    def set_status(self, message: str, *, error: bool = False) -> None:
        self.status_message = message
        self.status_is_error = error
        self.status_message_until = self.clock() + STATUS_MESSAGE_SECONDS
        self.dirty = True

    def tick(self) -> None:
        if self.status_message and self.clock() >= self.status_message_until:
            self.status_message = ""
            self.status_message_until = 0.0
            self.dirty = True

    def _show_command_result(self, message: CommandCompleted) -> None:
        if message.error is not None:
            self.set_status(str(message.error), error=True)
            return
        first_line = next((line for line in message.output.splitlines() if line.strip()), "")
        if first_line:
            self.set_status(first_line.strip())

    def render_lines(self, width: int, height: int) -> list[str]:
        """Header, blank, view block, blank, key help, status line."""
        if self.diff_viewer is not None:
            return self.diff_viewer.render(width, height)
        theme = self.theme
        reset = theme.reset
        header = f"{theme.header}{self.revision.short_change_id} {self.revision.short_commit_id}{reset}"
        status = ""
        if self.status_message:
            status_style = theme.status_error if self.status_is_error else theme.status_info
            status = f"{status_style}{self.status_message}{reset}"
        return [
            header,
            "",
            *self.operation.render(width, height),
            "",
            format_help_line(self.operation.short_help(), theme, width),
            status,
        ]


def _build_operation(
    revision: Revision,
    theme: UITheme,
    keymap: DetailsKeyMap | None,
) -> DetailsOperation:
    return DetailsOperation(revision, SelectionRegistry(), keymap=keymap, theme=theme)


def run_details_app(
    runner: CommandRunner,
    revision: Revision,
    *,
    theme: UITheme = DEFAULT_THEME,
    style: str | None = DEFAULT_STYLE,
    no_color: bool = False,
    keymap: DetailsKeyMap | None = None,
) -> AppOutcome:
    """Run the interactive details view until the user leaves it."""
    from .loop import run_main_loop

    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    app = DetailsApp(
        _build_operation(revision, theme, keymap),
        runner,
        revision=revision,
        theme=theme,
        style=style,
        no_color=no_color,
        suspend=terminal.suspended,
    )
    logger.info("opening details for %s", revision.change_id)
    app.start()
    run_main_loop(app, terminal, stdin_fd)
    app.executor.wait_idle(timeout=1.0)
    return app.outcome


def render_details_once(
    runner: CommandRunner,
    revision: Revision,
    *,
    theme: UITheme = DEFAULT_THEME,
    width: int = 80,
) -> str:
    """Load ``revision`` synchronously and return the view as printable text."""
    operation = _build_operation(revision, theme, None)
    app = DetailsApp(operation, runner, revision=revision, theme=theme, background=False)
    app.start()
    app.drain_messages()
    height = len(operation.files) + CHROME_ROWS + 1
    out: list[str] = []
    for line in app.render_lines(width, height):
        out.append(line)
        if "\033" in line:
            out.append("\033[0m")
        out.append("\n")
    return "".join(out)


__all__ = ["AppOutcome", "DetailsApp", "render_details_once", "run_details_app"]
