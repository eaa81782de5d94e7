"""Main interactive event loop for the terminal UI.

Drains worker messages, renders when dirty, and dispatches keys. Only this
loop mutates view state; feature logic lives in ``DetailsApp``.
"""

from __future__ import annotations

import shutil

from ..input import read_key
from ..render import render_frame
from .app import DetailsApp
from .terminal import TerminalController

KEY_POLL_TIMEOUT_MS = 120


def run_main_loop(
    app: DetailsApp,
    terminal: TerminalController,
    stdin_fd: int,
    *,
    timeout_ms: int = KEY_POLL_TIMEOUT_MS,
) -> None:
    """Run until the app stops; idle polls pick up background results."""
    last_size: tuple[int, int] | None = None
    with terminal.raw_mode():
        while app.running:
            app.drain_messages()
            if not app.running:
                break
            app.tick()

            term = shutil.get_terminal_size((80, 24))
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                app.dirty = True
            if app.dirty:
                render_frame(app.render_lines(term.columns, term.lines), term.columns, term.lines)
                app.dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=timeout_ms)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue
            app.handle_key(key)


__all__ = ["KEY_POLL_TIMEOUT_MS", "run_main_loop"]
