"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle and alternate-screen switching. ``suspended`` hands
the real terminal to a foreground ``jj`` process and takes it back after.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty


class TerminalController:
    """Manage terminal mode transitions for one stdin/stdout pair."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._tui_enabled = False

    @property
    def tui_enabled(self) -> bool:
        return self._tui_enabled

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")
        self._tui_enabled = True

    def disable_tui_mode(self) -> None:
        """Show the cursor, restore the main screen and the saved tty state."""
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        self._tui_enabled = False
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()

    @contextlib.contextmanager
    def suspended(self):
        """Leave TUI mode for the duration of the block, if it was on."""
        if not self._tui_enabled:
            yield
            return
        self.disable_tui_mode()
        try:
            yield
        finally:
            self.enable_tui_mode()


__all__ = ["TerminalController"]
