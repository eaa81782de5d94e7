"""Frame composition and terminal output.

Frames are written as one ``os.write`` per render: clear, then each line
followed by an SGR reset so styles never bleed into the next row.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from .ansi import clip_ansi_line, display_width
from .keymap import KeyBinding
from .ui_theme import UITheme

HELP_SEPARATOR = " • "


def format_help_line(bindings: Sequence[KeyBinding], theme: UITheme, width: int) -> str:
    """Render ``key label`` pairs, dropping trailing pairs that do not fit."""
    reset = theme.reset
    parts: list[str] = []
    used = 0
    for binding in bindings:
        plain = f"{binding.help_key} {binding.help}"
        extra = display_width(plain) + (display_width(HELP_SEPARATOR) if parts else 0)
        if used + extra > width:
            break
        parts.append(f"{theme.help_key}{binding.help_key}{reset} {theme.help_dim}{binding.help}{reset}")
        used += extra
    return f"{theme.help_dim}{HELP_SEPARATOR}{reset}".join(parts)


def compose_frame(lines: Sequence[str], width: int, height: int) -> str:
    out: list[str] = ["\033[H\033[J"]
    visible = list(lines)[: max(0, height)]
    for row, line in enumerate(visible):
        text = clip_ansi_line(line, width)
        out.append(text)
        if "\033" in text:
            out.append("\033[0m")
        if row < len(visible) - 1:
            out.append("\r\n")
    return "".join(out)


def render_frame(lines: Sequence[str], width: int, height: int) -> None:
    """Write ``lines`` as one full-screen frame to stdout."""
    frame = compose_frame(lines, width, height)
    os.write(sys.stdout.fileno(), frame.encode("utf-8", errors="replace"))


__all__ = ["HELP_SEPARATOR", "compose_frame", "format_help_line", "render_frame"]
