"""Diff sanitization and syntax highlighting.

Colorizes ``jj diff --git`` output with Pygments' ``DiffLexer``.
Also neutralizes terminal control bytes so diff text cannot drive the terminal.
"""

from __future__ import annotations

import re

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import DiffLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .runtime.log import get_logger

DEFAULT_STYLE = "monokai"
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_FORMATTERS: dict[str, Terminal256Formatter] = {}

logger = get_logger(__name__)


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def resolve_style(style: str | None) -> str:
    """Return ``style`` when Pygments knows it, else the default style."""
    if not style:
        return DEFAULT_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        logger.info("unknown pygments style %r; using %s", style, DEFAULT_STYLE)
        return DEFAULT_STYLE
    return style


def _formatter(style: str) -> Terminal256Formatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = Terminal256Formatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def highlight_diff(text: str, style: str | None = DEFAULT_STYLE, no_color: bool = False) -> list[str]:
    """Split diff text into display lines, colorized unless ``no_color``."""
    source = sanitize_terminal_text(text.expandtabs(8)).replace("\r", "")
    if not source:
        return []
    if no_color:
        return source.splitlines()
    rendered = highlight(source, DiffLexer(), _formatter(resolve_style(style)))
    return rendered.splitlines()


__all__ = ["DEFAULT_STYLE", "highlight_diff", "resolve_style", "sanitize_terminal_text"]
