"""ANSI-aware text measurement and line shaping utilities.

Provides width measurement, clipping, and background injection that
preserve escape sequences. These helpers keep rendering aligned when color
codes and wide chars are present.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
_SGR_RE = re.compile(r"\x1b\[([0-9;]*)m")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies."""
    col = 0
    for ch in ANSI_ESCAPE_RE.sub("", text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    Tabs are expanded into spaces so clipping aligns with rendered terminal cells.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if ch == "\t":
            if col + w > max_cols:
                break
            out.append(" " * w)
            col += w
            i += 1
            continue
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
        i += 1

    return "".join(out)


def apply_background(line: str, bg_sgr: str) -> str:
    """Keep ``bg_sgr`` active across every style change inside ``line``.

    Resets and color changes inside the line would otherwise drop back to
    the terminal's default background mid-row.
    """
    if not bg_sgr:
        return line

    def _inject_bg(match: re.Match[str]) -> str:
        params = match.group(1)
        if params:
            return f"\033[{params};{bg_sgr}m"
        return f"\033[{bg_sgr}m"

    return f"\033[{bg_sgr}m{_SGR_RE.sub(_inject_bg, line)}\033[0m"


def place_block(lines: list[str], bg_sgr: str = "") -> list[str]:
    """Pad ``lines`` to a uniform rectangle filled with ``bg_sgr``."""
    width = max((display_width(line) for line in lines), default=0)
    return [apply_background(line + " " * (width - display_width(line)), bg_sgr) for line in lines]


__all__ = [
    "ANSI_ESCAPE_RE",
    "TAB_STOP",
    "apply_background",
    "char_display_width",
    "clip_ansi_line",
    "display_width",
    "place_block",
]
