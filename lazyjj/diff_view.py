"""Full-screen pager for the diff of one file."""

from __future__ import annotations

from .ansi import clip_ansi_line
from .highlight import DEFAULT_STYLE, highlight_diff
from .ui_theme import DEFAULT_THEME, UITheme

CLOSE_KEYS = frozenset({"ESC", "q", "h", "LEFT"})


class DiffViewer:
    """Scrollable view over highlighted diff lines.

    ``handle_key`` returns ``False`` once the viewer wants to close.
    """

    def __init__(
        self,
        text: str,
        *,
        title: str = "",
        style: str | None = DEFAULT_STYLE,
        no_color: bool = False,
        theme: UITheme = DEFAULT_THEME,
    ) -> None:
        self.title = title
        self.theme = theme
        self.lines = highlight_diff(text, style, no_color) or ["(empty diff)"]
        self.start = 0
        self.page_rows = 1

    @property
    def max_start(self) -> int:
        return max(0, len(self.lines) - self.page_rows)

    def scroll(self, delta: int) -> None:
        self.start = max(0, min(self.max_start, self.start + delta))

    def handle_key(self, key: str) -> bool:
        if key in CLOSE_KEYS:
            return False
        if key in {"DOWN", "j", "ENTER"}:
            self.scroll(1)
        elif key in {"UP", "k"}:
            self.scroll(-1)
        elif key in {"PGDN", "SPACE", "CTRL_D"}:
            self.scroll(self.page_rows)
        elif key in {"PGUP", "CTRL_U"}:
            self.scroll(-self.page_rows)
        elif key in {"g", "HOME"}:
            self.start = 0
        elif key in {"G", "END"}:
            self.start = self.max_start
        return True

    def render(self, width: int, height: int) -> list[str]:
        """Title row plus one page of diff lines."""
        self.page_rows = max(1, height - 1)
        self.scroll(0)
        theme = self.theme
        last = min(len(self.lines), self.start + self.page_rows)
        title = f"{self.title}  ({self.start + 1}-{last}/{len(self.lines)})" if self.title else ""
        out = [clip_ansi_line(f"{theme.header}{title}{theme.reset}", width)]
        for line in self.lines[self.start:last]:
            out.append(clip_ansi_line(line, width))
        return out


__all__ = ["CLOSE_KEYS", "DiffViewer"]
