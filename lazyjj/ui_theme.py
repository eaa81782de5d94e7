"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the details list, the confirmation overlay,
and the surrounding chrome. Diff highlighting style is a separate Pygments
setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    header: str
    details_added: str
    details_deleted: str
    details_modified: str
    details_renamed: str
    details_copied: str
    details_selected: str
    details_cursor: str
    details_cursor_suffix: str
    details_dimmed: str
    details_text: str
    details_conflict: str
    # Bare SGR parameters (no ESC/``m``) so they can be merged into other sequences.
    details_background_sgr: str
    confirm_text: str
    confirm_option: str
    confirm_key: str
    help_key: str
    help_dim: str
    status_error: str
    status_info: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    header="\033[1;38;5;81m",
    details_added="\033[38;5;42m",
    details_deleted="\033[38;5;203m",
    details_modified="\033[38;5;75m",
    details_renamed="\033[38;5;176m",
    details_copied="\033[38;5;80m",
    details_selected="\033[38;5;229m",
    details_cursor="\033[7m",
    details_cursor_suffix="",
    details_dimmed="\033[2;38;5;250m",
    details_text="\033[38;5;252m",
    details_conflict="\033[1;38;5;196m",
    details_background_sgr="",
    confirm_text="\033[1;38;5;252m",
    confirm_option="\033[38;5;252m",
    confirm_key="\033[38;5;229m",
    help_key="\033[38;5;229m",
    help_dim="\033[2;38;5;250m",
    status_error="\033[38;5;203m",
    status_info="\033[38;5;109m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    header="\033[1;38;5;45m",
    details_added="\033[38;5;84m",
    details_deleted="\033[38;5;210m",
    details_modified="\033[38;5;117m",
    details_renamed="\033[38;5;183m",
    details_copied="\033[38;5;73m",
    details_selected="\033[38;5;153m",
    details_cursor="\033[7m",
    details_cursor_suffix="",
    details_dimmed="\033[2;38;5;110m",
    details_text="\033[38;5;252m",
    details_conflict="\033[1;38;5;203m",
    details_background_sgr="48;5;17",
    confirm_text="\033[1;38;5;153m",
    confirm_option="\033[38;5;252m",
    confirm_key="\033[38;5;45m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
    status_error="\033[38;5;210m",
    status_info="\033[38;5;73m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    header="",
    details_added="",
    details_deleted="",
    details_modified="",
    details_renamed="",
    details_copied="",
    details_selected="",
    details_cursor="",
    details_cursor_suffix=" <",
    details_dimmed="",
    details_text="",
    details_conflict="",
    details_background_sgr="",
    confirm_text="",
    confirm_option="",
    confirm_key="",
    help_key="",
    help_dim="",
    status_error="",
    status_info="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
