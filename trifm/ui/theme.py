"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (entry styles and chrome). Syntax
highlighting style for file previews remains a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..panes import STYLE_ANCESTOR, STYLE_DIRECTORY, STYLE_DOTFILE, STYLE_FILE, STYLE_MARKED


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    divider: str
    reverse: str
    reset: str
    cursor_marker: str
    entry_ancestor: str
    entry_marked: str
    entry_dotfile: str
    entry_directory: str
    entry_file: str
    status: str
    prompt: str
    empty_hint: str

    def entry_color(self, style: str) -> str:
        """Return the SGR prefix for one ``panes.STYLE_*`` value."""
        return {
            STYLE_ANCESTOR: self.entry_ancestor,
            STYLE_MARKED: self.entry_marked,
            STYLE_DOTFILE: self.entry_dotfile,
            STYLE_DIRECTORY: self.entry_directory,
            STYLE_FILE: self.entry_file,
        }.get(style, "")


DEFAULT_THEME = UITheme(
    name="default",
    divider="\033[38;5;240m",
    reverse="\033[7m",
    reset="\033[0m",
    cursor_marker="\033[1;31m",
    entry_ancestor="\033[1;31m",
    entry_marked="\033[33m",
    entry_dotfile="\033[90m",
    entry_directory="\033[36m",
    entry_file="\033[34m",
    status="\033[2;38;5;250m",
    prompt="\033[1;38;5;81m",
    empty_hint="\033[2m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    divider="\033[2;38;5;31m",
    reverse="\033[7m",
    reset="\033[0m",
    cursor_marker="\033[1;38;5;45m",
    entry_ancestor="\033[1;38;5;45m",
    entry_marked="\033[38;5;215m",
    entry_dotfile="\033[2;38;5;110m",
    entry_directory="\033[1;38;5;39m",
    entry_file="\033[38;5;153m",
    status="\033[2;38;5;110m",
    prompt="\033[1;38;5;45m",
    empty_hint="\033[2;38;5;24m",
)

PLAIN_THEME = UITheme(
    name="plain",
    divider="",
    reverse="\033[7m",
    reset="\033[0m",
    cursor_marker="",
    entry_ancestor="",
    entry_marked="",
    entry_dotfile="",
    entry_directory="",
    entry_file="",
    status="",
    prompt="",
    empty_hint="",
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
