"""UI theme definitions and selection helpers.

Themes map abstract color classes onto ANSI palettes. The formatter only ever
emits class tags; the theme decides what those look like on a terminal.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    tree_root: str
    tree_dir: str
    tree_symlink: str
    tree_executable: str
    tree_file: str
    tree_unknown: str
    tip_label: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    tree_root="\033[34m",
    tree_dir="\033[34m",
    tree_symlink="\033[96m",
    tree_executable="\033[32m",
    tree_file="\033[37m",
    tree_unknown="\033[33m",
    tip_label="\033[32;107m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    tree_root="\033[1;38;5;45m",
    tree_dir="\033[1;38;5;45m",
    tree_symlink="\033[38;5;117m",
    tree_executable="\033[38;5;84m",
    tree_file="\033[38;5;252m",
    tree_unknown="\033[38;5;215m",
    tip_label="\033[1;38;5;39m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    tree_root="",
    tree_dir="",
    tree_symlink="",
    tree_executable="",
    tree_file="",
    tree_unknown="",
    tip_label="",
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
