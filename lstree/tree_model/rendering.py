"""Connector/prefix construction, color classes, and ANSI row formatting."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..file_tree_model.fs import display_name
from ..file_tree_model.types import EntryEvent, EntryKind, ScanErrorEvent, TreeEntry
from ..ui_theme import DEFAULT_THEME, UITheme
from .types import ColorClass, RenderLine

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE_INDENT = "│   "
BLANK_INDENT = "    "
ROOT_CURRENT_DIR_LABEL = "."
TIP_LABEL = "Tip"


def connector_for(is_last: bool) -> str:
    return LAST_BRANCH if is_last else BRANCH


def child_prefix(prefix: str, is_last: bool) -> str:
    """Extend ``prefix`` for the children of an entry drawn with ``is_last``."""
    return prefix + (BLANK_INDENT if is_last else PIPE_INDENT)


def prefix_for(ancestors_last: Iterable[bool]) -> str:
    """Build the indentation string from ancestor last-sibling flags."""
    prefix = ""
    for is_last in ancestors_last:
        prefix = child_prefix(prefix, is_last)
    return prefix


def color_class_for(entry: TreeEntry) -> ColorClass:
    """Return the display class for ``entry`` from its kind and executable flag."""
    if entry.kind is EntryKind.DIRECTORY:
        return ColorClass.DIRECTORY
    if entry.kind is EntryKind.SYMBOLIC_LINK:
        return ColorClass.SYMBOLIC_LINK
    if entry.kind is EntryKind.FILE:
        return ColorClass.EXECUTABLE_FILE if entry.executable else ColorClass.PLAIN_FILE
    return ColorClass.UNKNOWN


def render_event(event: EntryEvent) -> RenderLine:
    """Render one walker entry event into an unstyled row."""
    return RenderLine(
        prefix=prefix_for(event.ancestors_last),
        connector=connector_for(event.is_last),
        name=display_name(event.entry.name),
        color_class=color_class_for(event.entry),
    )


def color_for(color_class: ColorClass, theme: UITheme | None = None) -> str:
    """Return the theme's ANSI sequence for ``color_class``."""
    active_theme = theme or DEFAULT_THEME
    if color_class is ColorClass.DIRECTORY:
        return active_theme.tree_dir
    if color_class is ColorClass.SYMBOLIC_LINK:
        return active_theme.tree_symlink
    if color_class is ColorClass.EXECUTABLE_FILE:
        return active_theme.tree_executable
    if color_class is ColorClass.PLAIN_FILE:
        return active_theme.tree_file
    return active_theme.tree_unknown


def _styled(text: str, color: str, reset: str) -> str:
    if not color:
        return text
    return f"{color}{text}{reset}"


def format_render_line(line: RenderLine, theme: UITheme | None = None) -> str:
    """Render one row as display text; only the name carries color."""
    active_theme = theme or DEFAULT_THEME
    color = color_for(line.color_class, active_theme)
    if not color:
        return line.text
    return f"{line.prefix}{line.connector}{_styled(line.name, color, active_theme.reset)}"


def format_tip(message: str, theme: UITheme | None = None) -> str:
    """Render a user-facing diagnostic as ``Tip: <message>``."""
    active_theme = theme or DEFAULT_THEME
    return f"{_styled(TIP_LABEL, active_theme.tip_label, active_theme.reset)}: {message}"


def format_scan_error(event: ScanErrorEvent, theme: UITheme | None = None) -> str:
    """Render the diagnostic line for a subtree that could not be listed."""
    return format_tip(f"{event.reason}: {display_name(str(event.path))}", theme)


def root_label(target: Path, cwd: Path | None = None) -> str:
    """Return ``.`` when ``target`` is the working directory, else its resolved path."""
    resolved = target.resolve()
    current = (cwd if cwd is not None else Path.cwd()).resolve()
    if resolved == current:
        return ROOT_CURRENT_DIR_LABEL
    return display_name(str(resolved))


def format_root_label(label: str, theme: UITheme | None = None) -> str:
    active_theme = theme or DEFAULT_THEME
    return _styled(label, active_theme.tree_root, active_theme.reset)


__all__ = [
    "BRANCH",
    "LAST_BRANCH",
    "PIPE_INDENT",
    "BLANK_INDENT",
    "ROOT_CURRENT_DIR_LABEL",
    "connector_for",
    "child_prefix",
    "prefix_for",
    "color_class_for",
    "render_event",
    "color_for",
    "format_render_line",
    "format_tip",
    "format_scan_error",
    "root_label",
    "format_root_label",
]
