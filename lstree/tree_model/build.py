"""Compose the walker and formatter into the full sequence of output rows."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..file_tree_model import EntryEvent, ExecutableClassifier, walk
from ..options import TreeOptions
from ..ui_theme import DEFAULT_THEME, UITheme
from .rendering import format_render_line, format_root_label, format_scan_error, render_event, root_label


def render_tree_lines(
    options: TreeOptions,
    theme: UITheme | None = None,
    classifier: ExecutableClassifier | None = None,
    cwd: Path | None = None,
) -> Iterator[str]:
    """Yield the root label, then one display row per event in traversal order.

    ``RootReadError`` propagates before anything is yielded.
    """
    active_theme = theme or DEFAULT_THEME
    target = options.resolved_target()
    events = walk(target, options, classifier)

    yield format_root_label(root_label(target, cwd), active_theme)
    for event in events:
        if isinstance(event, EntryEvent):
            yield format_render_line(render_event(event), active_theme)
        else:
            yield format_scan_error(event, active_theme)


__all__ = ["render_tree_lines"]
