"""Tree row formatting: connectors, prefixes, color classes, and styling.

Defines ``RenderLine`` and ``ColorClass`` plus helpers that turn walker events
into display rows for the output stream.
"""

from __future__ import annotations

from .build import render_tree_lines
from .rendering import (
    BLANK_INDENT,
    BRANCH,
    LAST_BRANCH,
    PIPE_INDENT,
    child_prefix,
    color_class_for,
    color_for,
    connector_for,
    format_render_line,
    format_root_label,
    format_scan_error,
    format_tip,
    prefix_for,
    render_event,
    root_label,
)
from .types import ColorClass, RenderLine

__all__ = [
    "ColorClass",
    "RenderLine",
    "BRANCH",
    "LAST_BRANCH",
    "PIPE_INDENT",
    "BLANK_INDENT",
    "child_prefix",
    "color_class_for",
    "color_for",
    "connector_for",
    "format_render_line",
    "format_root_label",
    "format_scan_error",
    "format_tip",
    "prefix_for",
    "render_event",
    "root_label",
    "render_tree_lines",
]
