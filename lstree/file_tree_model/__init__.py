"""Filesystem traversal: entry classification, ordering, and the tree walker.

This package contains non-UI tree primitives:
- entry/event datatypes
- directory scanning with hidden/kind filters and name ordering
- the explicit-stack depth-first walker
- platform executable predicates
"""

from __future__ import annotations

from .types import EntryEvent, EntryKind, ScanErrorEvent, TreeEntry, TreeEvent
from .executable import (
    ExecutableClassifier,
    default_executable_classifier,
    never_executable,
    posix_is_executable,
    windows_is_executable,
)
from .fs import (
    classify_entry,
    compare_names,
    display_name,
    is_hidden_name,
    list_directory_children,
    lossy_name,
    sort_children,
)
from .walk import scan_error_reason, walk

__all__ = [
    "EntryKind",
    "TreeEntry",
    "EntryEvent",
    "ScanErrorEvent",
    "TreeEvent",
    "ExecutableClassifier",
    "default_executable_classifier",
    "never_executable",
    "posix_is_executable",
    "windows_is_executable",
    "classify_entry",
    "compare_names",
    "display_name",
    "is_hidden_name",
    "list_directory_children",
    "lossy_name",
    "sort_children",
    "scan_error_reason",
    "walk",
]
