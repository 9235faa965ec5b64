"""Depth-first traversal producing ordered tree events.

The walk uses an explicit stack of listing frames instead of recursion so very
deep trees cannot exhaust the interpreter stack. Visitation order is identical
to a recursive pre-order walk.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from ..errors import RootReadError
from ..options import TreeOptions
from .executable import ExecutableClassifier, default_executable_classifier
from .fs import list_directory_children
from .types import EntryEvent, EntryKind, ScanErrorEvent, TreeEntry, TreeEvent

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """Sorted children of one directory plus the cursor into them."""

    children: list[TreeEntry]
    depth: int
    ancestors_last: tuple[bool, ...]
    index: int = 0


def scan_error_reason(exc: OSError) -> str:
    if isinstance(exc, PermissionError):
        return "Permission denied"
    return "Error reading directory"


def walk(
    root: Path,
    options: TreeOptions,
    classifier: ExecutableClassifier | None = None,
) -> Iterator[TreeEvent]:
    """Return the lazy event stream for the tree below ``root``.

    The root itself is listed eagerly: failing to read it raises
    ``RootReadError``. Everything below the root is absorbed into
    ``ScanErrorEvent`` items and the walk continues with siblings.
    """
    if options.is_misconfigured:
        return iter(())
    if classifier is None:
        classifier = default_executable_classifier()

    root = Path(root)
    children, scan_error = list_directory_children(root, options, classifier)
    if scan_error is not None:
        logger.debug("cannot list tree root %s: %s", root, scan_error)
        raise RootReadError(root, scan_error) from scan_error
    return _iter_events(children, options, classifier)


def _iter_events(
    root_children: list[TreeEntry],
    options: TreeOptions,
    classifier: ExecutableClassifier,
) -> Iterator[TreeEvent]:
    stack = [_Frame(root_children, depth=1, ancestors_last=())]
    while stack:
        frame = stack[-1]
        if frame.index >= len(frame.children):
            stack.pop()
            continue

        entry = frame.children[frame.index]
        frame.index += 1
        is_last = frame.index == len(frame.children)
        yield EntryEvent(entry=entry, depth=frame.depth, ancestors_last=frame.ancestors_last, is_last=is_last)

        if entry.kind is not EntryKind.DIRECTORY or not options.allows_descent(frame.depth):
            continue

        children, scan_error = list_directory_children(entry.path, options, classifier)
        if scan_error is not None:
            logger.debug("skipping unreadable subtree %s", entry.path)
            yield ScanErrorEvent(
                path=entry.path,
                depth=frame.depth + 1,
                reason=scan_error_reason(scan_error),
                permission_denied=isinstance(scan_error, PermissionError),
            )
            continue
        if children:
            stack.append(_Frame(children, depth=frame.depth + 1, ancestors_last=frame.ancestors_last + (is_last,)))


__all__ = ["walk", "scan_error_reason"]
