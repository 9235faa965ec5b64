"""Directory scanning, entry classification, and child ordering."""

from __future__ import annotations

import logging
import os
import re
from functools import cmp_to_key
from pathlib import Path

from ..options import TreeOptions
from .executable import ExecutableClassifier
from .types import EntryKind, TreeEntry

logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def lossy_name(name: str) -> str:
    """Decode undecodable filename bytes as U+FFFD, keeping everything else intact."""
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return os.fsencode(name).decode("utf-8", errors="replace")
    return name


def display_name(name: str) -> str:
    """Return ``name`` safe for a terminal: lossy-decoded, control bytes escaped."""
    text = lossy_name(name)
    if _CONTROL_RE.search(text) is None:
        return text
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", text)


def is_hidden_name(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def classify_entry(entry: os.DirEntry) -> EntryKind:
    """Classify ``entry`` from its own metadata; symlinks are never followed."""
    try:
        if entry.is_symlink():
            return EntryKind.SYMBOLIC_LINK
        if entry.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return EntryKind.FILE
    except OSError:
        return EntryKind.UNKNOWN
    return EntryKind.UNKNOWN


def compare_names(a: str, b: str) -> int:
    """Order names case-insensitively, then lowercase-leading variants first.

    Equal names under ``str.lower`` fall back to the reverse of the plain
    code-point order, so ``readme`` sorts before ``README``.
    """
    a_folded = a.lower()
    b_folded = b.lower()
    if a_folded != b_folded:
        return -1 if a_folded < b_folded else 1
    if a == b:
        return 0
    return -1 if a > b else 1


_NAME_SORT_KEY = cmp_to_key(compare_names)


def sort_children(children: list[TreeEntry]) -> list[TreeEntry]:
    """Return ``children`` sorted with ``compare_names`` on their decoded names."""
    return sorted(children, key=lambda child: _NAME_SORT_KEY(lossy_name(child.name)))


def _keep_kind(kind: EntryKind, options: TreeOptions) -> bool:
    if options.directory_only and kind is not EntryKind.DIRECTORY:
        return False
    if options.file_only and kind is not EntryKind.FILE:
        return False
    return True


def list_directory_children(
    directory: Path,
    options: TreeOptions,
    classifier: ExecutableClassifier | None = None,
) -> tuple[list[TreeEntry], OSError | None]:
    """List, filter, classify, and sort the children of ``directory``.

    Returns ``(children, scan_error)``. On failure ``children`` is empty and
    ``scan_error`` holds the ``OSError``; the directory handle is always closed
    before returning.
    """
    if options.is_misconfigured:
        return [], None

    children: list[TreeEntry] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not options.show_hidden and is_hidden_name(name):
                    continue
                kind = classify_entry(child)
                if not _keep_kind(kind, options):
                    continue
                child_path = Path(child.path)
                executable: bool | None = None
                if kind is EntryKind.FILE:
                    executable = bool(classifier(child_path)) if classifier is not None else False
                children.append(TreeEntry(name=name, path=child_path, kind=kind, executable=executable))
    except OSError as exc:
        logger.debug("cannot list %s: %s", directory, exc)
        return [], exc

    return sort_children(children), None


__all__ = [
    "HIDDEN_PREFIX",
    "lossy_name",
    "display_name",
    "is_hidden_name",
    "classify_entry",
    "compare_names",
    "sort_children",
    "list_directory_children",
]
