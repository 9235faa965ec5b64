"""Domain datatypes for filesystem entries and traversal events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EntryKind(Enum):
    """Kind of one directory entry, taken from its own (non-followed) metadata."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMBOLIC_LINK = "symlink"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class TreeEntry:
    """One filesystem object listed inside a directory.

    ``executable`` is only resolved for ``EntryKind.FILE`` and is ``None`` otherwise.
    """

    name: str
    path: Path
    kind: EntryKind
    executable: bool | None = None


@dataclass(frozen=True)
class EntryEvent:
    """Walker output for one visited entry.

    ``ancestors_last`` holds, outermost first, whether each ancestor below the
    root was the last of its siblings; ``is_last`` marks the final child of the
    sorted, filtered listing.
    """

    entry: TreeEntry
    depth: int
    ancestors_last: tuple[bool, ...]
    is_last: bool


@dataclass(frozen=True)
class ScanErrorEvent:
    """A directory below the root could not be listed; its subtree is empty."""

    path: Path
    depth: int
    reason: str
    permission_denied: bool = False


TreeEvent = EntryEvent | ScanErrorEvent


__all__ = [
    "EntryKind",
    "TreeEntry",
    "EntryEvent",
    "ScanErrorEvent",
    "TreeEvent",
]
