"""Platform predicates deciding whether a file is shown as executable.

The walker only consults these for ``EntryKind.FILE`` entries. Any stat failure
degrades to "not executable" rather than interrupting the tree.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Callable
from pathlib import Path

ExecutableClassifier = Callable[[Path], bool]

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH
WINDOWS_EXECUTABLE_EXTENSIONS = frozenset({"exe", "bat", "cmd", "msi", "vbs", "ps1"})


def posix_is_executable(path: Path) -> bool:
    """Return ``True`` when any of the user/group/other execute bits is set."""
    try:
        mode = os.stat(path).st_mode
    except OSError:
        return False
    return bool(mode & EXECUTE_BITS)


def windows_is_executable(path: Path) -> bool:
    """Return ``True`` for common executable/script extensions (case-insensitive)."""
    suffix = path.suffix
    if not suffix:
        return False
    return suffix[1:].lower() in WINDOWS_EXECUTABLE_EXTENSIONS


def never_executable(_path: Path) -> bool:
    return False


def default_executable_classifier() -> ExecutableClassifier:
    """Return the predicate matching the running platform."""
    if os.name == "nt":
        return windows_is_executable
    return posix_is_executable


__all__ = [
    "ExecutableClassifier",
    "EXECUTE_BITS",
    "WINDOWS_EXECUTABLE_EXTENSIONS",
    "posix_is_executable",
    "windows_is_executable",
    "never_executable",
    "default_executable_classifier",
]
