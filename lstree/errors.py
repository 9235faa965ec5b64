"""Exception types raised by lstree.

Only configuration problems and an unreadable root are surfaced as exceptions.
Failures below the root are reported as scan-error events instead.
"""

from __future__ import annotations

from pathlib import Path


class TreeError(Exception):
    """Base class for lstree errors."""


class ConfigurationError(TreeError):
    """Options are invalid or contradictory; nothing should be printed."""


class RootReadError(TreeError):
    """The directory passed as the tree root could not be listed."""

    def __init__(self, path: Path, cause: OSError) -> None:
        reason = "Permission denied" if isinstance(cause, PermissionError) else "Error reading directory"
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.cause = cause

    @property
    def permission_denied(self) -> bool:
        return isinstance(self.cause, PermissionError)


__all__ = ["TreeError", "ConfigurationError", "RootReadError"]
