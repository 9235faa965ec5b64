"""Immutable traversal options shared by the walker, formatter, and CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigurationError


@dataclass(frozen=True)
class TreeOptions:
    """Resolved tree settings.

    ``max_depth == 0`` means unlimited; depth 1 is the root's direct children.
    ``target_directory`` of ``None`` means the process working directory.
    """

    max_depth: int = 0
    show_hidden: bool = False
    directory_only: bool = False
    file_only: bool = False
    target_directory: Path | None = None

    @property
    def is_misconfigured(self) -> bool:
        return self.directory_only and self.file_only

    def resolved_target(self) -> Path:
        """Return the absolute directory the tree is rooted at."""
        target = self.target_directory if self.target_directory is not None else Path.cwd()
        return target.resolve()

    def allows_descent(self, depth: int) -> bool:
        """Return whether children at ``depth + 1`` may be listed."""
        return self.max_depth == 0 or depth + 1 <= self.max_depth

    def validate(self) -> "TreeOptions":
        """Raise ``ConfigurationError`` for contradictory or unusable settings."""
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int) or self.max_depth < 0:
            raise ConfigurationError(f"Invalid value for --depth, expected a number: {self.max_depth!r}")
        if self.is_misconfigured:
            raise ConfigurationError("You can't specify both --directory and --fileonly.")
        if self.target_directory is not None:
            path = self.target_directory
            if not path.exists():
                raise ConfigurationError(f"The specified directory '{path}' does not exist.")
            if not path.is_dir():
                raise ConfigurationError(f"'{path}' is not a valid directory.")
        return self


__all__ = ["TreeOptions"]
