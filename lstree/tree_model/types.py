"""Render-line datatypes produced by the tree formatter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ColorClass(Enum):
    """Abstract display category; themes map each one to concrete styling."""

    DIRECTORY = "directory"
    SYMBOLIC_LINK = "symlink"
    EXECUTABLE_FILE = "executable"
    PLAIN_FILE = "file"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class RenderLine:
    """One rendered tree row before styling."""

    prefix: str
    connector: str
    name: str
    color_class: ColorClass

    @property
    def text(self) -> str:
        return f"{self.prefix}{self.connector}{self.name}"


__all__ = ["ColorClass", "RenderLine"]
