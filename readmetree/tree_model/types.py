"""Tree datatypes shared by the listing, building and rendering modules."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

BRANCH_CONNECTOR = "├── "
LAST_CONNECTOR = "└── "
BRANCH_PREFIX = "│   "
LAST_PREFIX = "    "


@dataclass(frozen=True)
class DirectoryChild:
    """One visible directory child: base name, full path and kind."""

    name: str
    path: Path
    is_dir: bool


@dataclass(frozen=True)
class TreeLine:
    """One rendered row of the tree diagram."""

    prefix: str
    connector: str
    name: str
    is_dir: bool

    @property
    def is_last(self) -> bool:
        return self.connector == LAST_CONNECTOR

    def render(self) -> str:
        """Return the row text; directory names carry a trailing slash."""
        suffix = "/" if self.is_dir else ""
        return f"{self.prefix}{self.connector}{self.name}{suffix}"


__all__ = [
    "BRANCH_CONNECTOR",
    "LAST_CONNECTOR",
    "BRANCH_PREFIX",
    "LAST_PREFIX",
    "DirectoryChild",
    "TreeLine",
]
