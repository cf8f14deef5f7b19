"""Ignore-set construction for tree traversal.

Ignored entries are literal base names (not paths or globs) and are excluded
at every depth of the tree.
"""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_IGNORED_NAMES: frozenset[str] = frozenset(
    {
        ".git",
        ".next",
        "node_modules",
        "bower_components",
        "logs",
        "dist",
        "__pycache__",
        ".DS_Store",
    }
)


def parse_ignore_input(raw: str) -> list[str]:
    """Split comma-separated operator input into names, dropping blanks."""
    names: list[str] = []
    for part in raw.split(","):
        name = part.strip()
        if name and name not in names:
            names.append(name)
    return names


def build_ignore_set(
    extra: Iterable[str] = (),
    *,
    include_defaults: bool = True,
) -> frozenset[str]:
    """Merge default ignored names with ``extra`` names."""
    names = set(DEFAULT_IGNORED_NAMES) if include_defaults else set()
    for name in extra:
        stripped = str(name).strip()
        if stripped:
            names.add(stripped)
    return frozenset(names)


def format_ignore_set(ignored: Iterable[str]) -> str:
    """Return a stable, comma-separated listing of ignored names."""
    return ", ".join(sorted(ignored, key=str.lower))


__all__ = [
    "DEFAULT_IGNORED_NAMES",
    "parse_ignore_input",
    "build_ignore_set",
    "format_ignore_set",
]
