"""Plain-text rendering of tree rows."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from pathlib import Path

from ..errors import NotFoundError
from .build import build_tree_lines
from .fs import ORDER_DIRS_FIRST
from .types import TreeLine


def render_tree(lines: Iterable[TreeLine]) -> str:
    """Join rendered rows with newlines; an empty tree renders as ``""``."""
    return "\n".join(line.render() for line in lines)


def build_directory_structure(
    root: Path,
    ignored: Collection[str] = frozenset(),
    order: str = ORDER_DIRS_FIRST,
    show_hidden: bool = True,
) -> str:
    """Build and render the full tree below ``root``."""
    if not root.exists():
        raise NotFoundError(f'Path "{root}" does not exist.')
    if not root.is_dir():
        raise NotFoundError(f'Path "{root}" is not a directory.')
    return render_tree(build_tree_lines(root, ignored, order=order, show_hidden=show_hidden))
