"""Filesystem listing for tree construction."""

from __future__ import annotations

import os
from collections.abc import Collection
from pathlib import Path

from ..errors import NotFoundError, UnreadableDirectoryError
from .types import DirectoryChild

ORDER_DIRS_FIRST = "dirs-first"
ORDER_NATIVE = "native"
ORDERS = (ORDER_DIRS_FIRST, ORDER_NATIVE)


def list_directory_children(
    directory: Path,
    ignored: Collection[str] = frozenset(),
    order: str = ORDER_DIRS_FIRST,
    show_hidden: bool = True,
) -> list[DirectoryChild]:
    """List visible children of ``directory`` in display order.

    Names in ``ignored`` are matched against the base name only. Symlinks are
    never followed, so a link to a directory is listed as a file.

    Raises ``NotFoundError`` when ``directory`` is missing and
    ``UnreadableDirectoryError`` when it cannot be scanned.
    """
    if order not in ORDERS:
        raise ValueError(f"unknown order: {order!r}")

    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if name in ignored:
                    continue
                if not show_hidden and name.startswith("."):
                    continue
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                children.append(DirectoryChild(name=name, path=Path(child.path), is_dir=is_dir))
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise NotFoundError(f'Path "{directory}" does not exist.') from exc
    except PermissionError as exc:
        raise UnreadableDirectoryError(f'Cannot read directory "{directory}": {exc.strerror}') from exc

    if order == ORDER_DIRS_FIRST:
        children.sort(key=lambda item: (not item.is_dir, item.name.lower(), item.name))
    return children


__all__ = [
    "ORDER_DIRS_FIRST",
    "ORDER_NATIVE",
    "ORDERS",
    "list_directory_children",
]
