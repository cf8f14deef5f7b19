"""Recursive tree-line construction."""

from __future__ import annotations

from collections.abc import Collection
from pathlib import Path

from .fs import ORDER_DIRS_FIRST, list_directory_children
from .types import BRANCH_CONNECTOR, BRANCH_PREFIX, LAST_CONNECTOR, LAST_PREFIX, TreeLine


def build_tree_lines(
    root: Path,
    ignored: Collection[str] = frozenset(),
    order: str = ORDER_DIRS_FIRST,
    show_hidden: bool = True,
    prefix: str = "",
) -> list[TreeLine]:
    """Return tree rows for everything below ``root``, depth-first pre-order.

    ``root`` itself is not emitted. Each directory row is followed directly by
    its own subtree, indented with ``prefix`` extended by one glyph group.
    An unreadable directory anywhere in the tree aborts the whole build.
    """
    children = list_directory_children(root, ignored, order=order, show_hidden=show_hidden)
    lines: list[TreeLine] = []
    last_index = len(children) - 1
    for index, child in enumerate(children):
        is_last = index == last_index
        lines.append(
            TreeLine(
                prefix=prefix,
                connector=LAST_CONNECTOR if is_last else BRANCH_CONNECTOR,
                name=child.name,
                is_dir=child.is_dir,
            )
        )
        if child.is_dir:
            lines.extend(
                build_tree_lines(
                    child.path,
                    ignored,
                    order=order,
                    show_hidden=show_hidden,
                    prefix=prefix + (LAST_PREFIX if is_last else BRANCH_PREFIX),
                )
            )
    return lines
