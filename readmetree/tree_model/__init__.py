"""Directory listing, tree-line construction, and text rendering.

This package contains the tree side of readmetree:
- ``DirectoryChild``/``TreeLine`` datatypes
- filtered, ordered directory listing
- recursive pre-order tree building with box-drawing prefixes
- rendering the rows to a single string
"""

from __future__ import annotations

from .build import build_tree_lines
from .fs import ORDER_DIRS_FIRST, ORDER_NATIVE, ORDERS, list_directory_children
from .rendering import build_directory_structure, render_tree
from .types import DirectoryChild, TreeLine

__all__ = [
    "DirectoryChild",
    "TreeLine",
    "ORDER_DIRS_FIRST",
    "ORDER_NATIVE",
    "ORDERS",
    "list_directory_children",
    "build_tree_lines",
    "render_tree",
    "build_directory_structure",
]
