"""Error taxonomy for tree building and README updates.

Every error aborts the run; the CLI turns them into an exit message.
"""

from __future__ import annotations


class ReadmeTreeError(Exception):
    """Base class for failures reported to the operator."""


class NotFoundError(ReadmeTreeError, FileNotFoundError):
    """Target path does not exist or is not a directory."""


class UnreadableDirectoryError(ReadmeTreeError, PermissionError):
    """A directory in the tree could not be listed."""


class WriteError(ReadmeTreeError, OSError):
    """The README document could not be written."""


__all__ = [
    "ReadmeTreeError",
    "NotFoundError",
    "UnreadableDirectoryError",
    "WriteError",
]
