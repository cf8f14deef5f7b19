"""README managed-region updates.

The region between ``START_MARKER`` and ``END_MARKER`` is owned by this tool
and rewritten on every run; everything outside it is kept verbatim. A document
without markers gets a new section appended instead of failing.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .errors import ReadmeTreeError, WriteError

START_MARKER = "<!-- START OF DIRECTORY STRUCTURE -->"
END_MARKER = "<!-- END OF DIRECTORY STRUCTURE -->"
SECTION_HEADING = "# Project Directory Structure"
FENCE = "```"
DEFAULT_README_NAME = "README.md"
DOCUMENT_ENCODING = "utf-8"

ACTION_CREATED = "created"
ACTION_REPLACED = "replaced"
ACTION_APPENDED = "appended"


@dataclass(frozen=True)
class ReadmeUpdate:
    """Outcome of one README write."""

    path: Path
    action: str
    text: str


def is_bare_filename(name: str) -> bool:
    """Return whether ``name`` names a file directly inside a directory."""
    return name not in ("", ".", "..") and Path(name).name == name


def read_document(path: Path) -> str:
    """Read a document without newline translation.

    Bytes that are not valid UTF-8 decode to surrogate escapes, so encoding
    with ``encode_document`` gives back the exact original bytes.
    """
    return path.read_bytes().decode(DOCUMENT_ENCODING, errors="surrogateescape")


def encode_document(text: str) -> bytes:
    return text.encode(DOCUMENT_ENCODING, errors="surrogateescape")


def detect_newline(text: str | None) -> str:
    """Return ``"\\r\\n"`` for CRLF documents, otherwise ``"\\n"``."""
    return "\r\n" if text and "\r\n" in text else "\n"


def build_managed_block(tree: str, newline: str = "\n") -> str:
    """Wrap ``tree`` in a fence between the start and end markers."""
    body = tree.replace("\n", newline)
    return newline.join([START_MARKER, FENCE, body, FENCE, END_MARKER])


def find_managed_region(text: str) -> tuple[int, int] | None:
    """Return ``(start, end)`` offsets of the managed region, markers included.

    The end marker must appear at or after the start marker; a stray end
    marker earlier in the document is ignored.
    """
    start = text.find(START_MARKER)
    if start < 0:
        return None
    end = text.find(END_MARKER, start)
    if end < 0:
        return None
    return start, end + len(END_MARKER)


def update_readme_text(existing: str | None, tree: str) -> tuple[str, str]:
    """Return ``(new_text, action)`` for a document holding ``existing``.

    ``existing`` is ``None`` when the document does not exist yet. Text
    outside the managed region is returned unchanged; the inserted lines use
    the document's own line ending.
    """
    newline = detect_newline(existing)
    block = build_managed_block(tree, newline)
    if existing is None:
        return f"{SECTION_HEADING}{newline}{newline}{block}{newline}", ACTION_CREATED

    region = find_managed_region(existing)
    if region is not None:
        start, end = region
        return existing[:start] + block + existing[end:], ACTION_REPLACED

    return f"{existing}{newline}{SECTION_HEADING}{newline}{block}{newline}", ACTION_APPENDED


def write_or_update_readme(
    directory: Path,
    tree: str,
    filename: str = DEFAULT_README_NAME,
) -> ReadmeUpdate:
    """Insert or replace the directory structure in ``directory/filename``.

    The new document is computed in full before the file is overwritten.
    Raises ``WriteError`` when the document cannot be written.
    """
    readme_path = directory / filename
    try:
        existing = read_document(readme_path) if readme_path.is_file() else None
    except OSError as exc:
        raise ReadmeTreeError(f'Cannot read "{readme_path}": {exc.strerror or exc}') from exc
    text, action = update_readme_text(existing, tree)
    try:
        readme_path.write_bytes(encode_document(text))
    except OSError as exc:
        raise WriteError(f'Cannot write "{readme_path}": {exc.strerror or exc}') from exc
    return ReadmeUpdate(path=readme_path, action=action, text=text)


def confirmation_message(update: ReadmeUpdate) -> str:
    return f"Directory structure updated in {update.path.name}!"


__all__ = [
    "START_MARKER",
    "END_MARKER",
    "SECTION_HEADING",
    "DEFAULT_README_NAME",
    "ACTION_CREATED",
    "ACTION_REPLACED",
    "ACTION_APPENDED",
    "ReadmeUpdate",
    "is_bare_filename",
    "read_document",
    "encode_document",
    "detect_newline",
    "build_managed_block",
    "find_managed_region",
    "update_readme_text",
    "write_or_update_readme",
    "confirmation_message",
]
