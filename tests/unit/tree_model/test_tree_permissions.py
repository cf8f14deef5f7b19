"""Unreadable-directory handling for tree builds."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from readmetree.errors import UnreadableDirectoryError
from readmetree.tree_model import build_directory_structure


class TreePermissionTests(unittest.TestCase):
    def test_unreadable_subdirectory_aborts_whole_build(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            locked = root / "locked"
            locked.mkdir()
            (root / "fine.txt").write_text("x", encoding="utf-8")
            real_scandir = os.scandir

            def fake_scandir(path):
                if Path(path) == locked:
                    raise PermissionError(13, "Permission denied", str(path))
                return real_scandir(path)

            with mock.patch("readmetree.tree_model.fs.os.scandir", side_effect=fake_scandir):
                with self.assertRaises(UnreadableDirectoryError) as exc_info:
                    build_directory_structure(root)

        self.assertIn(str(locked), str(exc_info.exception))
        self.assertIsInstance(exc_info.exception, PermissionError)


if __name__ == "__main__":
    unittest.main()
