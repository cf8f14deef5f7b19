"""Tests for config loading and input sanitization.

Ensures malformed config data is safely ignored on load.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from readmetree import config


class ConfigBehaviorTests(unittest.TestCase):
    def _with_config(self, payload: object):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        config_path = Path(tmp.name) / "config.json"
        config_path.write_text(json.dumps(payload), encoding="utf-8")
        patcher = mock.patch("readmetree.config.CONFIG_PATH", config_path)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_missing_config_is_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("readmetree.config.CONFIG_PATH", Path(tmp) / "missing.json"):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_extra_ignores(), [])
                self.assertIsNone(config.load_order())
                self.assertIsNone(config.load_readme_name())

    def test_malformed_json_is_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("readmetree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_non_object_json_is_empty(self) -> None:
        self._with_config(["ignore"])
        self.assertEqual(config.load_config(), {})

    def test_valid_values_are_loaded(self) -> None:
        self._with_config({"ignore": [" coverage ", "tmp"], "order": "native", "readme": " DOCS.md "})
        self.assertEqual(config.load_extra_ignores(), ["coverage", "tmp"])
        self.assertEqual(config.load_order(), "native")
        self.assertEqual(config.load_readme_name(), "DOCS.md")

    def test_invalid_values_are_dropped(self) -> None:
        self._with_config({"ignore": ["ok", 3, "", None], "order": "size", "readme": "   "})
        self.assertEqual(config.load_extra_ignores(), ["ok"])
        self.assertIsNone(config.load_order())
        self.assertIsNone(config.load_readme_name())

    def test_readme_name_must_be_a_bare_filename(self) -> None:
        for value in ("../OUTSIDE.md", "docs/README.md", "/tmp/README.md", ".."):
            with self.subTest(value=value):
                self._with_config({"readme": value})
                self.assertIsNone(config.load_readme_name())

    def test_ignore_must_be_a_list(self) -> None:
        self._with_config({"ignore": "coverage"})
        self.assertEqual(config.load_extra_ignores(), [])


if __name__ == "__main__":
    unittest.main()
