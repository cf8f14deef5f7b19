"""Optional JSON preferences.

Supplies extra ignored names, the listing order, and the README filename.
All access is defensive: malformed or missing config falls back safely.
The tool only reads this file; it is edited by hand.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .readme import is_bare_filename
from .tree_model import ORDERS

APP_NAME = "readmetree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_extra_ignores() -> list[str]:
    """Return configured extra ignored names.

    Non-list values yield nothing; non-string and blank items are dropped.
    """
    value = load_config().get("ignore")
    if not isinstance(value, list):
        return []
    names: list[str] = []
    for item in value:
        if not isinstance(item, str):
            continue
        stripped = item.strip()
        if stripped:
            names.append(stripped)
    return names


def load_order() -> str | None:
    """Load configured listing order, returning ``None`` when unset/invalid."""
    value = load_config().get("order")
    return value if isinstance(value, str) and value in ORDERS else None


def load_readme_name() -> str | None:
    """Load configured README filename, returning ``None`` when unset/invalid.

    Only bare filenames are accepted; the document always lives in the
    target directory.
    """
    value = load_config().get("readme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if is_bare_filename(stripped) else None
