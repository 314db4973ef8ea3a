"""JSON-backed user defaults for scan options."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from treesize.utils import xdg_config_home

log = logging.getLogger(__name__)

_SETTINGS_DIR = "treesize"
_SETTINGS_FILE = "settings.json"

SCAN_KEYS = ("path", "max_depth", "top", "min_size", "threads")


class Settings:
    """User settings read from a JSON file.

    Uses dot-notation keys for nested access:
        settings.get("scan.threads")  # reads data["scan"]["threads"]

    Example file::

        {"scan": {"threads": 8, "top": 10}}
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or (xdg_config_home() / _SETTINGS_DIR / _SETTINGS_FILE)
        self._data: dict[str, Any] = {}
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def scan_defaults(self) -> dict[str, Any]:
        """Return the configured defaults for the ``scan`` command.

        Unknown keys are ignored so a stale file cannot break the CLI.
        """
        section = self.get("scan", {})
        if not isinstance(section, dict):
            log.warning("Ignoring non-object 'scan' section in %s", self._path)
            return {}
        return {key: section[key] for key in SCAN_KEYS if key in section}

    def _load(self) -> None:
        """Load settings from disk, gracefully handling errors."""
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Could not load settings from %s: %s", self._path, e)
            return
        if not isinstance(data, dict):
            log.warning("Ignoring settings in %s: top level is not an object", self._path)
            return
        self._data = data
