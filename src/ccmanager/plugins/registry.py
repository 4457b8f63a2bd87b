"""Plugin registry: discover plugin bundles and read their fragments."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ccmanager.errors import DocumentReadError, PluginExistsError, SettingsParseError

from .models import (
    DOC_FILE,
    RESOURCE_CATEGORIES,
    SETTINGS_FILE,
    Plugin,
    PluginState,
    validate_plugin_name,
)

if TYPE_CHECKING:
    from ccmanager.core.storage import Storage


class PluginRegistry:
    """Read-only view of ``<plugins-root>/<name>/`` bundles (plus scaffolding).

    Every accessor reads from storage on each call; nothing is cached.
    """

    def __init__(self, storage: Storage, root: Path):
        self.storage = storage
        self.root = root

    def plugin_path(self, name: str) -> Path:
        return self.root / name

    def list_available(self) -> set[str]:
        return {
            name
            for name in self.storage.list_dir(self.root)
            if self.storage.is_dir(self.root / name)
        }

    def exists(self, name: str) -> bool:
        return self.storage.is_dir(self.plugin_path(name))

    def list_plugins(self, state: PluginState) -> list[Plugin]:
        return [
            Plugin(name=name, root=self.plugin_path(name), enabled=state.is_enabled(name))
            for name in sorted(self.list_available())
        ]

    def resource_paths(self, name: str, category: str) -> list[Path]:
        """Entries under the plugin's ``agents/`` or ``commands/``, sorted.

        Subdirectories are included: ``commands/frontend/`` is linked whole,
        which is how namespaced commands (``/frontend:deploy``) are shipped.
        """
        if category not in RESOURCE_CATEGORIES:
            raise ValueError(f"unknown resource category: {category}")
        base = self.plugin_path(name) / category
        return [base / entry for entry in self.storage.list_dir(base)]

    def settings_fragment(self, name: str) -> dict[str, Any] | None:
        path = self.plugin_path(name) / SETTINGS_FILE
        if not self.storage.exists(path):
            return None
        try:
            data = json.loads(self.storage.read_text(path))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SettingsParseError(path, str(e)) from e
        if not isinstance(data, dict):
            raise SettingsParseError(path, "expected a JSON object")
        return data

    def doc_fragment(self, name: str) -> str | None:
        path = self.plugin_path(name) / DOC_FILE
        if not self.storage.exists(path):
            return None
        try:
            return self.storage.read_text(path)
        except UnicodeDecodeError as e:
            raise DocumentReadError(path, str(e)) from e

    def create(self, name: str) -> Path:
        """Scaffold a new plugin directory. Returns its path."""
        validate_plugin_name(name)
        path = self.plugin_path(name)
        if self.storage.exists(path):
            raise PluginExistsError(name, path)
        self.storage.mkdir(path)
        for category in RESOURCE_CATEGORIES:
            self.storage.mkdir(path / category)
        self.storage.write_text(path / SETTINGS_FILE, json.dumps({}, indent=2) + "\n")
        self.storage.write_text(path / DOC_FILE, f"# {name}\n\nThis plugin is for...\n")
        return path

    def delete(self, name: str) -> None:
        self.storage.rmtree(self.plugin_path(name))
