"""Plugin data models: Plugin, PluginState, SyncResult."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ccmanager.errors import InvalidPluginNameError

# Resource categories projected into the live config as symlinks.
RESOURCE_CATEGORIES = ("agents", "commands")

SETTINGS_FILE = "settings.json"
DOC_FILE = "CLAUDE.md"


def validate_plugin_name(name: str) -> None:
    """Plugin names are plain directory names under the plugins root."""
    if not name or name in (".", "..") or "/" in name or "\\" in name or "\x00" in name:
        raise InvalidPluginNameError(name)


@dataclass
class Plugin:
    """A plugin bundle discovered on disk."""

    name: str
    root: Path
    enabled: bool = False


@dataclass
class PluginState:
    """Ordered list of enabled plugin names; order is merge precedence."""

    enabled: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        deduped: list[str] = []
        for name in self.enabled:
            if name not in deduped:
                deduped.append(name)
        self.enabled = deduped

    def is_enabled(self, name: str) -> bool:
        return name in self.enabled

    def with_enabled(self, name: str) -> PluginState:
        return PluginState(enabled=[*self.enabled, name])

    def without(self, name: str) -> PluginState:
        return PluginState(enabled=[p for p in self.enabled if p != name])

    def to_dict(self) -> dict[str, Any]:
        return {"enabled": list(self.enabled)}

    @classmethod
    def from_dict(cls, data: Any) -> PluginState:
        """Build from parsed JSON. Raises ValueError on the wrong shape."""
        if not isinstance(data, dict):
            raise ValueError("state must be a JSON object")
        enabled = data.get("enabled", [])
        if not isinstance(enabled, list) or not all(isinstance(n, str) for n in enabled):
            raise ValueError("'enabled' must be a list of plugin names")
        for name in enabled:
            try:
                validate_plugin_name(name)
            except InvalidPluginNameError as e:
                raise ValueError(str(e)) from e
        return cls(enabled=enabled)


@dataclass
class SyncResult:
    """Outcome of one full regeneration of the live configuration."""

    enabled: list[str] = field(default_factory=list)
    settings: dict[str, Any] = field(default_factory=dict)
    document: str = ""
    links: list[Path] = field(default_factory=list)
    shadowed: list[tuple[str, Path]] = field(default_factory=list)  # (plugin, resource)
    missing: list[str] = field(default_factory=list)
