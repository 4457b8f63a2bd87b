"""Persisted enablement state: .claude/cc-manager.state.json."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console

from .models import PluginState

if TYPE_CHECKING:
    from ccmanager.core.storage import Storage

console = Console()


class StateStore:
    def __init__(self, storage: Storage, path: Path):
        self.storage = storage
        self.path = path

    def read(self) -> PluginState:
        """Return the persisted state, or an empty one if missing or unreadable.

        A corrupt file is reported and treated as empty; the next write then
        replaces it, so whatever was in it is lost.
        """
        if not self.storage.exists(self.path):
            return PluginState()
        try:
            return PluginState.from_dict(json.loads(self.storage.read_text(self.path)))
        except (json.JSONDecodeError, ValueError, OSError) as e:
            console.print(
                f"[yellow]warning: error reading state file {self.path}, "
                f"starting with empty state ({e})[/yellow]"
            )
            return PluginState()

    def write(self, state: PluginState) -> None:
        self.storage.mkdir(self.path.parent)
        self.storage.write_text(self.path, json.dumps(state.to_dict(), indent=2) + "\n")
