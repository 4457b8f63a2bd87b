"""Shared fixtures: in-memory and on-disk project configs, plugin builder."""

import json
from pathlib import Path

import pytest

from ccmanager.core.config import Config
from ccmanager.core.storage import LocalStorage, MemoryStorage

PROJECT = Path("/proj")


@pytest.fixture
def mem_config():
    return Config(cwd=PROJECT, user_dir=Path("/home/u/.claude"), storage=MemoryStorage())


@pytest.fixture
def disk_config(tmp_path):
    return Config(cwd=tmp_path, user_dir=tmp_path / "home" / ".claude", storage=LocalStorage())


@pytest.fixture
def make_plugin():
    """Build ``plugins/<name>`` with optional settings, CLAUDE.md and resources."""

    def _make(
        config: Config,
        name: str,
        settings: dict | None = None,
        doc: str | None = None,
        agents: dict[str, str] | None = None,
        commands: dict[str, str] | None = None,
    ) -> Path:
        storage = config.storage
        root = config.plugins_dir / name
        storage.mkdir(root)
        if settings is not None:
            storage.write_text(root / "settings.json", json.dumps(settings))
        if doc is not None:
            storage.write_text(root / "CLAUDE.md", doc)
        for category, files in (("agents", agents), ("commands", commands)):
            if files:
                storage.mkdir(root / category)
                for fname, body in files.items():
                    storage.write_text(root / category / fname, body)
        return root

    return _make
