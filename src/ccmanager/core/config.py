"""Configuration: env, paths, storage backend."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .storage import LocalStorage, Storage

STATE_FILE_NAME = "cc-manager.state.json"
LOCK_FILE_NAME = "cc-manager.lock"


@dataclass
class Config:
    cwd: Path = field(default_factory=Path.cwd)
    project_dir: Path | None = None  # explicit override; None = <cwd>/.claude
    user_dir: Path = field(default_factory=lambda: Path.home() / ".claude")
    verbose: bool = False
    storage: Storage = field(default_factory=LocalStorage)

    @property
    def claude_dir(self) -> Path:
        if self.project_dir is not None:
            return self.project_dir
        return self.cwd / ".claude"

    @property
    def plugins_dir(self) -> Path:
        return self.claude_dir / "plugins"

    @property
    def state_path(self) -> Path:
        return self.claude_dir / STATE_FILE_NAME

    @property
    def lock_path(self) -> Path:
        return self.claude_dir / LOCK_FILE_NAME

    @property
    def settings_path(self) -> Path:
        return self.claude_dir / "settings.json"

    @property
    def claude_md_path(self) -> Path:
        return self.claude_dir / "CLAUDE.md"

    @property
    def mcp_path(self) -> Path:
        return self.cwd / ".mcp.json"

    def live_dir(self, category: str) -> Path:
        """Live resource directory for 'agents' or 'commands'."""
        return self.claude_dir / category

    def user_resource_dir(self, category: str) -> Path:
        return self.user_dir / category


def load_config(
    project_dir: str | Path | None = None,
    verbose: bool = False,
) -> Config:
    """Load config with priority: CLI args > env > .env > defaults."""
    load_dotenv()

    config = Config()
    config.verbose = verbose

    if env_project := os.getenv("CC_MANAGER_PROJECT_DIR"):
        config.project_dir = Path(env_project).expanduser().resolve()
    if env_user := os.getenv("CC_MANAGER_USER_DIR"):
        config.user_dir = Path(env_user).expanduser()

    if project_dir:
        config.project_dir = Path(project_dir).expanduser().resolve()

    return config
