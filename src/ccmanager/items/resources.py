"""File-based agents and commands: list across scopes, add, remove."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ccmanager.errors import ResourceExistsError, ResourceNotFoundError
from ccmanager.plugins.models import RESOURCE_CATEGORIES

if TYPE_CHECKING:
    from ccmanager.core.config import Config

_SINGULAR = {"agents": "agent", "commands": "command"}

_TEMPLATE = """\
---
description: A custom {kind} for {description}
---

{prompt}
"""


def _check_category(category: str) -> None:
    if category not in RESOURCE_CATEGORIES:
        raise ValueError(f"unknown resource category: {category}")


def resource_path(config: Config, category: str, name: str) -> Path:
    """Project-level path for *name*, adding ``.md`` if missing."""
    _check_category(category)
    if not name.endswith(".md"):
        name += ".md"
    return config.live_dir(category) / name


def list_resources(config: Config, category: str) -> dict[str, str]:
    """Map resource file name -> scope ('project' or 'user'); project wins."""
    _check_category(category)
    storage = config.storage
    found: dict[str, str] = {}
    for name in storage.list_dir(config.live_dir(category)):
        found[name] = "project"
    for name in storage.list_dir(config.user_resource_dir(category)):
        found.setdefault(name, "user")
    return found


def add_resource(config: Config, category: str, name: str, prompt: str | None = None) -> Path:
    path = resource_path(config, category, name)
    kind = _SINGULAR[category]
    storage = config.storage
    if storage.exists(path):
        raise ResourceExistsError(f'{kind.capitalize()} "{name}" already exists.')

    storage.mkdir(path.parent)
    description = path.stem.replace("-", " ")
    storage.write_text(
        path,
        _TEMPLATE.format(
            kind=kind,
            description=description,
            prompt=prompt or f"This is a custom {kind} for {description}.",
        ),
    )
    return path


def remove_resource(config: Config, category: str, name: str) -> Path:
    path = resource_path(config, category, name)
    if not config.storage.exists(path):
        kind = _SINGULAR[category].capitalize()
        raise ResourceNotFoundError(f'{kind} "{name}" not found at {path}')
    config.storage.unlink(path)
    return path
