"""Plugin lifecycle: list, add, enable, disable, remove, sync."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console

from ccmanager.errors import PluginEnabledError, PluginNotFoundError

from .models import Plugin, SyncResult, validate_plugin_name
from .registry import PluginRegistry
from .state import StateStore
from .sync import SyncOrchestrator

if TYPE_CHECKING:
    from ccmanager.core.config import Config

console = Console()


def _registry(config: Config) -> PluginRegistry:
    return PluginRegistry(config.storage, config.plugins_dir)


def _state_store(config: Config) -> StateStore:
    return StateStore(config.storage, config.state_path)


def _lock(config: Config):
    # Held across read-state, write-state and resync so that two invocations
    # cannot interleave their regenerations.
    return config.storage.lock(config.lock_path)


def list_plugins(config: Config) -> list[Plugin]:
    return _registry(config).list_plugins(_state_store(config).read())


def add_plugin(config: Config, name: str) -> Path:
    """Scaffold ``plugins/<name>``. Does not enable it."""
    registry = _registry(config)
    console.print(f'Creating plugin "{name}"...')
    path = registry.create(name)
    console.print(f'Plugin "{name}" created successfully.')
    return path


def enable_plugin(config: Config, name: str) -> SyncResult | None:
    """Append *name* to the enabled list and resync. ``None`` if already enabled."""
    validate_plugin_name(name)
    registry = _registry(config)
    if not registry.exists(name):
        raise PluginNotFoundError(name)

    store = _state_store(config)
    with _lock(config):
        state = store.read()
        if state.is_enabled(name):
            console.print(f'Plugin "{name}" is already enabled.')
            return None

        state = state.with_enabled(name)
        store.write(state)
        result = SyncOrchestrator(config, registry=registry).sync(state.enabled)

    console.print(f'Plugin "{name}" enabled successfully.')
    return result


def disable_plugin(config: Config, name: str) -> SyncResult | None:
    """Drop *name* from the enabled list and resync. ``None`` if not enabled.

    Works even when the plugin directory is gone, so stale entries can be
    cleaned out of the state file.
    """
    registry = _registry(config)
    if not registry.exists(name):
        console.print(f'[yellow]Plugin "{name}" not found.[/yellow]')

    store = _state_store(config)
    with _lock(config):
        state = store.read()
        if not state.is_enabled(name):
            console.print(f'Plugin "{name}" is not enabled.')
            return None

        state = state.without(name)
        store.write(state)
        result = SyncOrchestrator(config, registry=registry).sync(state.enabled)

    console.print(f'Plugin "{name}" disabled successfully.')
    return result


def remove_plugin(config: Config, name: str) -> Path:
    """Delete a disabled plugin's directory. Enabled plugins are refused."""
    validate_plugin_name(name)
    registry = _registry(config)
    if not registry.exists(name):
        raise PluginNotFoundError(name)

    with _lock(config):
        if _state_store(config).read().is_enabled(name):
            raise PluginEnabledError(name)
        console.print(f'Removing plugin "{name}"...')
        registry.delete(name)

    console.print(f'Plugin "{name}" removed successfully.')
    return registry.plugin_path(name)


def sync_plugins(config: Config) -> SyncResult:
    """Regenerate the live config from the current state without changing it."""
    with _lock(config):
        state = _state_store(config).read()
        return SyncOrchestrator(config).sync(state.enabled)
