"""Plugins: enablement state, registry, merge/assembly rules, live config sync."""

from .document import DocumentAssembler, assemble, begin_marker, end_marker
from .lifecycle import (
    add_plugin,
    disable_plugin,
    enable_plugin,
    list_plugins,
    remove_plugin,
    sync_plugins,
)
from .materializer import SymlinkMaterializer
from .merge import deep_merge, merge_all, union
from .models import (
    RESOURCE_CATEGORIES,
    Plugin,
    PluginState,
    SyncResult,
    validate_plugin_name,
)
from .registry import PluginRegistry
from .state import StateStore
from .sync import SyncOrchestrator, sync_config

__all__ = [
    "RESOURCE_CATEGORIES",
    "DocumentAssembler",
    "Plugin",
    "PluginRegistry",
    "PluginState",
    "StateStore",
    "SymlinkMaterializer",
    "SyncOrchestrator",
    "SyncResult",
    "add_plugin",
    "assemble",
    "begin_marker",
    "deep_merge",
    "disable_plugin",
    "enable_plugin",
    "end_marker",
    "list_plugins",
    "merge_all",
    "remove_plugin",
    "sync_config",
    "sync_plugins",
    "union",
    "validate_plugin_name",
]
