"""Non-plugin configuration items: agents, commands, hooks, MCP, permissions."""

from .resources import add_resource, list_resources, remove_resource, resource_path
from .settings import (
    HookEntry,
    allow_permission,
    deny_permission,
    list_hooks,
    list_mcp_servers,
    list_permissions,
    read_settings,
    set_mcp_server,
    write_settings,
)

__all__ = [
    "HookEntry",
    "add_resource",
    "allow_permission",
    "deny_permission",
    "list_hooks",
    "list_mcp_servers",
    "list_permissions",
    "list_resources",
    "read_settings",
    "remove_resource",
    "resource_path",
    "set_mcp_server",
    "write_settings",
]
