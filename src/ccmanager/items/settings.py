"""Project settings.json: hooks/MCP/permission listings and toggles.

These edit the live settings file in place. A later plugin sync rewrites that
file from plugin fragments, so edits made here last only until then.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ccmanager.errors import SettingsParseError

if TYPE_CHECKING:
    from pathlib import Path

    from ccmanager.core.config import Config

ENABLED_MCP_KEY = "enabledMcpjsonServers"
DISABLED_MCP_KEY = "disabledMcpjsonServers"
PERMISSION_KINDS = ("allow", "ask", "deny")


@dataclass
class HookEntry:
    event: str
    matcher: str
    command: str


def read_settings(config: Config) -> dict[str, Any]:
    """Read project settings. Missing is ``{}``; unparsable raises."""
    path = config.settings_path
    if not config.storage.exists(path):
        return {}
    try:
        data = json.loads(config.storage.read_text(path))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SettingsParseError(path, str(e)) from e
    if not isinstance(data, dict):
        raise SettingsParseError(path, "expected a JSON object")
    return data


def write_settings(config: Config, data: dict[str, Any]) -> Path:
    path = config.settings_path
    config.storage.mkdir(path.parent)
    config.storage.write_text(path, json.dumps(data, indent=2) + "\n")
    return path


def _str_list(value: Any) -> list[str]:
    return [v for v in value if isinstance(v, str)] if isinstance(value, list) else []


def _raw_list(value: Any) -> list:
    # Toggles rewrite lists in place; entries they do not understand are kept.
    return list(value) if isinstance(value, list) else []


# ── listings ─────────────────────────────────────────────────────────


def list_hooks(config: Config) -> list[HookEntry]:
    """Flatten ``{"hooks": {Event: [{matcher, hooks: [...]}]}}``."""
    hooks = read_settings(config).get("hooks", {})
    entries: list[HookEntry] = []
    if not isinstance(hooks, dict):
        return entries
    for event, rules in hooks.items():
        if not isinstance(rules, list):
            continue
        for rule in rules:
            if not isinstance(rule, dict):
                continue
            matcher = str(rule.get("matcher") or "*")
            commands = rule.get("hooks")
            if not isinstance(commands, list):
                continue
            for hook in commands:
                if isinstance(hook, dict):
                    command = hook.get("command") or hook.get("prompt") or ""
                    entries.append(HookEntry(event=event, matcher=matcher, command=command))
    return entries


def list_mcp_servers(config: Config) -> dict[str, str]:
    """Server name -> 'enabled' | 'disabled' | 'default'.

    Servers come from ``.mcp.json`` plus any named only in settings.
    """
    settings = read_settings(config)
    enabled = _str_list(settings.get(ENABLED_MCP_KEY))
    disabled = _str_list(settings.get(DISABLED_MCP_KEY))

    names: list[str] = []
    storage = config.storage
    if storage.exists(config.mcp_path):
        try:
            raw = json.loads(storage.read_text(config.mcp_path))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SettingsParseError(config.mcp_path, str(e)) from e
        if isinstance(raw, dict):
            servers = raw.get("mcpServers", raw.get("servers", {}))
            if isinstance(servers, dict):
                names.extend(servers)
    for name in (*enabled, *disabled):
        if name not in names:
            names.append(name)

    status: dict[str, str] = {}
    for name in names:
        if name in disabled:
            status[name] = "disabled"
        elif name in enabled:
            status[name] = "enabled"
        else:
            status[name] = "default"
    return status


def list_permissions(config: Config) -> dict[str, list[str]]:
    permissions = read_settings(config).get("permissions", {})
    if not isinstance(permissions, dict):
        permissions = {}
    return {kind: _str_list(permissions.get(kind)) for kind in PERMISSION_KINDS}


# ── toggles ──────────────────────────────────────────────────────────


def set_mcp_server(config: Config, name: str, enabled: bool) -> None:
    """Put *name* in the enabled or disabled MCP list and out of the other."""
    settings = read_settings(config)
    add_key, drop_key = (
        (ENABLED_MCP_KEY, DISABLED_MCP_KEY) if enabled else (DISABLED_MCP_KEY, ENABLED_MCP_KEY)
    )
    target = _raw_list(settings.get(add_key))
    if name not in target:
        target.append(name)
    settings[add_key] = target
    if drop_key in settings:
        settings[drop_key] = [n for n in _raw_list(settings[drop_key]) if n != name]
    write_settings(config, settings)


def deny_permission(config: Config, rule: str) -> bool:
    """Add *rule* to ``permissions.deny``. False if it was already there."""
    settings = read_settings(config)
    permissions = settings.get("permissions")
    if not isinstance(permissions, dict):
        permissions = {}
    deny = _raw_list(permissions.get("deny"))
    if rule in deny:
        return False
    permissions["deny"] = [*deny, rule]
    settings["permissions"] = permissions
    write_settings(config, settings)
    return True


def allow_permission(config: Config, rule: str) -> bool:
    """Remove *rule* from ``permissions.deny``. False if it was not denied."""
    settings = read_settings(config)
    permissions = settings.get("permissions")
    if not isinstance(permissions, dict):
        return False
    deny = _raw_list(permissions.get("deny"))
    if rule not in deny:
        return False
    permissions["deny"] = [r for r in deny if r != rule]
    write_settings(config, settings)
    return True
