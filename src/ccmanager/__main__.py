"""CLI entry point: plugin lifecycle + agents/commands/MCP/permission helpers."""

from __future__ import annotations

import sys

import click
from rich.console import Console

from . import __version__
from .core.config import load_config
from .errors import CCManagerError

console = Console()

CATEGORY_CHOICE = click.Choice(["agent", "command"])


def _category(kind: str) -> str:
    return f"{kind}s"


def _fail(e: Exception) -> None:
    console.print(f"error: {e}", style="bold")
    sys.exit(1)


@click.group()
@click.version_option(__version__, prog_name="cc-manager")
@click.option(
    "--project-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Project .claude directory (default: ./.claude)",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx: click.Context, project_dir: str | None, verbose: bool):
    """A CLI tool to manage claude-code configurations via plugins."""
    ctx.obj = load_config(project_dir=project_dir, verbose=verbose)


# ── Plugin subcommands ───────────────────────────────────────────────


@cli.group()
def plugin():
    """Manage configuration plugins."""


@plugin.command("list")
@click.pass_obj
def plugin_list(config):
    """List available plugins."""
    from .plugins import list_plugins

    if not config.storage.is_dir(config.plugins_dir):
        console.print("No plugins found. (Directory .claude/plugins/ does not exist)", style="dim")
        return
    plugins = list_plugins(config)
    if not plugins:
        console.print("No plugins available.", style="dim")
        return
    console.print("Available Plugins:")
    for p in plugins:
        status = "[green]enabled[/green]" if p.enabled else "[dim]available[/dim]"
        console.print(f"- [bold]{p.name}[/bold] ({status})")


@plugin.command("add")
@click.argument("name")
@click.pass_obj
def plugin_add(config, name: str):
    """Create a new, disabled plugin."""
    from .plugins import add_plugin

    try:
        add_plugin(config, name)
    except CCManagerError as e:
        _fail(e)


@plugin.command("enable")
@click.argument("name")
@click.pass_obj
def plugin_enable(config, name: str):
    """Enable a plugin and regenerate the live config."""
    from .plugins import enable_plugin

    try:
        enable_plugin(config, name)
    except CCManagerError as e:
        _fail(e)


@plugin.command("disable")
@click.argument("name")
@click.pass_obj
def plugin_disable(config, name: str):
    """Disable a plugin and regenerate the live config."""
    from .plugins import disable_plugin

    try:
        disable_plugin(config, name)
    except CCManagerError as e:
        _fail(e)


@plugin.command("remove")
@click.argument("name")
@click.pass_obj
def plugin_remove(config, name: str):
    """Delete a disabled plugin."""
    from .plugins import remove_plugin

    try:
        remove_plugin(config, name)
    except CCManagerError as e:
        _fail(e)


@plugin.command("sync")
@click.pass_obj
def plugin_sync(config):
    """Regenerate the live config from the enabled plugins."""
    from .plugins import sync_plugins

    try:
        result = sync_plugins(config)
    except CCManagerError as e:
        _fail(e)
    else:
        if config.verbose:
            console.print(
                f"{len(result.enabled)} plugin(s), {len(result.links)} link(s), "
                f"{len(result.shadowed)} shadowed",
                style="dim",
            )


# ── Listings ─────────────────────────────────────────────────────────


@cli.group("list")
def list_group():
    """List various claude-code configurations."""


@list_group.command("agents")
@click.pass_obj
def list_agents(config):
    """List all available agents."""
    from .items import list_resources

    agents = list_resources(config, "agents")
    if not agents:
        console.print("No agents found.", style="dim")
        return
    console.print("Available Agents:")
    for name, scope in agents.items():
        console.print(f"- {name} [dim]({scope})[/dim]")


@list_group.command("commands")
@click.pass_obj
def list_commands(config):
    """List all available custom slash commands."""
    from .items import list_resources

    commands = list_resources(config, "commands")
    if not commands:
        console.print("No custom slash commands found.", style="dim")
        return
    console.print("Available Custom Slash Commands:")
    for name, scope in commands.items():
        console.print(f"- /{name.removesuffix('.md')} [dim]({scope})[/dim]")


@list_group.command("hooks")
@click.pass_obj
def list_hooks_cmd(config):
    """List configured hooks."""
    from .items import list_hooks

    try:
        hooks = list_hooks(config)
    except CCManagerError as e:
        _fail(e)
        return
    if not hooks:
        console.print("No hooks configured.", style="dim")
        return
    for h in hooks:
        console.print(f"  [bold]{h.event:<18}[/bold] {h.matcher:<16} {h.command}")


@list_group.command("mcp")
@click.pass_obj
def list_mcp_cmd(config):
    """List MCP servers and their enablement."""
    from .items import list_mcp_servers

    try:
        servers = list_mcp_servers(config)
    except CCManagerError as e:
        _fail(e)
        return
    if not servers:
        console.print("No MCP servers configured.", style="dim")
        return
    for name, status in servers.items():
        console.print(f"  [bold]{name:<20}[/bold] {status}")


@list_group.command("permissions")
@click.pass_obj
def list_permissions_cmd(config):
    """List configured tool permissions."""
    from .items import list_permissions

    try:
        permissions = list_permissions(config)
    except CCManagerError as e:
        _fail(e)
        return
    if not any(permissions.values()):
        console.print("No permissions configured.", style="dim")
        return
    for kind, rules in permissions.items():
        for rule in rules:
            console.print(f"  {kind:<6} {rule}")


# ── Agents / commands ────────────────────────────────────────────────


@cli.command("add")
@click.argument("kind", type=CATEGORY_CHOICE)
@click.argument("name")
@click.option("--prompt", "-p", default=None, help="The prompt for the agent or command")
@click.pass_obj
def add_item(config, kind: str, name: str, prompt: str | None):
    """Add a new agent or custom slash command."""
    from .items import add_resource

    try:
        path = add_resource(config, _category(kind), name, prompt)
    except CCManagerError as e:
        _fail(e)
        return
    console.print(f"Created {kind}: {path}")


@cli.command("remove")
@click.argument("kind", type=CATEGORY_CHOICE)
@click.argument("name")
@click.pass_obj
def remove_item(config, kind: str, name: str):
    """Remove an agent or custom slash command."""
    from .items import remove_resource

    try:
        path = remove_resource(config, _category(kind), name)
    except CCManagerError as e:
        _fail(e)
        return
    console.print(f"Removed {kind}: {path}")


# ── MCP / permission toggles ─────────────────────────────────────────


@cli.group()
def enable():
    """Enable a configuration item."""


@cli.group()
def disable():
    """Disable a configuration item."""


@enable.command("mcp")
@click.argument("server_name")
@click.pass_obj
def enable_mcp(config, server_name: str):
    """Enable an MCP server."""
    from .items import set_mcp_server

    try:
        set_mcp_server(config, server_name, enabled=True)
    except CCManagerError as e:
        _fail(e)
        return
    console.print(f"Enabled MCP server: [bold]{server_name}[/bold]")


@disable.command("mcp")
@click.argument("server_name")
@click.pass_obj
def disable_mcp(config, server_name: str):
    """Disable an MCP server."""
    from .items import set_mcp_server

    try:
        set_mcp_server(config, server_name, enabled=False)
    except CCManagerError as e:
        _fail(e)
        return
    console.print(f"Disabled MCP server: [bold]{server_name}[/bold]")


@enable.command("permission")
@click.argument("rule")
@click.pass_obj
def enable_permission(config, rule: str):
    """Enable a tool by removing it from the deny list."""
    from .items import allow_permission

    try:
        changed = allow_permission(config, rule)
    except CCManagerError as e:
        _fail(e)
        return
    if changed:
        console.print(f'Enabled permission: "{rule}" (removed from deny list)')
    else:
        console.print(f'Permission "{rule}" was not found in the deny list.', style="dim")


@disable.command("permission")
@click.argument("rule")
@click.pass_obj
def disable_permission(config, rule: str):
    """Disable a tool by adding it to the deny list."""
    from .items import deny_permission

    try:
        changed = deny_permission(config, rule)
    except CCManagerError as e:
        _fail(e)
        return
    if changed:
        console.print(f'Disabled permission: "{rule}" (added to deny list)')
    else:
        console.print(f'Permission "{rule}" is already denied.', style="dim")


def main():
    cli()


if __name__ == "__main__":
    main()
