"""Full regeneration of the live configuration from the enabled plugin list."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich.console import Console

from .document import assemble
from .materializer import SymlinkMaterializer
from .merge import merge_all
from .models import RESOURCE_CATEGORIES, SyncResult
from .registry import PluginRegistry

if TYPE_CHECKING:
    from ccmanager.core.config import Config

console = Console()


class SyncOrchestrator:
    """Tear down generated artifacts, then fold every enabled plugin back in.

    Nothing is patched incrementally: the output depends only on the enabled
    list and what is on disk right now. A failure halfway (e.g. a broken
    settings.json in a later plugin) leaves the live config half rebuilt;
    the next successful sync repairs it.
    """

    def __init__(
        self,
        config: Config,
        registry: PluginRegistry | None = None,
        materializer: SymlinkMaterializer | None = None,
    ):
        self.config = config
        self.storage = config.storage
        self.registry = registry or PluginRegistry(config.storage, config.plugins_dir)
        self.materializer = materializer or SymlinkMaterializer(
            config.storage, {c: config.live_dir(c) for c in RESOURCE_CATEGORIES}
        )

    def sync(self, enabled: list[str]) -> SyncResult:
        console.print("Syncing configuration with state...")
        result = SyncResult(enabled=list(enabled))

        # 1-2. clear previous output
        self.materializer.clear()
        doc_path = self.config.claude_md_path
        if self.storage.exists(doc_path):
            self.storage.write_text(doc_path, "")

        # 3. fold enabled plugins in order
        fragments: list[dict] = []
        docs: list[tuple[str, str | None]] = []
        for name in enabled:
            console.print(f"- Applying plugin: {name}")
            if not self.registry.exists(name):
                console.print(
                    f"  [yellow]warning: plugin {name} has no directory, skipping[/yellow]"
                )
                result.missing.append(name)
                continue

            fragment = self.registry.settings_fragment(name)
            if fragment is not None:
                fragments.append(fragment)
            docs.append((name, self.registry.doc_fragment(name)))

            for category in RESOURCE_CATEGORIES:
                created, shadowed = self.materializer.apply(
                    category, self.registry.resource_paths(name, category)
                )
                result.links.extend(created)
                result.shadowed.extend((name, p) for p in shadowed)
                if self.config.verbose:
                    for p in shadowed:
                        console.print(f"  [dim]{category}/{p.name} shadowed[/dim]")

        # 4. write artifacts
        result.settings = merge_all(fragments)
        result.document = assemble(docs)
        self.storage.mkdir(self.config.claude_dir)
        self.storage.write_text(
            self.config.settings_path, json.dumps(result.settings, indent=2) + "\n"
        )
        self.storage.write_text(doc_path, result.document)

        console.print("Sync complete.")
        return result


def sync_config(config: Config, enabled: list[str]) -> SyncResult:
    return SyncOrchestrator(config).sync(enabled)
