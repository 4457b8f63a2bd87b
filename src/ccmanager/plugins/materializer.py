"""Project plugin resource files into the live agents/commands directories."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ccmanager.core.storage import Storage


class SymlinkMaterializer:
    """Owns the symlinks in the live resource directories.

    Only symlinks are ever removed, so regular files a user puts in
    ``.claude/agents`` or ``.claude/commands`` survive every sync.
    """

    def __init__(self, storage: Storage, live_dirs: dict[str, Path]):
        self.storage = storage
        self.live_dirs = live_dirs  # category -> live directory

    def clear(self) -> list[Path]:
        removed: list[Path] = []
        for live_dir in self.live_dirs.values():
            for entry in self.storage.list_dir(live_dir):
                path = live_dir / entry
                if self.storage.is_symlink(path):
                    self.storage.unlink(path)
                    removed.append(path)
        return removed

    def apply(self, category: str, resources: list[Path]) -> tuple[list[Path], list[Path]]:
        """Link each resource into the live dir unless the name is taken.

        Returns ``(created links, shadowed resources)``. An existing entry
        always wins, which makes the first-enabled plugin win a name clash.
        """
        live_dir = self.live_dirs[category]
        self.storage.mkdir(live_dir)
        created: list[Path] = []
        shadowed: list[Path] = []
        for source in resources:
            dest = live_dir / source.name
            if self.storage.exists(dest):
                shadowed.append(source)
                continue
            self.storage.symlink(source, dest)
            created.append(dest)
        return created, shadowed
