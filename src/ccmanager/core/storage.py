"""Storage backends: every file-system touch of the sync engine goes through one."""

from __future__ import annotations

import fcntl
import os
import shutil
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import ContextManager, Protocol


class Storage(Protocol):
    """File-system operations used by the state store, registry and sync."""

    def exists(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...

    def is_symlink(self, path: Path) -> bool: ...

    def list_dir(self, path: Path) -> list[str]: ...

    def read_text(self, path: Path) -> str: ...

    def write_text(self, path: Path, text: str) -> None: ...

    def mkdir(self, path: Path) -> None: ...

    def symlink(self, target: Path, link: Path) -> None: ...

    def readlink(self, path: Path) -> Path: ...

    def unlink(self, path: Path) -> None: ...

    def rmtree(self, path: Path) -> None: ...

    def lock(self, path: Path) -> ContextManager[None]: ...


class LocalStorage:
    """The real disk."""

    def exists(self, path: Path) -> bool:
        # A dangling symlink still occupies its name.
        return os.path.lexists(path)

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def is_symlink(self, path: Path) -> bool:
        return path.is_symlink()

    def list_dir(self, path: Path) -> list[str]:
        if not path.is_dir():
            return []
        return sorted(p.name for p in path.iterdir())

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def write_text(self, path: Path, text: str) -> None:
        path.write_text(text, encoding="utf-8")

    def mkdir(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def symlink(self, target: Path, link: Path) -> None:
        link.symlink_to(target)

    def readlink(self, path: Path) -> Path:
        return Path(os.readlink(path))

    def unlink(self, path: Path) -> None:
        path.unlink()

    def rmtree(self, path: Path) -> None:
        shutil.rmtree(path)

    @contextmanager
    def lock(self, path: Path) -> Iterator[None]:
        """Hold an exclusive ``flock`` on *path* for the duration of the block."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "a") as f:
            fcntl.flock(f.fileno(), fcntl.LOCK_EX)
            try:
                yield
            finally:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)


class MemoryStorage:
    """In-memory tree of files, directories and symlinks.

    Paths are compared as given, so callers should stick to absolute paths.
    Reads and writes follow symlinks; ``exists``/``is_symlink``/``unlink``
    act on the link itself, like their ``os`` counterparts.
    """

    def __init__(self) -> None:
        self.files: dict[Path, str] = {}
        self.dirs: set[Path] = set()
        self.links: dict[Path, Path] = {}
        self._locks: dict[Path, threading.Lock] = {}

    # ── seeding helpers (tests) ──────────────────────────────────────

    def add_file(self, path: Path, text: str = "") -> None:
        self.mkdir(path.parent)
        self.write_text(path, text)

    def tree(self) -> dict[str, str]:
        """Flat snapshot: files map to content, links to '-> target', dirs to '/'."""
        snap: dict[str, str] = {str(d): "/" for d in self.dirs}
        snap.update({str(p): text for p, text in self.files.items()})
        snap.update({str(p): f"-> {t}" for p, t in self.links.items()})
        return snap

    # ── Storage ──────────────────────────────────────────────────────

    def _resolve(self, path: Path) -> Path:
        seen: set[Path] = set()
        while path in self.links:
            if path in seen:
                raise OSError(f"symlink loop at {path}")
            seen.add(path)
            path = self.links[path]
        return path

    def _require_parent(self, path: Path) -> None:
        if self._resolve(path.parent) not in self.dirs:
            raise FileNotFoundError(f"no such directory: {path.parent}")

    def exists(self, path: Path) -> bool:
        return path in self.files or path in self.dirs or path in self.links

    def is_dir(self, path: Path) -> bool:
        return self._resolve(path) in self.dirs

    def is_symlink(self, path: Path) -> bool:
        return path in self.links

    def list_dir(self, path: Path) -> list[str]:
        path = self._resolve(path)
        if path not in self.dirs:
            return []
        entries = [*self.files, *self.dirs, *self.links]
        return sorted({p.name for p in entries if p.parent == path and p != path})

    def read_text(self, path: Path) -> str:
        real = self._resolve(path)
        if real in self.dirs:
            raise IsADirectoryError(str(path))
        if real not in self.files:
            raise FileNotFoundError(str(path))
        return self.files[real]

    def write_text(self, path: Path, text: str) -> None:
        real = self._resolve(path)
        if real in self.dirs:
            raise IsADirectoryError(str(path))
        self._require_parent(real)
        self.files[real] = text

    def mkdir(self, path: Path) -> None:
        for p in (path, *path.parents):
            if p in self.files or p in self.links:
                raise FileExistsError(str(p))
            self.dirs.add(p)

    def symlink(self, target: Path, link: Path) -> None:
        if self.exists(link):
            raise FileExistsError(str(link))
        self._require_parent(link)
        self.links[link] = target

    def readlink(self, path: Path) -> Path:
        if path not in self.links:
            raise OSError(f"not a symlink: {path}")
        return self.links[path]

    def unlink(self, path: Path) -> None:
        if path in self.links:
            del self.links[path]
        elif path in self.files:
            del self.files[path]
        elif path in self.dirs:
            raise IsADirectoryError(str(path))
        else:
            raise FileNotFoundError(str(path))

    def rmtree(self, path: Path) -> None:
        if path not in self.dirs:
            raise FileNotFoundError(str(path))

        def _inside(p: Path) -> bool:
            return p == path or path in p.parents

        self.files = {p: t for p, t in self.files.items() if not _inside(p)}
        self.links = {p: t for p, t in self.links.items() if not _inside(p)}
        self.dirs = {d for d in self.dirs if not _inside(d)}

    @contextmanager
    def lock(self, path: Path) -> Iterator[None]:
        lock = self._locks.setdefault(path, threading.Lock())
        with lock:
            yield
