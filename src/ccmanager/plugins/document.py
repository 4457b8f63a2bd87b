"""CLAUDE.md assembly: one marker block per plugin, in enablement order."""

from __future__ import annotations

from collections.abc import Iterable


def begin_marker(name: str) -> str:
    return f"<!-- BEGIN PLUGIN: {name} -->"


def end_marker(name: str) -> str:
    return f"<!-- END PLUGIN: {name} -->"


class DocumentAssembler:
    def __init__(self) -> None:
        self._parts: list[str] = []

    def add(self, name: str, fragment: str | None) -> bool:
        """Append *name*'s block. Empty or missing fragments add nothing."""
        if not fragment or not fragment.strip():
            return False
        self._parts.append(f"\n\n{begin_marker(name)}\n{fragment}\n{end_marker(name)}\n")
        return True

    def text(self) -> str:
        return "".join(self._parts).strip()


def assemble(fragments: Iterable[tuple[str, str | None]]) -> str:
    """Assemble ``(plugin name, fragment)`` pairs into the live document."""
    doc = DocumentAssembler()
    for name, fragment in fragments:
        doc.add(name, fragment)
    return doc.text()
