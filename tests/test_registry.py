"""Tests for plugin discovery, fragment accessors and scaffolding."""

import json

import pytest

from ccmanager.errors import (
    DocumentReadError,
    InvalidPluginNameError,
    PluginExistsError,
    SettingsParseError,
)
from ccmanager.plugins import PluginRegistry, PluginState, validate_plugin_name


@pytest.fixture
def registry(mem_config):
    return PluginRegistry(mem_config.storage, mem_config.plugins_dir)


class TestListAvailable:
    def test_missing_root_is_empty(self, registry):
        assert registry.list_available() == set()

    def test_only_directories(self, mem_config, registry, make_plugin):
        make_plugin(mem_config, "a")
        make_plugin(mem_config, "b")
        mem_config.storage.write_text(mem_config.plugins_dir / "README.md", "x")
        assert registry.list_available() == {"a", "b"}

    def test_list_plugins_marks_enabled(self, mem_config, registry, make_plugin):
        make_plugin(mem_config, "b")
        make_plugin(mem_config, "a")
        plugins = registry.list_plugins(PluginState(enabled=["b"]))
        assert [(p.name, p.enabled) for p in plugins] == [("a", False), ("b", True)]


class TestAccessors:
    def test_missing_files_are_absent(self, mem_config, registry, make_plugin):
        make_plugin(mem_config, "bare")
        assert registry.exists("bare")
        assert registry.settings_fragment("bare") is None
        assert registry.doc_fragment("bare") is None
        assert registry.resource_paths("bare", "agents") == []

    def test_reads_fragments(self, mem_config, registry, make_plugin):
        make_plugin(
            mem_config, "p", settings={"x": [1]}, doc="Hello", agents={"b.md": "", "a.md": ""}
        )
        assert registry.settings_fragment("p") == {"x": [1]}
        assert registry.doc_fragment("p") == "Hello"
        assert [p.name for p in registry.resource_paths("p", "agents")] == ["a.md", "b.md"]

    def test_resource_paths_include_subdirs(self, mem_config, registry, make_plugin):
        make_plugin(mem_config, "p", commands={"go.md": ""})
        mem_config.storage.add_file(mem_config.plugins_dir / "p" / "commands" / "nested" / "x.md")
        names = [p.name for p in registry.resource_paths("p", "commands")]
        assert names == ["go.md", "nested"]

    def test_unknown_category(self, registry):
        with pytest.raises(ValueError):
            registry.resource_paths("p", "skills")

    def test_bad_settings_raises(self, mem_config, registry, make_plugin):
        root = make_plugin(mem_config, "p")
        mem_config.storage.write_text(root / "settings.json", "{oops")
        with pytest.raises(SettingsParseError):
            registry.settings_fragment("p")

    def test_non_object_settings_raises(self, mem_config, registry, make_plugin):
        root = make_plugin(mem_config, "p")
        mem_config.storage.write_text(root / "settings.json", "[1, 2]")
        with pytest.raises(SettingsParseError):
            registry.settings_fragment("p")

    def test_undecodable_settings_raises(self, disk_config, make_plugin):
        root = make_plugin(disk_config, "p")
        (root / "settings.json").write_bytes(b'{"k": "\xff"}')
        registry = PluginRegistry(disk_config.storage, disk_config.plugins_dir)
        with pytest.raises(SettingsParseError):
            registry.settings_fragment("p")

    def test_undecodable_doc_raises(self, disk_config, make_plugin):
        root = make_plugin(disk_config, "p")
        (root / "CLAUDE.md").write_bytes(b"caf\xe9\n")
        registry = PluginRegistry(disk_config.storage, disk_config.plugins_dir)
        with pytest.raises(DocumentReadError):
            registry.doc_fragment("p")


class TestCreate:
    def test_scaffold(self, mem_config, registry):
        path = registry.create("foo")
        storage = mem_config.storage
        assert storage.is_dir(path / "agents")
        assert storage.is_dir(path / "commands")
        assert json.loads(storage.read_text(path / "settings.json")) == {}
        assert storage.read_text(path / "CLAUDE.md").startswith("# foo")

    def test_existing_raises(self, mem_config, registry, make_plugin):
        make_plugin(mem_config, "foo", doc="mine")
        with pytest.raises(PluginExistsError):
            registry.create("foo")
        assert registry.doc_fragment("foo") == "mine"

    @pytest.mark.parametrize("name", ["", ".", "..", "a/b", "a\\b"])
    def test_invalid_names(self, name):
        with pytest.raises(InvalidPluginNameError):
            validate_plugin_name(name)
