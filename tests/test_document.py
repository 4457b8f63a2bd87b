"""Tests for CLAUDE.md assembly."""

from ccmanager.plugins import DocumentAssembler, assemble, begin_marker, end_marker


class TestMarkers:
    def test_format(self):
        assert begin_marker("a") == "<!-- BEGIN PLUGIN: a -->"
        assert end_marker("a") == "<!-- END PLUGIN: a -->"


class TestDocumentAssembler:
    def test_single_block(self):
        doc = DocumentAssembler()
        doc.add("a", "Hello A")
        assert doc.text() == "<!-- BEGIN PLUGIN: a -->\nHello A\n<!-- END PLUGIN: a -->"

    def test_order_and_blank_line_separation(self):
        text = assemble([("a", "Hello A"), ("b", "Hello B")])
        assert text.index("Hello A") < text.index("Hello B")
        assert "<!-- END PLUGIN: a -->\n\n\n<!-- BEGIN PLUGIN: b -->" in text

    def test_missing_fragment_adds_nothing(self):
        doc = DocumentAssembler()
        assert doc.add("a", None) is False
        assert doc.add("b", "") is False
        assert doc.add("c", "  \n") is False
        assert doc.text() == ""

    def test_empty_fragment_between_blocks(self):
        text = assemble([("a", "A"), ("b", None), ("c", "C")])
        assert "PLUGIN: b" not in text
        assert text.startswith(begin_marker("a"))
        assert text.endswith(end_marker("c"))

    def test_fragment_text_kept_verbatim_inside(self):
        text = assemble([("a", "# Title\n\nbody\n")])
        assert "# Title\n\nbody\n\n<!-- END PLUGIN: a -->" in text

    def test_no_plugins(self):
        assert assemble([]) == ""
