"""
Tests for instruction document loading and the built-in fallback.
"""

import pytest

from agentshield_hook.document import FALLBACK_DOCUMENT, FileDocumentSource, resolve_document
from agentshield_hook.errors import DocumentReadError


class TestFallbackDocument:
    """The built-in document carries every required instruction."""

    def test_title(self):
        assert FALLBACK_DOCUMENT.startswith("# AgentShield")
        assert "Runtime Security" in FALLBACK_DOCUMENT.splitlines()[0]

    def test_mandatory_wrap_rule(self):
        assert "Every shell command MUST be wrapped with `agentshield run --`" in FALLBACK_DOCUMENT

    def test_example(self):
        """Test the before/after example."""
        assert "rm -rf /tmp/old" in FALLBACK_DOCUMENT
        assert "agentshield run -- rm -rf /tmp/old" in FALLBACK_DOCUMENT

    def test_no_bypass_rule(self):
        assert "do NOT retry or rephrase" in FALLBACK_DOCUMENT
        assert "Report the block to the user and ask for guidance." in FALLBACK_DOCUMENT


class TestFileDocumentSource:
    """Tests for FileDocumentSource."""

    def test_load_verbatim(self, tmp_path):
        """Test that file contents are returned unchanged."""
        path = tmp_path / "AGENTSHIELD.md"
        path.write_text("# Rules\n\n  keep spacing  \n", encoding="utf-8")
        assert FileDocumentSource(path).load() == "# Rules\n\n  keep spacing  \n"

    def test_load_utf8(self, tmp_path):
        path = tmp_path / "AGENTSHIELD.md"
        path.write_text("⚠️ règles", encoding="utf-8")
        assert FileDocumentSource(str(path)).load() == "⚠️ règles"

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentReadError):
            FileDocumentSource(tmp_path / "missing.md").load()

    def test_directory_instead_of_file(self, tmp_path):
        """Test that an unreadable path raises DocumentReadError."""
        with pytest.raises(DocumentReadError):
            FileDocumentSource(tmp_path).load()

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "AGENTSHIELD.md"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(DocumentReadError):
            FileDocumentSource(path).load()


class TestResolveDocument:
    """Tests for resolve_document."""

    def test_uses_source(self, tmp_path):
        path = tmp_path / "AGENTSHIELD.md"
        path.write_text("X", encoding="utf-8")
        assert resolve_document(FileDocumentSource(path)) == "X"

    def test_falls_back(self, tmp_path):
        """Test that a read failure yields the built-in document."""
        assert resolve_document(FileDocumentSource(tmp_path / "missing.md")) == FALLBACK_DOCUMENT
