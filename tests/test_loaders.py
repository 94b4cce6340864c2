"""Tests for file loaders."""

import pytest

from rfx_studio.loaders import TextFileLoader, strip_extension


class TestStripExtension:
    """Tests for display name derivation."""

    def test_last_extension_removed(self):
        assert strip_extension("rfp.final.txt") == "rfp.final"

    def test_no_extension(self):
        assert strip_extension("README") == "README"

    def test_dotfile(self):
        assert strip_extension(".env") == ""


class TestTextFileLoader:
    """Tests for the text loader."""

    def test_load(self, tmp_path):
        path = tmp_path / "rfp.final.txt"
        path.write_text("Budget: $10\r\nDue date: May 1", encoding="utf-8")

        loader = TextFileLoader(path)

        assert loader.load() == "Budget: $10\r\nDue date: May 1"
        assert loader.get_document_name() == "rfp.final"

    def test_binary_passed_through(self, tmp_path):
        path = tmp_path / "scan.pdf"
        path.write_bytes(b"%PDF-1.4 \xff\xfe body")

        content = TextFileLoader(path).load()

        assert content.startswith("%PDF-1.4 ")
        assert "�" in content

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TextFileLoader(tmp_path / "missing.txt")

    def test_directory_rejected(self, tmp_path):
        with pytest.raises(ValueError):
            TextFileLoader(tmp_path)
