"""Tests for the JSON file store."""

import json

import pytest

from rfx_studio.models.analysis import AnalysisResult
from rfx_studio.models.documents import DocumentType
from rfx_studio.store.json_store import DocumentNotFoundError, JSONStore, StoreError


class TestDocuments:
    """Tests for document storage."""

    def test_add_and_list_newest_first(self, store):
        first = store.add_document(DocumentType.RFX, "First", "one")
        second = store.add_document("rfx", "Second", "two")

        assert [d.id for d in store.list_documents(DocumentType.RFX)] == [second.id, first.id]
        assert store.list_documents(DocumentType.COMPANY) == []

    def test_id_format(self, store):
        document = store.add_document(DocumentType.COMPANY, "Brochure", "text")

        prefix, stamp = document.id.split("-")
        assert prefix == "company"
        assert stamp.isdigit()

    def test_ids_unique_within_same_millisecond(self, store):
        ids = {store.add_document(DocumentType.RFX, f"Doc {i}", "x").id for i in range(20)}

        assert len(ids) == 20

    def test_get_document(self, store):
        document = store.add_document(DocumentType.RFX, "RFP", "content")

        assert store.get_document(document.id) == document
        assert store.get_document("missing") is None

    def test_rename(self, store):
        document = store.add_document(DocumentType.RFX, "Old", "content")

        updated = store.update_document(document.id, {"name": "New"})

        assert updated.name == "New"
        assert updated.content == "content"
        assert updated.created_at == document.created_at
        assert store.get_document(document.id).name == "New"

    def test_update_unknown_document(self, store):
        with pytest.raises(DocumentNotFoundError):
            store.update_document("rfx-0", {"name": "New"})

    def test_empty_name_rejected(self, store):
        document = store.add_document(DocumentType.RFX, "Old", "content")

        with pytest.raises(StoreError, match="empty"):
            store.update_document(document.id, {"name": ""})
        assert store.get_document(document.id).name == "Old"

    def test_only_name_updatable(self, store):
        document = store.add_document(DocumentType.RFX, "Old", "content")

        with pytest.raises(StoreError, match="content"):
            store.update_document(document.id, {"content": "changed"})
        assert store.get_document(document.id).content == "content"


class TestAnalysesAndVersions:
    """Tests for analysis and version entries."""

    def test_analysis_last_write_wins(self, store):
        store.put_analysis("rfx-1", AnalysisResult(word_count=1))
        store.put_analysis("rfx-1", AnalysisResult(word_count=2))

        assert store.get_analysis("rfx-1").word_count == 2
        assert store.get_analysis("rfx-2") is None
        assert store.get_analysis(None) is None

    def test_versions_newest_first(self, store):
        first = store.add_version("draft", "Version 1", "a")
        second = store.add_version("draft", "Version 2", "b")

        assert [v.id for v in store.list_versions()] == [second.id, first.id]
        assert store.get_version(first.id).content == "a"
        assert store.get_version("draft-0") is None
        assert first.id.startswith("draft-")


class TestPersistence:
    """Tests for loading and saving the store file."""

    def test_missing_file_is_empty(self, store, store_path):
        assert not store_path.exists()
        assert store.list_versions() == []

    def test_survives_restart(self, store, store_path):
        document = store.add_document(DocumentType.RFX, "RFP", "content")
        store.put_analysis(document.id, AnalysisResult(word_count=1, keywords=["cloud"]))
        version = store.add_version(document.id, "Version 1", "draft")
        store.save()

        reloaded = JSONStore(store_path)

        assert reloaded.get_document(document.id) == document
        assert reloaded.get_analysis(document.id).keywords == ("cloud",)
        assert reloaded.get_version(version.id) == version

    def test_camel_case_keys(self, store, store_path):
        store.add_document(DocumentType.COMPANY, "Brochure", "text")
        store.save()

        data = json.loads(store_path.read_text(encoding="utf-8"))

        assert set(data) == {"rfxDocs", "companyDocs", "analysis", "versions"}
        assert "createdAt" in data["companyDocs"][0]
        assert data["companyDocs"][0]["type"] == "company"

    def test_unsaved_changes_not_persisted(self, store, store_path):
        store.add_document(DocumentType.RFX, "RFP", "content")

        assert JSONStore(store_path).list_documents(DocumentType.RFX) == []

    def test_no_temporary_files_left(self, store, store_path):
        store.add_document(DocumentType.RFX, "RFP", "content")
        store.save()
        store.save()

        assert [p.name for p in store_path.parent.iterdir()] == [store_path.name]

    def test_corrupt_file(self, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text("{not json", encoding="utf-8")

        with pytest.raises(StoreError):
            JSONStore(store_path)

    def test_autoload_disabled(self, store, store_path):
        store.add_document(DocumentType.RFX, "RFP", "content")
        store.save()

        lazy = JSONStore(store_path, autoload=False)
        assert lazy.list_documents(DocumentType.RFX) == []

        lazy.load()
        assert len(lazy.list_documents(DocumentType.RFX)) == 1
