"""Local JSON-file store for documents, analyses and draft versions."""

import os
import tempfile
import time
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic.alias_generators import to_camel

from rfx_studio.config import get_settings
from rfx_studio.models.analysis import AnalysisResult
from rfx_studio.models.documents import Document, DocumentType, DraftVersion
from rfx_studio.utils.logging import LoggerMixin

# Fields a caller may change on an existing document.
UPDATABLE_FIELDS = frozenset({"name"})


class StoreError(Exception):
    """Raised when the persistence file cannot be read or a write is invalid."""


class DocumentNotFoundError(StoreError):
    """Raised when updating a document id that does not exist."""


class StoreSnapshot(BaseModel):
    """On-disk layout of the store."""

    rfx_docs: list[Document] = Field(default_factory=list)
    company_docs: list[Document] = Field(default_factory=list)
    analysis: dict[str, AnalysisResult] = Field(default_factory=dict)
    versions: list[DraftVersion] = Field(default_factory=list)

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class JSONStore(LoggerMixin):
    """Key-value store persisted to a single JSON file.

    Reads and writes operate on the in-memory snapshot; ``save`` replaces the
    file atomically. Documents and versions are kept newest first. Entries are
    always replaced whole, never patched in place.
    """

    def __init__(self, path: Path | None = None, autoload: bool = True):
        """Initialize the store.

        Args:
            path: Persistence file, defaults to the configured store path.
            autoload: Load an existing file immediately.
        """
        self._path = Path(path) if path else get_settings().store_path
        self._snapshot = StoreSnapshot()
        if autoload:
            self.load()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> None:
        """Replace the in-memory snapshot with the file contents, if any."""
        if not self._path.exists():
            self.log_debug("No store file yet", path=str(self._path))
            self._snapshot = StoreSnapshot()
            return
        try:
            self._snapshot = StoreSnapshot.model_validate_json(
                self._path.read_text(encoding="utf-8")
            )
        except (OSError, ValidationError) as e:
            self.log_error("Failed to load store", path=str(self._path), error=str(e))
            raise StoreError(f"Cannot load store from {self._path}: {e}") from e

        self.log_info(
            "Store loaded",
            path=str(self._path),
            documents=len(self._snapshot.rfx_docs) + len(self._snapshot.company_docs),
            versions=len(self._snapshot.versions),
        )

    def save(self) -> None:
        """Write the snapshot to disk via a temporary file and ``os.replace``."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = self._snapshot.model_dump_json(by_alias=True, indent=2)

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self._path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        self.log_debug("Store saved", path=str(self._path))

    # Documents

    def _documents(self, doc_type: DocumentType) -> list[Document]:
        if DocumentType(doc_type) is DocumentType.RFX:
            return self._snapshot.rfx_docs
        return self._snapshot.company_docs

    def list_documents(self, doc_type: DocumentType | str) -> list[Document]:
        """Documents of one type, newest first."""
        return list(self._documents(DocumentType(doc_type)))

    def get_document(self, doc_id: str) -> Document | None:
        for document in (*self._snapshot.rfx_docs, *self._snapshot.company_docs):
            if document.id == doc_id:
                return document
        return None

    def add_document(self, doc_type: DocumentType | str, name: str, content: str) -> Document:
        """Create a document and prepend it to its list."""
        doc_type = DocumentType(doc_type)
        document = Document(
            id=self._unique_id(doc_type.value, self._document_ids()),
            name=name,
            content=content,
            type=doc_type,
        )
        self._documents(doc_type).insert(0, document)
        self.log_info("Document added", id=document.id, type=doc_type.value, chars=len(content))
        return document

    def update_document(self, doc_id: str, fields: dict[str, Any]) -> Document:
        """Replace a document with a copy carrying the updated fields.

        Raises:
            DocumentNotFoundError: No document has ``doc_id``.
            StoreError: A field other than the updatable ones was given, or
                the name is empty.
        """
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise StoreError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        if "name" in fields and not fields["name"]:
            raise StoreError("Document name cannot be empty")

        for documents in (self._snapshot.rfx_docs, self._snapshot.company_docs):
            for index, document in enumerate(documents):
                if document.id == doc_id:
                    updated = document.model_copy(update=fields)
                    documents[index] = updated
                    self.log_info("Document updated", id=doc_id, fields=sorted(fields))
                    return updated

        raise DocumentNotFoundError(f"Document not found: {doc_id}")

    # Analyses

    def put_analysis(self, doc_id: str, analysis: AnalysisResult) -> None:
        """Store an analysis under a document id, replacing any previous one."""
        self._snapshot.analysis[doc_id] = analysis

    def get_analysis(self, doc_id: str | None) -> AnalysisResult | None:
        if doc_id is None:
            return None
        return self._snapshot.analysis.get(doc_id)

    # Versions

    def add_version(self, prefix: str, label: str, content: str) -> DraftVersion:
        """Create an immutable draft version and prepend it."""
        version = DraftVersion(
            id=self._unique_id(prefix, {v.id for v in self._snapshot.versions}),
            label=label,
            content=content,
        )
        self._snapshot.versions.insert(0, version)
        self.log_info("Version saved", id=version.id, label=label)
        return version

    def list_versions(self) -> list[DraftVersion]:
        """Saved versions, newest first."""
        return list(self._snapshot.versions)

    def get_version(self, version_id: str) -> DraftVersion | None:
        for version in self._snapshot.versions:
            if version.id == version_id:
                return version
        return None

    def _document_ids(self) -> set[str]:
        return {d.id for d in (*self._snapshot.rfx_docs, *self._snapshot.company_docs)}

    @staticmethod
    def _unique_id(prefix: str, taken: set[str]) -> str:
        """``<prefix>-<epoch ms>``, bumping the millisecond part until unused."""
        stamp = time.time_ns() // 1_000_000
        while f"{prefix}-{stamp}" in taken:
            stamp += 1
        return f"{prefix}-{stamp}"
