"""Single-user drafting session tying the store to the analysis core."""

from datetime import datetime
from pathlib import Path

from rfx_studio.analysis.analyzer import RFxAnalyzer
from rfx_studio.drafting.composer import DraftComposer
from rfx_studio.drafting.snippets import SnippetKind, generate_snippet
from rfx_studio.loaders.text_loader import TextFileLoader
from rfx_studio.models.analysis import AnalysisResult
from rfx_studio.models.documents import Document, DocumentType, DraftVersion
from rfx_studio.store.json_store import JSONStore
from rfx_studio.utils.logging import LoggerMixin
from rfx_studio.workspace.clipboard import BaseClipboard, ClipboardError, MemoryClipboard


def paste_name(now: datetime | None = None) -> str:
    """Name given to documents created from pasted text."""
    return f"Pasted {(now or datetime.now()):%Y-%m-%d %H:%M:%S}"


def append_block(content: str, block: str) -> str:
    """Append ``block`` after a blank line, or return it when content is empty."""
    return f"{content}\n\n{block}" if content else block


class RFxWorkspace(LoggerMixin):
    """The drafting session: selected RFx, draft text and persisted state.

    The workspace is the only writer to its store. Every operation that changes
    stored state ends with an explicit ``save``. The draft being edited lives in
    memory until it is captured with ``save_version``.
    """

    def __init__(
        self,
        store: JSONStore,
        clipboard: BaseClipboard | None = None,
        analyzer: RFxAnalyzer | None = None,
        composer: DraftComposer | None = None,
    ):
        """Initialize the workspace.

        Args:
            store: Persistence for documents, analyses and versions.
            clipboard: Copy/paste collaborator, process-local by default.
            analyzer: Optional analyzer instance.
            composer: Optional draft composer instance.
        """
        self._store = store
        self._clipboard = clipboard or MemoryClipboard()
        self._analyzer = analyzer or RFxAnalyzer()
        self._composer = composer or DraftComposer()
        self.selected_rfx_id: str | None = None
        self.content = ""

    @property
    def store(self) -> JSONStore:
        return self._store

    # Library

    def add_document(self, doc_type: DocumentType | str, name: str, content: str) -> Document:
        document = self._store.add_document(doc_type, name, content)
        self._store.save()
        return document

    def upload_file(self, doc_type: DocumentType | str, path: Path) -> Document:
        """Add a document from a file, named after the file without its extension."""
        loader = TextFileLoader(path)
        return self.add_document(doc_type, loader.get_document_name(), loader.load())

    def add_pasted(self, doc_type: DocumentType | str, text: str) -> Document | None:
        """Add pasted text as a new document; empty text adds nothing."""
        if not text:
            return None
        return self.add_document(doc_type, paste_name(), text)

    def paste_document(self, doc_type: DocumentType | str) -> Document | None:
        """Create a document from the clipboard, ignoring clipboard failures."""
        try:
            text = self._clipboard.read_text()
        except ClipboardError as e:
            self.log_warning("Clipboard read failed", error=str(e))
            return None
        return self.add_pasted(doc_type, text)

    def rename_document(self, doc_id: str, name: str) -> Document:
        document = self._store.update_document(doc_id, {"name": name})
        self._store.save()
        return document

    def list_documents(self, doc_type: DocumentType | str) -> list[Document]:
        return self._store.list_documents(doc_type)

    def search_documents(self, doc_type: DocumentType | str, query: str = "") -> list[Document]:
        """Documents whose name or content contains ``query``, ignoring case."""
        needle = query.lower()
        return [
            document
            for document in self._store.list_documents(doc_type)
            if needle in document.name.lower() or needle in document.content.lower()
        ]

    def copy_document(self, doc_id: str) -> bool:
        document = self._store.get_document(doc_id)
        if document is None:
            return False
        return self._copy(document.content)

    # Analysis

    def select_rfx(self, doc_id: str) -> Document | None:
        """Select an RFx document.

        Unknown ids and company documents leave the selection unchanged.
        """
        document = self._store.get_document(doc_id)
        if document is None:
            self.log_warning("Cannot select unknown document", id=doc_id)
            return None
        if document.type is not DocumentType.RFX:
            self.log_warning(
                "Cannot select non-RFx document", id=doc_id, type=document.type.value
            )
            return None
        self.selected_rfx_id = document.id
        return document

    @property
    def selected_rfx(self) -> Document | None:
        if self.selected_rfx_id is None:
            return None
        return self._store.get_document(self.selected_rfx_id)

    @property
    def current_analysis(self) -> AnalysisResult | None:
        return self._store.get_analysis(self.selected_rfx_id)

    def company_documents(self) -> list[Document]:
        return self._store.list_documents(DocumentType.COMPANY)

    def analyze(self, text: str | None = None) -> AnalysisResult:
        """Analyze text, or the selected RFx, against the company library.

        The result replaces any stored analysis of the selected document. With
        nothing selected it is returned without being stored.
        """
        if text is None:
            selected = self.selected_rfx
            text = selected.content if selected else ""

        result = self._analyzer.analyze(text, self.company_documents())

        if self.selected_rfx_id is not None:
            self._store.put_analysis(self.selected_rfx_id, result)
            self._store.save()
        return result

    # Draft

    def generate_draft(self, analysis: AnalysisResult | None = None) -> str:
        """Replace the draft with the composed template.

        Uses the given analysis, else the selected document's stored one, else
        analyzes the selected document first.
        """
        if analysis is None:
            analysis = self.current_analysis
        if analysis is None:
            analysis = self.analyze()
        self.content = self._composer.compose(analysis, self.company_documents())
        return self.content

    def smart_insert(self, kind: SnippetKind | str) -> str:
        """Append a snippet to the draft and return the snippet.

        Unknown kinds yield an empty snippet and leave the draft unchanged.
        """
        snippet = generate_snippet(kind, self.current_analysis, self.company_documents())
        if snippet:
            self.content = append_block(self.content, snippet)
        return snippet

    def paste_into_draft(self) -> str:
        """Append the clipboard text to the draft; failures leave it unchanged."""
        try:
            text = self._clipboard.read_text()
        except ClipboardError as e:
            self.log_warning("Clipboard read failed", error=str(e))
            return self.content
        self.content = append_block(self.content, text)
        return self.content

    # Versions

    @property
    def versions(self) -> list[DraftVersion]:
        return self._store.list_versions()

    def save_version(self, label: str | None = None) -> DraftVersion:
        """Snapshot the draft; the label defaults to ``Version <n>``."""
        label = label or f"Version {len(self._store.list_versions()) + 1}"
        version = self._store.add_version(self.selected_rfx_id or "draft", label, self.content)
        self._store.save()
        return version

    def restore_version(self, version_id: str) -> bool:
        """Make a saved version the current draft; unknown ids are ignored."""
        version = self._store.get_version(version_id)
        if version is None:
            self.log_warning("Version not found", id=version_id)
            return False
        self.content = version.content
        return True

    def copy_version(self, version_id: str) -> bool:
        version = self._store.get_version(version_id)
        if version is None:
            return False
        return self._copy(version.content)

    def _copy(self, text: str) -> bool:
        try:
            self._clipboard.write_text(text)
        except ClipboardError as e:
            self.log_warning("Clipboard write failed", error=str(e))
            return False
        return True
