"""Pytest configuration and fixtures."""

import os
import sys
import tempfile
from pathlib import Path

import pytest

# Set test environment variables before importing modules
os.environ["ENVIRONMENT"] = "test"
os.environ["DATA_DIRECTORY"] = tempfile.mkdtemp(prefix="rfx-studio-test-")

from rfx_studio.models.documents import Document, DocumentType
from rfx_studio.store.json_store import JSONStore
from rfx_studio.utils.logging import setup_logging
from rfx_studio.workspace.clipboard import BaseClipboard, ClipboardError, MemoryClipboard
from rfx_studio.workspace.session import RFxWorkspace


class DeniedClipboard(BaseClipboard):
    """Clipboard that refuses every access."""

    def read_text(self) -> str:
        raise ClipboardError("Read permission denied")

    def write_text(self, text: str) -> None:
        raise ClipboardError("Write permission denied")


@pytest.fixture(autouse=True)
def configure_logging():
    """Route logs to the real stderr; CLI tests rebind it to captured streams."""
    setup_logging("WARNING", stream=sys.__stderr__)


@pytest.fixture
def sample_rfx_content() -> str:
    """Sample RFx document content for testing."""
    return "\n".join(
        [
            "REQUEST FOR PROPOSAL",
            "City Network Modernization",
            "",
            "Objectives:",
            "Reduce operating cost. Improve network security; Expand cloud capacity",
            "",
            "Project Due Date: March 15, 2024 (5 PM EST)",
            "Budget: $500,000 (firm fixed price)",
            "",
            "Requirements",
            "Vendor must provide 24/7 support. The system shall be available 99.9% of the time.",
            "All data must be encrypted at rest.",
            "",
            "Evaluation Criteria:",
            "1. Technical approach",
            "2. Past performance",
            "3. Price",
        ]
    )


@pytest.fixture
def company_docs() -> list[Document]:
    """Company documents: one strongly relevant, one weakly, one unrelated."""
    return [
        Document(
            id="company-1",
            name="Cloud Security Case Study",
            content="Cloud migration for a city. Cloud security hardening. Cloud network support.",
            type=DocumentType.COMPANY,
        ),
        Document(
            id="company-2",
            name="Network Services Brochure",
            content="Managed network operations.",
            type=DocumentType.COMPANY,
        ),
        Document(
            id="company-3",
            name="Catering Menu",
            content="Sandwiches and salads.",
            type=DocumentType.COMPANY,
        ),
    ]


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Location of a throwaway store file."""
    return tmp_path / "store" / "rfx_studio.json"


@pytest.fixture
def store(store_path: Path) -> JSONStore:
    """Empty store backed by a temporary file."""
    return JSONStore(store_path)


@pytest.fixture
def clipboard() -> MemoryClipboard:
    return MemoryClipboard()


@pytest.fixture
def workspace(store: JSONStore, clipboard: MemoryClipboard) -> RFxWorkspace:
    """Workspace over the temporary store."""
    return RFxWorkspace(store=store, clipboard=clipboard)


@pytest.fixture
def denied_clipboard() -> DeniedClipboard:
    return DeniedClipboard()
