"""Data models for RFx Studio."""

from rfx_studio.models.analysis import AnalysisResult, CompanyReference
from rfx_studio.models.documents import Document, DocumentType, DraftVersion
from rfx_studio.models.requests import (
    AddDocumentRequest,
    AnalyzeRequest,
    DraftContent,
    DraftRequest,
    HealthResponse,
    RenameDocumentRequest,
    SaveVersionRequest,
    SnippetRequest,
    SnippetResponse,
)

__all__ = [
    "AnalysisResult",
    "CompanyReference",
    "Document",
    "DocumentType",
    "DraftVersion",
    "AddDocumentRequest",
    "AnalyzeRequest",
    "DraftContent",
    "DraftRequest",
    "HealthResponse",
    "RenameDocumentRequest",
    "SaveVersionRequest",
    "SnippetRequest",
    "SnippetResponse",
]
