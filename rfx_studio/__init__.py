"""RFx Studio - heuristic RFx analysis and proposal drafting."""

__version__ = "1.0.0"

from rfx_studio.analysis.analyzer import RFxAnalyzer, analyze
from rfx_studio.drafting.composer import compose_draft
from rfx_studio.drafting.snippets import SnippetKind, generate_snippet
from rfx_studio.models.analysis import AnalysisResult
from rfx_studio.models.documents import Document, DocumentType, DraftVersion

__all__ = [
    "RFxAnalyzer",
    "analyze",
    "compose_draft",
    "SnippetKind",
    "generate_snippet",
    "AnalysisResult",
    "Document",
    "DocumentType",
    "DraftVersion",
]
