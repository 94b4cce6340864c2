"""Reusable text blocks inserted into the draft on demand."""

from collections.abc import Iterable
from enum import Enum

from rfx_studio.drafting.composer import reference_name
from rfx_studio.models.analysis import AnalysisResult
from rfx_studio.models.documents import Document


class SnippetKind(str, Enum):
    """Snippets offered by the editor toolbar."""

    EXECUTIVE = "executive"
    COMPLIANCE = "compliance"
    QUALIFICATIONS = "qualifications"


NO_REQUIREMENTS = "No mandatory requirements detected."
NO_QUALIFICATIONS = "Insert qualifications and past performance here."
EXECUTIVE_SUMMARY = (
    "We understand your objectives and will deliver outcomes aligned to your success "
    "metrics. Our approach mitigates risk, accelerates value, and ensures full compliance."
)


def compliance_snippet(analysis: AnalysisResult | None) -> str:
    requirements = analysis.mandatory_requirements if analysis else ()
    blocks = [
        f"Req {index}: {requirement}\nResponse: Compliant. Evidence: [Insert reference]."
        for index, requirement in enumerate(requirements, start=1)
    ]
    return "\n\n".join(blocks) or NO_REQUIREMENTS


def qualifications_snippet(
    analysis: AnalysisResult | None, company_docs: Iterable[Document]
) -> str:
    references = analysis.suggested_company_references if analysis else ()
    company_docs = list(company_docs)
    blocks = [
        f"Reference {index}: {reference_name(reference, company_docs)}\n"
        f"Relevance: {reference.score} keyword matches."
        for index, reference in enumerate(references, start=1)
    ]
    return "\n\n".join(blocks) or NO_QUALIFICATIONS


def generate_snippet(
    kind: SnippetKind | str,
    analysis: AnalysisResult | None,
    company_docs: Iterable[Document] = (),
) -> str:
    """Render the snippet of the given kind.

    Unknown kinds produce an empty string rather than an error.
    """
    try:
        kind = SnippetKind(kind)
    except ValueError:
        return ""

    if kind is SnippetKind.COMPLIANCE:
        return compliance_snippet(analysis)
    if kind is SnippetKind.QUALIFICATIONS:
        return qualifications_snippet(analysis, company_docs)
    return EXECUTIVE_SUMMARY
