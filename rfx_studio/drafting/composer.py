"""Renders the response draft template from an analysis result."""

from collections.abc import Iterable, Sequence

from rfx_studio.models.analysis import AnalysisResult, CompanyReference
from rfx_studio.models.documents import Document
from rfx_studio.utils.logging import LoggerMixin

SECTION_HEADINGS = (
    "Executive Summary",
    "Our Solution",
    "Scope and Approach",
    "Differentiators",
    "Compliance Matrix",
    "Relevant References",
    "Value and Pricing",
)

SCOPE_KEYWORDS = 6
COMPLIANCE_ITEMS = 8

GOALS_FALLBACK = (
    "We understand your goals and desired outcomes and will align our solution accordingly."
)
SOLUTION_BULLETS = (
    "Tailored to your requirements and constraints",
    "Built on proven methods and accelerators",
    "Compliant with all mandatory requirements",
)
DIFFERENTIATOR_BULLETS = (
    "Relevant qualifications and past performance",
    "Experienced staff with similar engagements",
)
REFERENCES_FALLBACK = "- Company qualifications and past performance available upon request"
PRICING_FALLBACK = (
    "We will provide a competitive, transparent pricing structure aligned to value delivered."
)


def reference_name(reference: CompanyReference, company_docs: Sequence[Document]) -> str:
    """Current name of a referenced document, else the name stored at analysis time."""
    for document in company_docs:
        if document.id == reference.document_id:
            return document.name
    return reference.document_name or reference.document_id


def _bullets(items: Iterable[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def _numbered(items: Iterable[str]) -> str:
    return "\n".join(f"{index}. {item}" for index, item in enumerate(items, start=1))


class DraftComposer(LoggerMixin):
    """Fills the fixed seven-section response template."""

    def compose(
        self,
        analysis: AnalysisResult | None,
        company_docs: Iterable[Document] = (),
    ) -> str:
        """Compose the draft text.

        Args:
            analysis: Analysis of the RFx document; None yields an empty draft.
            company_docs: Company documents used to resolve reference names.

        Returns:
            The draft, sections separated by blank lines.
        """
        if analysis is None:
            return ""
        company_docs = list(company_docs)

        if analysis.goals:
            summary = "We understand your goals include: \n" + _bullets(analysis.goals)
        else:
            summary = GOALS_FALLBACK

        due = f" ({analysis.due_date.strip()})" if analysis.due_date else ""
        scope = (
            "- We will address the following key areas: "
            + ", ".join(analysis.keywords[:SCOPE_KEYWORDS])
            + f"\n- Timeline aligned to your due date{due}"
        )

        compliance = _numbered(analysis.mandatory_requirements[:COMPLIANCE_ITEMS])

        references = _numbered(
            reference_name(reference, company_docs)
            for reference in analysis.suggested_company_references
        )

        if analysis.budget:
            pricing = f"We will align to the stated budget of {analysis.budget.strip()}."
        else:
            pricing = PRICING_FALLBACK

        bodies = (
            summary,
            _bullets(SOLUTION_BULLETS),
            scope,
            _bullets(DIFFERENTIATOR_BULLETS),
            compliance,
            references or REFERENCES_FALLBACK,
            pricing,
        )

        self.log_debug(
            "Draft composed",
            goals=len(analysis.goals),
            requirements=len(analysis.mandatory_requirements),
        )
        # "Executive Summary" is followed by a blank line, the other headings are not.
        blocks = [f"{SECTION_HEADINGS[0]}\n\n{bodies[0]}"]
        blocks.extend(
            f"{heading}\n{body}" for heading, body in zip(SECTION_HEADINGS[1:], bodies[1:])
        )
        return "\n\n".join(blocks) + "\n\n"


def compose_draft(analysis: AnalysisResult | None, company_docs: Iterable[Document] = ()) -> str:
    """Module-level shortcut for ``DraftComposer().compose``."""
    return DraftComposer().compose(analysis, company_docs)
