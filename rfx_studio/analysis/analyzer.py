"""Aggregates the text heuristics into one analysis result."""

from collections.abc import Iterable

from rfx_studio.analysis.keywords import extract_keywords
from rfx_studio.analysis.patterns import (
    find_budget,
    find_due_date,
    find_evaluation_criteria,
    find_mandatory_requirements,
    infer_goals,
)
from rfx_studio.analysis.references import score_references
from rfx_studio.analysis.text import tokenize
from rfx_studio.models.analysis import AnalysisResult
from rfx_studio.models.documents import Document
from rfx_studio.utils.logging import LoggerMixin


class RFxAnalyzer(LoggerMixin):
    """Heuristic analyzer for RFx documents.

    Stateless: the result depends only on the text and the company documents
    passed in, and nothing is persisted here.
    """

    def analyze(
        self,
        rfx_text: str | None,
        company_docs: Iterable[Document] = (),
    ) -> AnalysisResult:
        """Analyze RFx text against the company document library.

        Args:
            rfx_text: Raw RFx text, may be empty or None.
            company_docs: Reference documents to score.

        Returns:
            The structured analysis.
        """
        tokens = tokenize(rfx_text)
        text = tokens.text
        keywords = extract_keywords(text)

        result = AnalysisResult(
            word_count=tokens.word_count,
            sections=tokens.sections,
            keywords=keywords,
            due_date=find_due_date(text),
            budget=find_budget(text),
            evaluation=find_evaluation_criteria(text),
            mandatory_requirements=find_mandatory_requirements(text),
            goals=infer_goals(text, tokens.sections),
            suggested_company_references=score_references(keywords, company_docs),
        )

        self.log_debug(
            "RFx analyzed",
            words=result.word_count,
            sections=len(result.sections),
            requirements=len(result.mandatory_requirements),
            references=len(result.suggested_company_references),
        )
        return result


def analyze(rfx_text: str | None, company_docs: Iterable[Document] = ()) -> AnalysisResult:
    """Module-level shortcut for ``RFxAnalyzer().analyze``."""
    return RFxAnalyzer().analyze(rfx_text, company_docs)
