"""Heuristic RFx analysis modules."""

from rfx_studio.analysis.analyzer import RFxAnalyzer, analyze
from rfx_studio.analysis.keywords import STOPWORDS, extract_keywords
from rfx_studio.analysis.patterns import (
    find_budget,
    find_due_date,
    find_evaluation_criteria,
    find_mandatory_requirements,
    infer_goals,
)
from rfx_studio.analysis.references import score_references
from rfx_studio.analysis.text import TokenizedText, tokenize

__all__ = [
    "RFxAnalyzer",
    "analyze",
    "STOPWORDS",
    "extract_keywords",
    "find_budget",
    "find_due_date",
    "find_evaluation_criteria",
    "find_mandatory_requirements",
    "infer_goals",
    "score_references",
    "TokenizedText",
    "tokenize",
]
