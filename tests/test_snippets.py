"""Tests for reusable draft snippets."""

from rfx_studio.drafting.snippets import (
    EXECUTIVE_SUMMARY,
    NO_QUALIFICATIONS,
    NO_REQUIREMENTS,
    SnippetKind,
    generate_snippet,
)
from rfx_studio.models.analysis import AnalysisResult, CompanyReference
from rfx_studio.models.documents import Document, DocumentType


class TestComplianceSnippet:
    """Tests for the compliance snippet."""

    def test_requirement_blocks(self):
        analysis = AnalysisResult(mandatory_requirements=["Vendor must comply", "It shall run"])

        snippet = generate_snippet(SnippetKind.COMPLIANCE, analysis)

        assert snippet == (
            "Req 1: Vendor must comply\nResponse: Compliant. Evidence: [Insert reference]."
            "\n\n"
            "Req 2: It shall run\nResponse: Compliant. Evidence: [Insert reference]."
        )

    def test_no_requirements(self):
        assert generate_snippet("compliance", AnalysisResult()) == NO_REQUIREMENTS

    def test_no_analysis(self):
        assert generate_snippet("compliance", None) == NO_REQUIREMENTS


class TestQualificationsSnippet:
    """Tests for the qualifications snippet."""

    def test_reference_blocks(self):
        analysis = AnalysisResult(
            suggested_company_references=[
                CompanyReference(document_id="c1", document_name="Case Study", score=4)
            ]
        )
        docs = [Document(id="c1", name="Case Study v2", content="", type=DocumentType.COMPANY)]

        snippet = generate_snippet(SnippetKind.QUALIFICATIONS, analysis, docs)

        assert snippet == "Reference 1: Case Study v2\nRelevance: 4 keyword matches."

    def test_no_references(self):
        assert generate_snippet("qualifications", AnalysisResult()) == NO_QUALIFICATIONS


class TestExecutiveSnippet:
    """Tests for the executive summary snippet."""

    def test_fixed_text(self):
        assert generate_snippet("executive", None) == EXECUTIVE_SUMMARY
        assert EXECUTIVE_SUMMARY.startswith("We understand your objectives")


class TestUnknownKind:
    """Unknown snippet kinds are a no-op."""

    def test_returns_empty(self):
        assert generate_snippet("limerick", AnalysisResult()) == ""
