"""Tests for the analysis aggregator."""

from rfx_studio.analysis.analyzer import RFxAnalyzer, analyze
from rfx_studio.analysis.keywords import STOPWORDS


class TestAnalyze:
    """Tests for the combined analysis."""

    def test_empty_input(self):
        result = analyze("", [])

        assert result.word_count == 0
        assert result.sections == {}
        assert result.keywords == ()
        assert result.due_date is None
        assert result.budget is None
        assert result.evaluation == ()
        assert result.mandatory_requirements == ()
        assert result.goals == ()
        assert result.suggested_company_references == ()

    def test_none_and_whitespace_input(self):
        assert analyze(None) == analyze("")
        assert analyze("  \r\n\r\n  ").word_count == 0

    def test_full_analysis(self, sample_rfx_content, company_docs):
        result = analyze(sample_rfx_content, company_docs)

        assert result.word_count == len(sample_rfx_content.split())
        assert len(result.sections) == 5
        assert result.due_date == "March 15, 2024 "
        assert result.budget == "$500,000 "
        assert result.evaluation == ("Technical approach", "Past performance", "Price")
        assert len(result.mandatory_requirements) == 3
        assert result.goals[0] == "Reduce operating cost"
        assert 0 < len(result.keywords) <= 20
        assert not STOPWORDS.intersection(result.keywords)

    def test_references_from_keywords(self, sample_rfx_content, company_docs):
        result = analyze(sample_rfx_content, company_docs)
        ids = [r.document_id for r in result.suggested_company_references]

        assert ids[0] == "company-1"
        assert "company-3" not in ids
        scores = [r.score for r in result.suggested_company_references]
        assert scores == sorted(scores, reverse=True)

    def test_idempotent(self, sample_rfx_content, company_docs):
        analyzer = RFxAnalyzer()

        first = analyzer.analyze(sample_rfx_content, company_docs)
        second = analyzer.analyze(sample_rfx_content, company_docs)

        assert first == second
        assert first.model_dump() == second.model_dump()

    def test_carriage_returns_ignored(self, sample_rfx_content, company_docs):
        windows_text = sample_rfx_content.replace("\n", "\r\n")

        assert analyze(windows_text, company_docs) == analyze(sample_rfx_content, company_docs)

    def test_malformed_text_does_not_raise(self):
        result = analyze("\x00\x01 ::: --- ••• 1. 2. 3. due date budget evaluation criteria")

        assert result.word_count > 0
