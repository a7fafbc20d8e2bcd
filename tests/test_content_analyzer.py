"""Tests for the content analyzer and its advisory rewrite suggestions."""

from unittest.mock import AsyncMock, call

import pytest

from seo_audit.document import HtmlDocument, language_hint
from seo_audit.modules.content import ContentAnalyzer, analyze_content

LONG_PARAGRAPH = " ".join(["word"] * 45) + "."


class TestLanguageHint:

    @pytest.mark.parametrize("lang,expected", [
        (None, "en"),
        ("", "en"),
        ("sv-SE", "sv"),
        ("SV", "sv"),
        ("en-GB", "en"),
    ])
    def test_language_hint(self, lang, expected):
        assert language_hint(lang) == expected


class TestContentAnalyzer:

    def test_no_paragraphs_means_no_content(self):
        report = analyze_content(HtmlDocument("<html><body><div>Text only in a div.</div></body></html>"))
        assert report.paragraph_count == 0
        assert report.metrics is None
        assert not report.has_content
        assert report.long_passages == ()

    def test_long_passages_keep_paragraph_index(self, long_content_html):
        report = ContentAnalyzer().analyze(HtmlDocument(long_content_html))
        assert report.paragraph_count == 3
        assert [(p.kind, p.paragraph_index, p.word_count) for p in report.long_passages] == [
            ("paragraph", 3, 45),
            ("sentence", 3, 45),
        ]
        assert report.long_passages[0].text == LONG_PARAGRAPH

    def test_metrics_over_joined_non_empty_paragraphs(self, long_content_html):
        report = ContentAnalyzer().analyze(HtmlDocument(long_content_html))
        assert report.metrics.word_count == 47
        assert report.metrics.sentence_count == 2

    def test_short_content_has_no_long_passages(self, sample_document):
        report = ContentAnalyzer().analyze(sample_document)
        assert report.language == "en"
        assert report.long_passages == ()
        assert report.metrics.word_count == 13

    def test_thresholds_are_configurable(self):
        html = "<html><body><p>One two three four five six.</p></body></html>"
        report = ContentAnalyzer(long_paragraph_words=5, long_sentence_words=5).analyze(HtmlDocument(html))
        assert [p.kind for p in report.long_passages] == ["paragraph", "sentence"]

    def test_swedish_page_uses_swedish_rules(self):
        html = '<html lang="sv-SE"><body><p>' + " ".join(["katt"] * 18) + ".</p></body></html>"
        report = ContentAnalyzer().analyze(HtmlDocument(html))
        assert report.language == "sv"
        assert report.recommendations == (
            "Consider shortening your sentences (aim for 15 words per sentence for Swedish text)",
        )

    def test_analysis_is_pure(self, sample_document):
        analyzer = ContentAnalyzer()
        assert analyzer.analyze(sample_document) == analyzer.analyze(sample_document)


class TestSuggestImprovements:

    @pytest.mark.asyncio
    async def test_suggestions_use_passage_kind_constraints(self, long_content_html, mock_improver):
        analyzer = ContentAnalyzer()
        report = analyzer.analyze(HtmlDocument(long_content_html))
        suggestions = await analyzer.suggest_improvements(report, mock_improver)

        assert [s.text for s in suggestions] == ["A shorter, clearer rewrite."] * 2
        assert all(s.error is None for s in suggestions)
        sentence = report.long_passages[1].text
        assert mock_improver.improve.await_args_list == [
            call(LONG_PARAGRAPH, "paragraph", target_reading_level="grade 8"),
            call(sentence, "sentence", max_length=150),
        ]

    @pytest.mark.asyncio
    async def test_failures_are_recorded_not_raised(self, long_content_html, mock_improver):
        mock_improver.improve = AsyncMock(side_effect=RuntimeError("quota exceeded"))
        analyzer = ContentAnalyzer()
        report = analyzer.analyze(HtmlDocument(long_content_html))

        suggestions = await analyzer.suggest_improvements(report, mock_improver)

        assert [s.error for s in suggestions] == ["quota exceeded", "quota exceeded"]
        assert all(s.text is None for s in suggestions)
        # The analysis itself is untouched.
        assert len(report.long_passages) == 2

    @pytest.mark.asyncio
    async def test_blank_rewrite_becomes_none(self, long_content_html, mock_improver):
        mock_improver.improve = AsyncMock(return_value=None)
        analyzer = ContentAnalyzer()
        report = analyzer.analyze(HtmlDocument(long_content_html))
        suggestions = await analyzer.suggest_improvements(report, mock_improver)
        assert [s.text for s in suggestions] == [None, None]
        assert [s.error for s in suggestions] == [None, None]
