"""Tests for report assembly and rendering."""

import json

from rich.console import Console

from seo_audit.document import HtmlDocument
from seo_audit.modules.content import ContentAnalyzer, ContentReport, Suggestion
from seo_audit.modules.keywords import analyze_keyword_usage
from seo_audit.reporting import AuditReport, ReportSection, Severity
from seo_audit.reporting.assembler import (
    INSUFFICIENT_TEXT,
    NO_CONTENT_MESSAGE,
    build_content_section,
    build_keyword_section,
)
from seo_audit.reporting.renderers import ConsoleRenderer, render_json


def _messages(section: ReportSection, severity=None) -> list[str]:
    return [f.message for f in section.iter_findings() if severity is None or f.severity == severity]


class TestReportSection:

    def test_recommendations_are_deduplicated(self):
        section = ReportSection("Test")
        section.recommend("Do the thing")
        section.recommend("Do the thing")
        assert section.recommendations == ["Do the thing"]

    def test_counts_include_subsections(self):
        section = ReportSection("Parent")
        section.warn("one")
        section.subsection("Child").warn("two")
        assert section.count(Severity.WARNING) == 2
        assert section.count(Severity.ERROR) == 0


class TestContentSection:

    def test_no_content(self):
        section = build_content_section(ContentReport(language="en", paragraph_count=0))
        assert _messages(section) == [NO_CONTENT_MESSAGE]
        assert section.subsections == []

    def test_sections_for_normal_content(self, sample_document):
        section = build_content_section(ContentAnalyzer().analyze(sample_document))
        assert [s.title for s in section.subsections] == [
            "Content Structure Analysis",
            "Readability Analysis",
            "Content Statistics",
        ]
        messages = _messages(section)
        assert "Paragraph and sentence lengths look good" in messages
        assert "Total Words: 13" in messages
        assert "Total Sentences: 2" in messages
        assert any(m.startswith("Flesch Reading Ease: ") for m in messages)

    def test_non_finite_scores_are_reported_as_insufficient(self):
        report = ContentAnalyzer().analyze(HtmlDocument("<html><body><p>...</p></body></html>"))
        assert not report.metrics.is_computable
        section = build_content_section(report)
        messages = _messages(section)
        assert f"Readability scores: {INSUFFICIENT_TEXT}" in messages
        assert f"Flesch Reading Ease: {INSUFFICIENT_TEXT}" in messages
        assert f"Average Words per Sentence: {INSUFFICIENT_TEXT}" in messages
        assert not any("inf" in m or "nan" in m for m in messages)
        assert section.recommendations == []

    def test_swedish_content_reports_lix(self):
        html = '<html lang="sv"><body><p>Katten satt på mattan.</p></body></html>'
        section = build_content_section(ContentAnalyzer().analyze(HtmlDocument(html)))
        messages = _messages(section)
        assert any(m.startswith("LIX Score: ") for m in messages)
        assert not any(m.startswith("Flesch") for m in messages)
        assert any(m.startswith("Long Words: ") for m in messages)

    def test_long_passages_and_suggestions(self, long_content_html):
        report = ContentAnalyzer().analyze(HtmlDocument(long_content_html))
        paragraph, sentence = report.long_passages
        suggestions = [
            Suggestion(passage=paragraph, text="Rewritten paragraph."),
            Suggestion(passage=sentence, error="quota exceeded"),
        ]
        structure = build_content_section(report, suggestions).subsections[0]
        assert _messages(structure, Severity.WARNING) == [
            "Paragraph 3 is quite long (45 words).",
            f"Long sentence in paragraph 3 (45 words): \"{sentence.text}\"",
            "Could not generate improvement suggestion: quota exceeded",
        ]
        assert _messages(structure, Severity.INFO) == ["Suggested improvement: Rewritten paragraph."]

    def test_deterministic(self, long_content_html):
        report = ContentAnalyzer().analyze(HtmlDocument(long_content_html))
        assert build_content_section(report).to_dict() == build_content_section(report).to_dict()


class TestKeywordSection:

    def test_no_keywords_is_an_error(self, sample_document):
        section = build_keyword_section(analyze_keyword_usage(sample_document, ""))
        assert _messages(section, Severity.ERROR) == ["No keywords provided"]

    def test_placement_findings(self, sample_document):
        section = build_keyword_section(analyze_keyword_usage(sample_document, "energy"))
        placement = section.subsections[0]
        assert placement.title == "1. Keyword: \"energy\""
        messages = _messages(placement)
        assert "Found 4 keyword occurrences" in messages
        assert "Current density: 18.18%" in messages
        assert "Density is too high (possible keyword stuffing)" in messages
        assert "Found in URL" in messages
        assert placement.recommendations == ["Reduce keyword usage to avoid over-optimization"]

    def test_missing_keyword_recommendations(self, sample_document):
        section = build_keyword_section(analyze_keyword_usage(sample_document, "geothermal"))
        placement = section.subsections[0]
        assert "No keyword occurrences found" in _messages(placement, Severity.ERROR)
        assert "Not found in any headings" in _messages(placement, Severity.WARNING)
        assert placement.recommendations == [
            "Add the keyword to your content",
            "Include keyword in title or H1 heading",
            "Add keyword to the first paragraph",
            "Include keyword in meta description",
            "Increase keyword usage naturally throughout the content",
        ]

    def test_competing_keywords(self, sample_document):
        section = build_keyword_section(analyze_keyword_usage(sample_document, "solar energy, solar power"))
        relationship = section.subsections[-1]
        assert relationship.title == "Keyword Relationship Analysis"
        assert "- \"solar energy\" and \"solar power\" are 33.3% similar" in _messages(relationship)
        assert relationship.recommendations == [
            "Consider focusing on more distinct keywords to avoid keyword cannibalization"
        ]

    def test_distinct_keywords(self, sample_document):
        section = build_keyword_section(analyze_keyword_usage(sample_document, "solar, wind"))
        relationship = section.subsections[-1]
        assert _messages(relationship, Severity.SUCCESS) == [
            "Keywords are sufficiently distinct from each other"
        ]


class TestRenderers:

    def _report(self, sample_document) -> AuditReport:
        report = AuditReport(url="https://example.com/guides/renewable-energy")
        report.sections.append(build_content_section(ContentAnalyzer().analyze(sample_document)))
        report.steps["content"] = {"status": "success", "warnings": 0, "errors": 0}
        return report

    def test_render_json(self, sample_document):
        data = json.loads(render_json(self._report(sample_document)))
        assert data["url"] == "https://example.com/guides/renewable-energy"
        assert data["sections"][0]["title"] == "Content Quality & Structure"
        structure = data["sections"][0]["subsections"][0]
        assert structure["findings"][0] == {
            "severity": "success",
            "message": "Paragraph and sentence lengths look good",
        }
        assert data["steps"]["content"]["status"] == "success"

    def test_console_renderer_escapes_markup(self, sample_document):
        console = Console(record=True, width=120)
        report = self._report(sample_document)
        report.sections.append(ReportSection("Title [bold]"))
        report.sections[-1].info("Title: [red]not markup[/red]")
        ConsoleRenderer(console).render(report)
        text = console.export_text()
        assert "Content Quality & Structure" in text
        assert "[red]not markup[/red]" in text
        assert "Audit Steps" in text
