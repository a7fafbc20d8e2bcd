"""Turn analyzer records into graded report sections.

Pure formatting: identical records always produce identical findings.
"""

import math
from typing import Iterable

from seo_audit.modules.content.content_analyzer import ContentReport, Suggestion
from seo_audit.modules.content.readability import (
    SCANDINAVIAN_LANGUAGE,
    lix_grade,
    readability_grade,
)
from seo_audit.modules.keywords.placement import DensityRating, KeywordPlacement
from seo_audit.modules.keywords.relationships import RelationshipReport
from seo_audit.modules.keywords.usage import KeywordUsageReport
from seo_audit.reporting.report import ReportSection

INSUFFICIENT_TEXT = "insufficient text to compute"
NO_CONTENT_MESSAGE = "No content to analyze (no paragraph elements found)"


def _score_line(label: str, score: float, grade: str = "") -> str:
    if not math.isfinite(score):
        return f"{label}: {INSUFFICIENT_TEXT}"
    line = f"{label}: {round(score)}"
    return f"{line} ({grade})" if grade else line


def _percent(part: int, ratio: float) -> str:
    if not math.isfinite(ratio):
        return f"{part}"
    return f"{part} ({round(ratio * 100)}%)"


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------

def build_content_section(
    report: ContentReport,
    suggestions: Iterable[Suggestion] = (),
) -> ReportSection:
    """Content structure, readability scores, statistics and recommendations."""
    section = ReportSection("Content Quality & Structure")
    if not report.has_content:
        section.warn(NO_CONTENT_MESSAGE)
        return section

    by_passage = {s.passage: s for s in suggestions}
    structure = section.subsection("Content Structure Analysis")
    for passage in report.long_passages:
        if passage.kind == "paragraph":
            structure.warn(
                f"Paragraph {passage.paragraph_index} is quite long ({passage.word_count} words)."
            )
        else:
            structure.warn(
                f"Long sentence in paragraph {passage.paragraph_index} "
                f"({passage.word_count} words): \"{passage.text}\""
            )
        suggestion = by_passage.get(passage)
        if suggestion is None:
            continue
        if suggestion.error:
            structure.warn(f"Could not generate improvement suggestion: {suggestion.error}")
        elif suggestion.text:
            structure.info(f"Suggested improvement: {suggestion.text}")
    if not report.long_passages:
        structure.success("Paragraph and sentence lengths look good")

    metrics = report.metrics
    scandinavian = report.language == SCANDINAVIAN_LANGUAGE

    readability = section.subsection("Readability Analysis")
    if not metrics.is_computable:
        readability.warn(f"Readability scores: {INSUFFICIENT_TEXT}")
    if scandinavian:
        readability.info(_score_line("LIX Score", metrics.lix, lix_grade(metrics.lix)))
    else:
        readability.info(_score_line(
            "Flesch Reading Ease",
            metrics.flesch_reading_ease,
            readability_grade(metrics.flesch_reading_ease),
        ))
        readability.info(_score_line("Flesch-Kincaid Grade Level", metrics.flesch_kincaid_grade))
        readability.info(_score_line("Gunning Fog Index", metrics.gunning_fog))
        readability.info(_score_line("Coleman-Liau Index", metrics.coleman_liau))

    stats = section.subsection("Content Statistics")
    stats.info(f"Total Words: {metrics.word_count}")
    stats.info(f"Total Sentences: {metrics.sentence_count}")
    if math.isfinite(metrics.avg_words_per_sentence):
        stats.info(f"Average Words per Sentence: {round(metrics.avg_words_per_sentence, 1)}")
    else:
        stats.info(f"Average Words per Sentence: {INSUFFICIENT_TEXT}")
    if scandinavian:
        stats.info("Long Words: " + _percent(metrics.long_word_count, metrics.long_word_ratio))
    else:
        stats.info("Complex Words: " + _percent(metrics.complex_word_count, metrics.complex_word_ratio))

    for recommendation in report.recommendations:
        section.recommend(recommendation)
    return section


# ---------------------------------------------------------------------------
# Keywords
# ---------------------------------------------------------------------------

def build_keyword_section(report: KeywordUsageReport) -> ReportSection:
    """Per-keyword placement findings plus the keyword relationship check."""
    section = ReportSection("Keyword Usage & Distribution")
    if not report.has_keywords:
        section.error("No keywords provided")
        return section

    section.info(f"Analyzing {len(report.keywords)} keywords")
    for index, placement in enumerate(report.placements, 1):
        section.subsections.append(build_placement_section(placement, index))

    if report.relationships is not None:
        section.subsections.append(build_relationship_section(report.relationships))
    return section


def build_placement_section(placement: KeywordPlacement, index: int = 1) -> ReportSection:
    section = ReportSection(f"{index}. Keyword: \"{placement.keyword}\"")

    if placement.count > 0:
        section.success(f"Found {placement.count} keyword occurrences")
        for i, occurrence in enumerate(placement.occurrences, 1):
            section.info(f"{i}. \"{occurrence}\"")
    else:
        section.error("No keyword occurrences found")

    section.info(f"Current density: {placement.density:.2f}%")
    rating = placement.density_rating
    if rating is DensityRating.TOO_LOW:
        section.warn("Density is too low (aim for 0.5% - 2.5%)")
    elif rating is DensityRating.TOO_HIGH:
        section.warn("Density is too high (possible keyword stuffing)")
    else:
        section.success("Density is optimal")

    if placement.in_title:
        section.success("Found in title")
    else:
        section.warn("Missing from title")

    if placement.in_first_paragraph:
        section.success("Found in first paragraph")
    else:
        section.warn("Missing from first paragraph")

    headings = placement.in_headings
    section.info(f"H1 headings: {headings.h1}")
    section.info(f"H2 headings: {headings.h2}")
    section.info(f"H3 headings: {headings.h3}")
    if headings.total == 0:
        section.warn("Not found in any headings")

    if placement.in_meta_description:
        section.success("Found in meta description")
    else:
        section.warn("Missing from meta description")

    if placement.in_url:
        section.success("Found in URL")
    else:
        section.info("Consider including in URL")

    if placement.count == 0:
        section.recommend("Add the keyword to your content")
    if not placement.in_title and not headings.h1:
        section.recommend("Include keyword in title or H1 heading")
    if not placement.in_first_paragraph:
        section.recommend("Add keyword to the first paragraph")
    if not placement.in_meta_description:
        section.recommend("Include keyword in meta description")
    if rating is DensityRating.TOO_LOW:
        section.recommend("Increase keyword usage naturally throughout the content")
    elif rating is DensityRating.TOO_HIGH:
        section.recommend("Reduce keyword usage to avoid over-optimization")

    if not section.recommendations:
        section.success("Content is well-optimized for the focus keyword")
    return section


def build_relationship_section(report: RelationshipReport) -> ReportSection:
    section = ReportSection("Keyword Relationship Analysis")
    competing = report.competing
    if not competing:
        section.success("Keywords are sufficiently distinct from each other")
        return section

    section.warn("Potentially competing keywords found:")
    for pair in competing:
        section.warn(
            f"- \"{pair.keyword_a}\" and \"{pair.keyword_b}\" are {pair.ratio * 100:.1f}% similar"
        )
    section.recommend(
        "Consider focusing on more distinct keywords to avoid keyword cannibalization"
    )
    return section
