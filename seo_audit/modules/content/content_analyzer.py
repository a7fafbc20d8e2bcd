"""Content structure and readability analysis.

Flags overly long paragraphs and sentences, computes readability metrics over
the page's paragraph text, and optionally asks an advisory text improver for
rewrites of the flagged passages.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from seo_audit.document import Document, language_hint
from seo_audit.modules.content.readability import (
    ReadabilityMetrics,
    compute_metrics,
    readability_recommendations,
)
from seo_audit.utils.text_processing import split_sentences, split_words

logger = logging.getLogger(__name__)

LONG_PARAGRAPH_WORDS = 40
LONG_SENTENCE_WORDS = 20

PARAGRAPH_READING_LEVEL = "grade 8"
SENTENCE_MAX_LENGTH = 150


@dataclass(frozen=True)
class LongPassage:
    """A paragraph or sentence over the length limit."""

    kind: str  # "paragraph" or "sentence"
    paragraph_index: int  # 1-based
    word_count: int
    text: str


@dataclass(frozen=True)
class Suggestion:
    """Outcome of one advisory rewrite request."""

    passage: LongPassage
    text: Optional[str] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class ContentReport:
    language: str
    paragraph_count: int
    long_passages: tuple[LongPassage, ...] = ()
    metrics: Optional[ReadabilityMetrics] = None
    recommendations: tuple[str, ...] = ()

    @property
    def has_content(self) -> bool:
        return self.metrics is not None


class ContentAnalyzer:
    """Paragraph-level structure checks plus whole-content readability.

    Usage::

        analyzer = ContentAnalyzer()
        report = analyzer.analyze(document)
        suggestions = await analyzer.suggest_improvements(report, improver)
    """

    def __init__(
        self,
        long_paragraph_words: int = LONG_PARAGRAPH_WORDS,
        long_sentence_words: int = LONG_SENTENCE_WORDS,
    ) -> None:
        self._long_paragraph_words = long_paragraph_words
        self._long_sentence_words = long_sentence_words

    def analyze(self, document: Document) -> ContentReport:
        language = language_hint(document.lang)
        paragraphs = document.paragraphs
        if not paragraphs:
            logger.warning("No paragraph content found to analyze")
            return ContentReport(language=language, paragraph_count=0)

        passages: list[LongPassage] = []
        texts: list[str] = []
        for index, raw in enumerate(paragraphs, 1):
            text = raw.strip()
            if not text:
                continue
            texts.append(text)
            passages.extend(self._long_passages(index, text))

        metrics = compute_metrics(" ".join(texts), language)
        logger.info(
            "Content analysis: %d paragraphs, %d words, %d long passages",
            len(paragraphs), metrics.word_count, len(passages),
        )
        return ContentReport(
            language=language,
            paragraph_count=len(paragraphs),
            long_passages=tuple(passages),
            metrics=metrics,
            recommendations=tuple(readability_recommendations(metrics, language)),
        )

    def _long_passages(self, index: int, text: str) -> list[LongPassage]:
        passages = []
        word_count = len(split_words(text))
        if word_count > self._long_paragraph_words:
            passages.append(LongPassage("paragraph", index, word_count, text))
        for sentence in split_sentences(text):
            sentence_words = len(split_words(sentence))
            if sentence_words > self._long_sentence_words:
                passages.append(LongPassage("sentence", index, sentence_words, sentence))
        return passages

    # ------------------------------------------------------------------
    # Advisory rewrites
    # ------------------------------------------------------------------

    async def suggest_improvements(
        self,
        report: ContentReport,
        improver: Any,
    ) -> list[Suggestion]:
        """Ask ``improver`` for a rewrite of every long passage.

        ``improver`` needs an async ``improve(text, kind, max_length=None,
        target_reading_level=None)`` method.  Failures are recorded on the
        suggestion and never raised.
        """
        suggestions: list[Suggestion] = []
        for passage in report.long_passages:
            try:
                if passage.kind == "paragraph":
                    improved = await improver.improve(
                        passage.text, "paragraph",
                        target_reading_level=PARAGRAPH_READING_LEVEL,
                    )
                else:
                    improved = await improver.improve(
                        passage.text, "sentence", max_length=SENTENCE_MAX_LENGTH,
                    )
                suggestions.append(Suggestion(passage=passage, text=improved or None))
            except Exception as exc:
                logger.warning("Could not generate improvement suggestion: %s", exc)
                suggestions.append(Suggestion(passage=passage, error=str(exc) or "Unknown error"))
        return suggestions


def analyze_content(document: Document) -> ContentReport:
    """Run :class:`ContentAnalyzer` with default thresholds."""
    return ContentAnalyzer().analyze(document)
