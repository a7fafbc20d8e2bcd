"""Readability metrics: Flesch, Flesch-Kincaid, Gunning Fog, Coleman-Liau and LIX.

All counts come from the heuristics in :mod:`seo_audit.utils.text_processing`.
Degenerate input (no words or no sentences) is not an error here: the scores
come out non-finite and the report layer decides how to show them.
"""

import math
import re
from dataclasses import dataclass

from seo_audit.utils.text_processing import (
    count_text_syllables,
    count_word_syllables,
    safe_divide,
    split_sentences,
    split_words,
)

SCANDINAVIAN_LANGUAGE = "sv"

# Long-word thresholds differ on purpose: LIX counts words over 6 characters,
# the reported long-word statistic counts words over 15.
LIX_LONG_WORD_LENGTH = 6
LONG_WORD_LENGTH = 15
COMPLEX_WORD_SYLLABLES = 2

_READABILITY_GRADES = [
    (90, "Very Easy (5th grade)"),
    (80, "Easy (6th grade)"),
    (70, "Fairly Easy (7th grade)"),
    (60, "Standard (8th-9th grade)"),
    (50, "Fairly Difficult (10th-12th grade)"),
    (30, "Difficult (College)"),
]

_LIX_GRADES = [
    (30, "Very Easy"),
    (40, "Easy"),
    (50, "Moderate"),
    (60, "Difficult"),
]


@dataclass(frozen=True)
class ReadabilityMetrics:
    """Word/sentence statistics and readability scores for one text."""

    word_count: int
    sentence_count: int
    syllable_count: int
    complex_word_count: int
    long_word_count: int
    avg_words_per_sentence: float
    avg_syllables_per_word: float
    avg_chars_per_word: float
    flesch_reading_ease: float
    flesch_kincaid_grade: float
    gunning_fog: float
    coleman_liau: float
    lix: float

    @property
    def complex_word_ratio(self) -> float:
        return safe_divide(self.complex_word_count, self.word_count)

    @property
    def long_word_ratio(self) -> float:
        return safe_divide(self.long_word_count, self.word_count)

    @property
    def is_computable(self) -> bool:
        """True when every score is a finite number."""
        return all(math.isfinite(score) for score in (
            self.flesch_reading_ease,
            self.flesch_kincaid_grade,
            self.gunning_fog,
            self.coleman_liau,
            self.lix,
        ))


def calculate_lix(text: str) -> float:
    """LIX = words/sentences + 100 * (words longer than 6 chars)/words."""
    words = split_words(text)
    sentences = split_sentences(text)
    long_words = sum(1 for w in words if len(w) > LIX_LONG_WORD_LENGTH)
    return safe_divide(len(words), len(sentences)) + safe_divide(long_words * 100, len(words))


def compute_metrics(text: str, language: str = "en") -> ReadabilityMetrics:
    """Compute every readability statistic for ``text``.

    ``language`` is accepted for symmetry with the recommendation rules; the
    numbers themselves are language independent.
    """
    words = split_words(text)
    sentences = split_sentences(text)
    total_words = len(words)
    total_sentences = len(sentences)
    total_syllables = count_text_syllables(text)
    complex_words = sum(1 for w in words if count_word_syllables(w) > COMPLEX_WORD_SYLLABLES)
    long_words = sum(1 for w in words if len(w) > LONG_WORD_LENGTH)
    chars = len(re.sub(r"\s", "", text))

    words_per_sentence = safe_divide(total_words, total_sentences)
    syllables_per_word = safe_divide(total_syllables, total_words)
    chars_per_word = safe_divide(chars, total_words)
    complex_ratio = safe_divide(complex_words, total_words)
    sentences_per_word = safe_divide(total_sentences, total_words)

    return ReadabilityMetrics(
        word_count=total_words,
        sentence_count=total_sentences,
        syllable_count=total_syllables,
        complex_word_count=complex_words,
        long_word_count=long_words,
        avg_words_per_sentence=words_per_sentence,
        avg_syllables_per_word=syllables_per_word,
        avg_chars_per_word=chars_per_word,
        flesch_reading_ease=206.835 - 1.015 * words_per_sentence - 84.6 * syllables_per_word,
        flesch_kincaid_grade=0.39 * words_per_sentence + 11.8 * syllables_per_word - 15.59,
        gunning_fog=0.4 * (words_per_sentence + 100 * complex_ratio),
        coleman_liau=0.0588 * (chars_per_word * 100) - 0.296 * (sentences_per_word * 100) - 15.8,
        lix=calculate_lix(text),
    )


def readability_grade(score: float) -> str:
    """Map a Flesch Reading Ease score to its audience label."""
    for threshold, label in _READABILITY_GRADES:
        if score >= threshold:
            return label
    return "Very Difficult (College graduate)"


def lix_grade(score: float) -> str:
    """Map a LIX score to its difficulty label."""
    for threshold, label in _LIX_GRADES:
        if score < threshold:
            return label
    return "Very Difficult"


def readability_recommendations(metrics: ReadabilityMetrics, language: str) -> list[str]:
    """Recommendations for the metrics, using the language's own rules.

    Metrics with non-finite scores produce no recommendations.
    """
    recommendations: list[str] = []
    if not metrics.is_computable:
        return recommendations

    if language == SCANDINAVIAN_LANGUAGE:
        if metrics.avg_words_per_sentence > 15:
            recommendations.append(
                "Consider shortening your sentences "
                "(aim for 15 words per sentence for Swedish text)"
            )
        if metrics.lix > 50:
            recommendations.append(
                "Text might be too difficult for general audience (aim for LIX below 50)"
            )
        return recommendations

    if metrics.avg_words_per_sentence > 20:
        recommendations.append(
            "Consider shortening your sentences (aim for 15-20 words per sentence)"
        )
    if metrics.complex_word_ratio > 0.2:
        recommendations.append("Try using simpler words (too many complex words)")
    if metrics.flesch_reading_ease < 60:
        recommendations.append(
            "Content might be too difficult for general audience (aim for score above 60)"
        )
    return recommendations
