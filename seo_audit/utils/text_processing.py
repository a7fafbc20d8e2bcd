"""Text processing utilities for readability and keyword analysis."""

import math
import re

_PUNCTUATION_RE = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")
_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_SILENT_SUFFIX_RE = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
_VOWEL_GROUP_RE = re.compile(r"[aeiouy]+")


def normalize_text(text: str) -> str:
    """Lowercase text, drop punctuation and collapse whitespace.

    Only used for matching and grouping; never for display.

    Examples:
        >>> normalize_text("  Clean, Renewable   Energy! ")
        'clean renewable energy'
    """
    text = _PUNCTUATION_RE.sub("", text.lower())
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()


def split_words(text: str) -> list[str]:
    """Split text into whitespace-delimited, non-empty tokens."""
    return text.split()


def count_words(text: str) -> int:
    """Count words in text.

    Args:
        text: Input text.

    Returns:
        Word count.
    """
    return len(split_words(text))


def split_sentences(text: str) -> list[str]:
    """Split text on runs of sentence terminators, keeping non-empty segments."""
    return [s.strip() for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]


def count_word_syllables(word: str) -> int:
    """Estimate syllables in a single word.

    A cheap regex heuristic: strip a silent trailing ``e``/``es``/``ed``,
    drop a leading ``y`` and count vowel groups.  Always at least 1.

    Examples:
        >>> count_word_syllables("cat")
        1
        >>> count_word_syllables("banana")
        3
    """
    word = re.sub(r"[^a-z]", "", word.lower())
    if len(word) <= 3:
        return 1
    word = _SILENT_SUFFIX_RE.sub("", word)
    word = re.sub(r"^y", "", word)
    return max(1, len(_VOWEL_GROUP_RE.findall(word)))


def count_text_syllables(text: str) -> int:
    """Sum per-word syllable estimates over whitespace tokens."""
    return sum(count_word_syllables(w) for w in split_words(text))


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide like IEEE floats do instead of raising on a zero denominator.

    Returns ``nan`` for ``0/0`` and a signed ``inf`` for ``x/0`` so callers
    can detect degenerate inputs with :func:`math.isfinite`.
    """
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator
