"""Keyword placement across the structural zones of a page."""

import logging
import re
from dataclasses import dataclass
from enum import Enum

from seo_audit.document import Document
from seo_audit.modules.keywords.matching import count_occurrences, find_occurrences
from seo_audit.utils.text_processing import count_words, normalize_text

logger = logging.getLogger(__name__)

MIN_OPTIMAL_DENSITY = 0.5
MAX_OPTIMAL_DENSITY = 2.5


class DensityRating(str, Enum):
    TOO_LOW = "too_low"
    OPTIMAL = "optimal"
    TOO_HIGH = "too_high"


def rate_density(density: float) -> DensityRating:
    """Classify a keyword density percentage; 0.5-2.5 inclusive is optimal."""
    if density < MIN_OPTIMAL_DENSITY:
        return DensityRating.TOO_LOW
    if density > MAX_OPTIMAL_DENSITY:
        return DensityRating.TOO_HIGH
    return DensityRating.OPTIMAL


@dataclass(frozen=True)
class HeadingCounts:
    h1: int = 0
    h2: int = 0
    h3: int = 0

    @property
    def total(self) -> int:
        return self.h1 + self.h2 + self.h3


@dataclass(frozen=True)
class KeywordPlacement:
    """Where and how often a keyword shows up on a page."""

    keyword: str
    density: float
    count: int
    in_title: bool
    in_first_paragraph: bool
    in_headings: HeadingCounts
    in_meta_description: bool
    in_url: bool
    occurrences: tuple[str, ...] = ()

    @property
    def density_rating(self) -> DensityRating:
        return rate_density(self.density)


def calculate_density(occurrence_count: int, keyword: str, body_word_count: int) -> float:
    """Percentage of body words taken up by the keyword.

    Not clamped; an empty body yields 0.0.
    """
    if body_word_count == 0:
        return 0.0
    return occurrence_count * count_words(keyword) / body_word_count * 100


def _heading_count(document: Document, level: int, keyword: str) -> int:
    return sum(count_occurrences(text, keyword) for text in document.headings(level))


def keyword_in_url(url_path: str, keyword: str) -> bool:
    """Substring test of the hyphenated keyword against the normalized path.

    Normalization strips hyphens from the path, so hyphenated multi-word
    slugs do not match; single-word keywords do.
    """
    url_keyword = re.sub(r"\s+", "-", normalize_text(keyword))
    if not url_keyword:
        return False
    return url_keyword in normalize_text(url_path)


def analyze_placement(document: Document, keyword: str) -> KeywordPlacement:
    """Build the :class:`KeywordPlacement` for one keyword."""
    body_text = document.body_text
    body_word_count = count_words(normalize_text(body_text))

    occurrences = find_occurrences(body_text, keyword)
    density = calculate_density(len(occurrences), keyword, body_word_count)

    paragraphs = document.paragraphs
    first_paragraph = paragraphs[0] if paragraphs else ""

    placement = KeywordPlacement(
        keyword=keyword,
        density=density,
        count=len(occurrences),
        in_title=count_occurrences(document.title, keyword) > 0,
        in_first_paragraph=count_occurrences(first_paragraph, keyword) > 0,
        in_headings=HeadingCounts(
            h1=_heading_count(document, 1, keyword),
            h2=_heading_count(document, 2, keyword),
            h3=_heading_count(document, 3, keyword),
        ),
        in_meta_description=count_occurrences(document.meta_description or "", keyword) > 0,
        in_url=keyword_in_url(document.url_path, keyword),
        occurrences=tuple(occurrences),
    )
    logger.debug(
        "Keyword %r: count=%d density=%.2f%% body_words=%d",
        keyword, placement.count, density, body_word_count,
    )
    return placement
