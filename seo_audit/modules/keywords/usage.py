"""Keyword usage analysis for a comma-separated keyword list."""

import logging
from dataclasses import dataclass
from typing import Optional

from seo_audit.document import Document
from seo_audit.modules.keywords.placement import KeywordPlacement, analyze_placement
from seo_audit.modules.keywords.relationships import RelationshipReport, analyze_relationships

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeywordUsageReport:
    keywords: tuple[str, ...]
    placements: tuple[KeywordPlacement, ...]
    relationships: Optional[RelationshipReport] = None

    @property
    def has_keywords(self) -> bool:
        return bool(self.keywords)


def parse_keywords(keywords_input: str) -> list[str]:
    """Split on commas, trim, and drop empty entries.

    Examples:
        >>> parse_keywords(" solar energy, , solar power ")
        ['solar energy', 'solar power']
    """
    return [k.strip() for k in (keywords_input or "").split(",") if k.strip()]


def analyze_keyword_usage(document: Document, keywords_input: str) -> KeywordUsageReport:
    """Analyze each keyword in input order, plus their overlap when there are several."""
    keywords = parse_keywords(keywords_input)
    if not keywords:
        logger.warning("No keywords provided")
        return KeywordUsageReport(keywords=(), placements=())

    logger.info("Analyzing %d keywords", len(keywords))
    placements = tuple(analyze_placement(document, keyword) for keyword in keywords)
    relationships = analyze_relationships(keywords) if len(keywords) > 1 else None
    return KeywordUsageReport(
        keywords=tuple(keywords),
        placements=placements,
        relationships=relationships,
    )
