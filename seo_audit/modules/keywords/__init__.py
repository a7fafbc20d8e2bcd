"""Keyword module -- occurrence matching, placement, density and overlap analysis."""

from seo_audit.modules.keywords.matching import count_occurrences, find_occurrences
from seo_audit.modules.keywords.placement import (
    DensityRating,
    HeadingCounts,
    KeywordPlacement,
    analyze_placement,
    rate_density,
)
from seo_audit.modules.keywords.relationships import (
    KeywordSimilarity,
    RelationshipReport,
    analyze_relationships,
    keyword_similarity,
)
from seo_audit.modules.keywords.usage import (
    KeywordUsageReport,
    analyze_keyword_usage,
    parse_keywords,
)

__all__ = [
    "count_occurrences",
    "find_occurrences",
    "DensityRating",
    "HeadingCounts",
    "KeywordPlacement",
    "analyze_placement",
    "rate_density",
    "KeywordSimilarity",
    "RelationshipReport",
    "analyze_relationships",
    "keyword_similarity",
    "KeywordUsageReport",
    "analyze_keyword_usage",
    "parse_keywords",
]
