"""Content module -- readability scoring and content structure analysis."""

from seo_audit.modules.content.content_analyzer import (
    ContentAnalyzer,
    ContentReport,
    LongPassage,
    Suggestion,
    analyze_content,
)
from seo_audit.modules.content.readability import (
    ReadabilityMetrics,
    compute_metrics,
    lix_grade,
    readability_grade,
    readability_recommendations,
)

__all__ = [
    "ContentAnalyzer",
    "ContentReport",
    "LongPassage",
    "Suggestion",
    "analyze_content",
    "ReadabilityMetrics",
    "compute_metrics",
    "lix_grade",
    "readability_grade",
    "readability_recommendations",
]
