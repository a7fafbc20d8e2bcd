"""On-page module -- title, meta description, heading and image checks."""

from seo_audit.modules.onpage.headings import analyze_headings
from seo_audit.modules.onpage.images import analyze_images
from seo_audit.modules.onpage.title import (
    analyze_meta_description,
    analyze_title,
    parse_title_format,
)

__all__ = [
    "analyze_headings",
    "analyze_images",
    "analyze_meta_description",
    "analyze_title",
    "parse_title_format",
]
