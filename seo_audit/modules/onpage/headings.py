"""Heading structure checks (H1 presence, count and length; H2 length)."""

import re

from seo_audit.document import Document
from seo_audit.reporting.report import ReportSection

H1_LENGTH_MIN = 20
H1_LENGTH_MAX = 70
H2_LENGTH_MAX = 60


def _clean(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def analyze_headings(document: Document) -> ReportSection:
    section = ReportSection("Heading Structure & Hierarchy")
    h1s = document.headings(1)
    if not h1s:
        section.error("No H1 heading found on the page - this is crucial for SEO")
        section.recommend("Add a single descriptive H1 heading")
        return section

    non_empty = [_clean(h) for h in h1s if h.strip()]

    for index, text in enumerate(non_empty, 1):
        if len(text) < H1_LENGTH_MIN:
            section.warn(f"H1 #{index} might be too short ({len(text)} chars): \"{text}\"")
        elif len(text) > H1_LENGTH_MAX:
            section.warn(f"H1 #{index} might be too long ({len(text)} chars): \"{text}\"")

    if len(h1s) > 1:
        section.warn(
            f"Multiple H1 headings found ({len(h1s)}). "
            "Best practice is to have exactly one H1 per page"
        )
        for index, text in enumerate(non_empty, 1):
            section.info(f"H1 #{index}: \"{text}\"")
        section.recommend("Keep exactly one H1 per page")

    if len(h1s) == 1 and len(non_empty) == 1:
        section.success("Single H1 tag found (recommended)")
        section.info(f"H1: \"{non_empty[0]}\" ({len(non_empty[0])} characters)")

    if len(h1s) != len(non_empty):
        section.error(f"Empty H1 tag(s) found ({len(h1s) - len(non_empty)} empty)")

    for index, raw in enumerate(document.headings(2), 1):
        text = _clean(raw)
        if len(text) > H2_LENGTH_MAX:
            section.warn(f"H2 #{index} is too long ({len(text)} chars): \"{text}\"")
    return section
