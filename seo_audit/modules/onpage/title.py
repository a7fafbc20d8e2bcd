"""Title tag and meta description checks."""

from dataclasses import dataclass, field
from typing import Optional

from seo_audit.reporting.report import ReportSection

TITLE_SEPARATORS = ["|", "-", "–", "—", ":"]
BRAND_POSITION = "end"

TITLE_LENGTH_MIN = 50
TITLE_LENGTH_MAX = 60
META_DESCRIPTION_LENGTH_MIN = 120
META_DESCRIPTION_LENGTH_MAX = 155


@dataclass(frozen=True)
class TitleFormat:
    separator: Optional[str] = None
    segments: list[str] = field(default_factory=list)

    @property
    def has_separator(self) -> bool:
        return self.separator is not None


def parse_title_format(title: str) -> TitleFormat:
    """Split a title on the first known separator it contains.

    Examples:
        >>> parse_title_format("Solar Panels - Buying Guide | Acme").segments
        ['Solar Panels - Buying Guide', 'Acme']
    """
    separator = next((sep for sep in TITLE_SEPARATORS if sep in title), None)
    if separator is None:
        return TitleFormat(segments=[title])
    return TitleFormat(
        separator=separator,
        segments=[s.strip() for s in title.split(separator)],
    )


def _length_finding(
    section: ReportSection, label: str, length: int, minimum: int, maximum: int
) -> None:
    recommended = f"Recommended: {minimum}-{maximum} characters"
    if length < minimum:
        section.warn(f"{label} length ({length} chars) is too short. {recommended}")
    elif length > maximum:
        section.warn(f"{label} length ({length} chars) is too long. {recommended}")
    else:
        section.success(f"{label} length ({length} chars) is optimal")


def analyze_title(title: str) -> ReportSection:
    section = ReportSection("Page Title & Branding")
    title = title or ""
    if not title.strip():
        section.error("Title tag is missing!")
        section.recommend("Add a descriptive <title> tag")
        return section

    _length_finding(section, "Title", len(title), TITLE_LENGTH_MIN, TITLE_LENGTH_MAX)
    section.info(f"Title: {title}")

    fmt = parse_title_format(title)
    if not fmt.has_separator:
        section.warn(
            "Title doesn't use a separator. Consider format: "
            "\"Primary Keyword - Secondary Keyword | Brand\""
        )
        return section

    section.info(f"Title separator used: \"{fmt.separator}\"")
    if len(fmt.segments) > 3:
        section.warn("Title has too many segments. Consider limiting to 2-3 parts")

    brand = fmt.segments[-1] if BRAND_POSITION == "end" else fmt.segments[0]
    if len(brand) < 3:
        section.warn(
            f"Brand segment seems too short. Make sure brand name is included at the {BRAND_POSITION}"
        )
    section.info("Title segments:")
    for index, segment in enumerate(fmt.segments, 1):
        section.info(f"   {index}. \"{segment}\"")
    return section


def analyze_meta_description(description: Optional[str]) -> ReportSection:
    section = ReportSection("Meta Description Length & Content")
    description = description or ""
    if not description.strip():
        section.error("Meta description is missing!")
        section.recommend("Add a meta description summarising the page")
        return section

    _length_finding(
        section, "Meta description", len(description),
        META_DESCRIPTION_LENGTH_MIN, META_DESCRIPTION_LENGTH_MAX,
    )
    section.info(f"Meta Description: {description}")
    return section
