"""Read-only page document consumed by every analyzer.

Analyzers depend only on the :class:`Document` protocol.  :class:`HtmlDocument`
implements it over BeautifulSoup so the rest of the package never issues
selector queries of its own.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Protocol
from urllib.parse import urlparse

from bs4 import BeautifulSoup, Comment

DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class ImageInfo:
    """An ``<img>`` element's SEO-relevant attributes.

    ``alt`` is ``None`` when the attribute is absent and ``""`` when present
    but empty; the two are reported differently.
    """

    src: str
    alt: Optional[str] = None
    width: int = 0
    height: int = 0


class Document(Protocol):
    """Narrow capability interface over a parsed page."""

    @property
    def body_text(self) -> str: ...

    @property
    def title(self) -> str: ...

    @property
    def meta_description(self) -> Optional[str]: ...

    @property
    def url_path(self) -> str: ...

    @property
    def lang(self) -> Optional[str]: ...

    @property
    def paragraphs(self) -> list[str]: ...

    @property
    def images(self) -> list[ImageInfo]: ...

    def headings(self, level: int) -> list[str]: ...


def language_hint(lang: Optional[str]) -> str:
    """Derive the analysis language from an ``lang`` attribute.

    Lowercased and truncated at the first ``-``; ``"en"`` when absent.

    Examples:
        >>> language_hint("sv-SE")
        'sv'
        >>> language_hint(None)
        'en'
    """
    if not lang:
        return DEFAULT_LANGUAGE
    return lang.strip().lower().split("-")[0] or DEFAULT_LANGUAGE


def _parse_dimension(value: Optional[str]) -> int:
    match = re.match(r"\s*(\d+)", value or "")
    return int(match.group(1)) if match else 0


class HtmlDocument:
    """:class:`Document` implementation backed by BeautifulSoup.

    Usage::

        doc = HtmlDocument(html, url="https://example.com/solar-energy")
        doc.headings(2)
    """

    def __init__(self, html: str, url: str = "") -> None:
        self._soup = BeautifulSoup(html or "", "html.parser")
        self._url = url
        self._body_text: Optional[str] = None

    @property
    def body_text(self) -> str:
        """Text content of the body; scripts, styles and comments are excluded."""
        if self._body_text is None:
            soup = BeautifulSoup(str(self._soup), "html.parser")
            for tag in soup(["script", "style", "noscript", "template"]):
                tag.decompose()
            for comment in soup.find_all(string=lambda t: isinstance(t, Comment)):
                comment.extract()
            root = soup.body or soup
            self._body_text = root.get_text()
        return self._body_text

    @property
    def title(self) -> str:
        tag = self._soup.find("title")
        return tag.get_text() if tag else ""

    @property
    def meta_description(self) -> Optional[str]:
        tag = self._soup.find("meta", attrs={"name": "description"})
        if tag is None:
            return None
        return tag.get("content")

    @property
    def url_path(self) -> str:
        return urlparse(self._url).path if self._url else ""

    @property
    def lang(self) -> Optional[str]:
        html_tag = self._soup.find("html")
        if html_tag is None:
            return None
        return html_tag.get("lang")

    @property
    def paragraphs(self) -> list[str]:
        return [p.get_text() for p in self._soup.find_all("p")]

    @property
    def images(self) -> list[ImageInfo]:
        images = []
        for img in self._soup.find_all("img"):
            images.append(ImageInfo(
                src=img.get("src", ""),
                alt=img.get("alt"),
                width=_parse_dimension(img.get("width")),
                height=_parse_dimension(img.get("height")),
            ))
        return images

    def headings(self, level: int) -> list[str]:
        if not 1 <= level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {level}")
        return [h.get_text() for h in self._soup.find_all(f"h{level}")]
