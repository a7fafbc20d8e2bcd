"""HTTP page fetching for audits."""

import logging
from dataclasses import dataclass

import aiohttp

logger = logging.getLogger(__name__)


@dataclass
class FetchedPage:
    url: str
    html: str = ""
    status: int = 0
    error: str = ""

    @property
    def ok(self) -> bool:
        return bool(self.html) and not self.error


class PageFetcher:
    """Fetch a page with browser-like headers, following redirects.

    Failures never raise; they come back as a :class:`FetchedPage` with an
    empty body, status 0 and the error message.
    """

    _HEADERS = {
        "User-Agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/121.0.0.0 Safari/537.36"
        ),
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.5",
    }

    def __init__(self, timeout: int = 30, user_agent: str = "", verify_ssl: bool = True) -> None:
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._headers = dict(self._HEADERS)
        if user_agent:
            self._headers["User-Agent"] = user_agent
        self._verify_ssl = verify_ssl

    async def fetch(self, url: str) -> FetchedPage:
        try:
            async with aiohttp.ClientSession(
                timeout=self._timeout, headers=self._headers
            ) as session:
                async with session.get(url, allow_redirects=True, ssl=self._verify_ssl) as resp:
                    html = await resp.text(errors="replace")
                    logger.info("Fetched %s: HTTP %d (%d bytes)", url, resp.status, len(html))
                    return FetchedPage(url=str(resp.url), html=html, status=resp.status)
        except Exception as exc:
            logger.error("Failed to fetch %s: %s", url, exc)
            return FetchedPage(url=url, error=str(exc) or exc.__class__.__name__)
