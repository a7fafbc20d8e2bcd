"""Audit workflow connecting fetching, analyzers and report assembly."""

import logging
import time
from typing import Any, Optional

from seo_audit.document import HtmlDocument
from seo_audit.reporting.report import AuditReport, ReportSection, Severity

logger = logging.getLogger(__name__)

# Execution order is fixed regardless of the order analyzers are requested in.
ANALYZER_CHOICES = ("title", "meta", "keywords", "headings", "images", "content")
DEFAULT_ANALYZERS = ("title", "meta", "headings", "images", "content")

_DESCRIPTIONS = {
    "title": "Page title",
    "meta": "Meta description",
    "keywords": "Keyword usage",
    "headings": "Heading structure",
    "images": "Image optimization",
    "content": "Content quality",
}


def resolve_analyzers(
    analyzers: Optional[list[str]] = None,
    keywords_input: str = "",
) -> list[str]:
    """Normalise an analyzer selection into execution order.

    With no explicit selection the defaults run, plus ``keywords`` when
    keywords were supplied.  Unknown names raise ``ValueError``.
    """
    if not analyzers:
        selected = set(DEFAULT_ANALYZERS)
        if keywords_input.strip():
            selected.add("keywords")
    else:
        selected = {name.strip().lower() for name in analyzers if name.strip()}
        unknown = selected.difference(ANALYZER_CHOICES)
        if unknown:
            raise ValueError(
                f"Unknown analyzer(s): {', '.join(sorted(unknown))}. "
                f"Choose from: {', '.join(ANALYZER_CHOICES)}"
            )
    return [name for name in ANALYZER_CHOICES if name in selected]


class AuditWorkflow:
    """Run the selected analyzers over one page and collect an AuditReport.

    Every analyzer step is wrapped in try/except so that one failing
    analyzer never aborts the others.  Step outcomes are recorded on
    ``report.steps`` as ``{"status": "success"|"error"|"skipped", ...}``.

    Usage::

        workflow = AuditWorkflow(improver=TextImprover(llm))
        report = await workflow.run_audit("https://example.com", keywords_input="seo, audit")
    """

    def __init__(
        self,
        fetcher=None,
        improver=None,
        content_analyzer=None,
    ) -> None:
        self._fetcher = fetcher
        self._improver = improver
        self._content_analyzer = content_analyzer
        logger.debug("AuditWorkflow initialized.")

    # ------------------------------------------------------------------
    # Lazy-loaded collaborators
    # ------------------------------------------------------------------

    def _get_fetcher(self):
        if self._fetcher is None:
            from seo_audit.integrations.page_fetcher import PageFetcher
            self._fetcher = PageFetcher()
            logger.debug("PageFetcher created.")
        return self._fetcher

    def _get_content_analyzer(self):
        if self._content_analyzer is None:
            from seo_audit.modules.content.content_analyzer import ContentAnalyzer
            self._content_analyzer = ContentAnalyzer()
            logger.debug("ContentAnalyzer created.")
        return self._content_analyzer

    # ------------------------------------------------------------------
    # Logging helper
    # ------------------------------------------------------------------

    @staticmethod
    def _log_step(step: int, total: int, description: str, status: str = "running") -> None:
        msg = f"[audit] Step {step}/{total}: {description}: {status}"
        if status == "error":
            logger.error(msg)
        else:
            logger.info(msg)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    async def run_audit(
        self,
        url: str,
        analyzers: Optional[list[str]] = None,
        keywords_input: str = "",
        suggest: bool = True,
    ) -> AuditReport:
        """Fetch ``url`` and audit the returned HTML.

        A failed fetch is recorded as an error step and on ``report.error``;
        no analyzer runs in that case.
        """
        selected = resolve_analyzers(analyzers, keywords_input)
        total = len(selected) + 1
        started = time.time()
        report = AuditReport(url=url)
        logger.info("Starting audit of %s with analyzers: %s", url, ", ".join(selected))

        self._log_step(1, total, "Fetch page")
        try:
            page = await self._get_fetcher().fetch(url)
        except Exception as exc:
            logger.exception("Fetch failed: %s", exc)
            report.steps["fetch"] = {"status": "error", "error": str(exc)}
            report.error = f"Failed to fetch {url}: {exc}"
            self._log_step(1, total, "Fetch page", "error")
            report.elapsed_seconds = round(time.time() - started, 2)
            return report

        if not page.html:
            reason = page.error or f"empty response (HTTP {page.status})"
            report.steps["fetch"] = {"status": "error", "error": reason, "http_status": page.status}
            report.error = f"Failed to fetch {url}: {reason}"
            self._log_step(1, total, "Fetch page", "error")
            report.elapsed_seconds = round(time.time() - started, 2)
            return report

        report.steps["fetch"] = {"status": "success", "http_status": page.status}
        self._log_step(1, total, "Fetch page", "done")

        await self._run_analyzers(report, HtmlDocument(page.html, url=page.url or url),
                                  selected, keywords_input, suggest, offset=1, total=total)
        report.elapsed_seconds = round(time.time() - started, 2)
        return report

    async def audit_html(
        self,
        html: str,
        url: str = "",
        analyzers: Optional[list[str]] = None,
        keywords_input: str = "",
        suggest: bool = True,
    ) -> AuditReport:
        """Audit already-fetched HTML; ``url`` only feeds the URL keyword check."""
        selected = resolve_analyzers(analyzers, keywords_input)
        started = time.time()
        report = AuditReport(url=url)
        await self._run_analyzers(report, HtmlDocument(html, url=url), selected,
                                  keywords_input, suggest, offset=0, total=len(selected))
        report.elapsed_seconds = round(time.time() - started, 2)
        return report

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    async def _run_analyzers(
        self,
        report: AuditReport,
        document: HtmlDocument,
        selected: list[str],
        keywords_input: str,
        suggest: bool,
        offset: int,
        total: int,
    ) -> None:
        for index, name in enumerate(selected, offset + 1):
            description = _DESCRIPTIONS[name]
            self._log_step(index, total, description)
            try:
                section, extra = await self._run_step(name, document, keywords_input, suggest)
                report.sections.append(section)
                report.steps[name] = {
                    "status": "success",
                    "warnings": section.count(Severity.WARNING),
                    "errors": section.count(Severity.ERROR),
                    **extra,
                }
                self._log_step(index, total, description, "done")
            except Exception as exc:
                logger.exception("%s analysis failed: %s", description, exc)
                report.steps[name] = {"status": "error", "error": str(exc)}
                self._log_step(index, total, description, "error")

    async def _run_step(
        self,
        name: str,
        document: HtmlDocument,
        keywords_input: str,
        suggest: bool,
    ) -> tuple[ReportSection, dict[str, Any]]:
        if name == "title":
            from seo_audit.modules.onpage import analyze_title
            return analyze_title(document.title), {}
        if name == "meta":
            from seo_audit.modules.onpage import analyze_meta_description
            return analyze_meta_description(document.meta_description), {}
        if name == "keywords":
            from seo_audit.modules.keywords import analyze_keyword_usage
            from seo_audit.reporting.assembler import build_keyword_section
            usage = analyze_keyword_usage(document, keywords_input)
            return build_keyword_section(usage), {"keywords": len(usage.keywords)}
        if name == "headings":
            from seo_audit.modules.onpage import analyze_headings
            return analyze_headings(document), {}
        if name == "images":
            from seo_audit.modules.onpage import analyze_images
            return analyze_images(document), {}
        if name == "content":
            return await self._content_step(document, suggest)
        raise ValueError(f"Unknown analyzer: {name}")

    async def _content_step(
        self,
        document: HtmlDocument,
        suggest: bool,
    ) -> tuple[ReportSection, dict[str, Any]]:
        from seo_audit.reporting.assembler import build_content_section

        analyzer = self._get_content_analyzer()
        content = analyzer.analyze(document)
        suggestions = []
        extra: dict[str, Any] = {"long_passages": len(content.long_passages)}
        if content.long_passages and not suggest:
            extra["suggestions"] = "disabled"
        elif content.long_passages:
            if self._improver is None or not self._improver.available:
                logger.info("No LLM provider configured; skipping rewrite suggestions")
                extra["suggestions"] = "unavailable"
            else:
                suggestions = await analyzer.suggest_improvements(content, self._improver)
                extra["suggestions"] = sum(1 for s in suggestions if s.text)
        return build_content_section(content, suggestions), extra
