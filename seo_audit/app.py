"""Application wiring: configuration, environment and audit collaborators."""

import logging
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)


class SEOAudit:
    """Central application class that wires the audit workflow from config.

    Usage::

        app = SEOAudit()
        app.initialize()
        report = await app.get_workflow().run_audit("https://example.com")
        status = app.get_status()
    """

    def __init__(
        self,
        config_path: str = "config/settings.yaml",
        env_path: str = ".env",
    ):
        self._config_path = config_path
        self._env_path = env_path
        self.config: dict[str, Any] = {}
        self._initialized = False
        self._llm_client = None
        self._text_improver = None
        self._page_fetcher = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Load environment and configuration once."""
        if self._initialized:
            return

        env_file = Path(self._env_path)
        if env_file.exists():
            load_dotenv(env_file)
            logger.info("Loaded environment from %s", self._env_path)

        self.config = self._load_config()

        log_level = self.config.get("logging", {}).get("level")
        if log_level and not logging.getLogger().isEnabledFor(logging.DEBUG):
            logging.getLogger("seo_audit").setLevel(str(log_level).upper())

        self._initialized = True
        logger.info("SEOAudit initialised.")

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            self.initialize()

    def _load_config(self) -> dict[str, Any]:
        """Load the YAML configuration file."""
        config_file = Path(self._config_path)
        if not config_file.exists():
            logger.warning("Config file not found: %s; using defaults.", self._config_path)
            return {}
        with open(config_file, "r", encoding="utf-8") as fh:
            config = yaml.safe_load(fh) or {}
        logger.info("Configuration loaded from %s", self._config_path)
        return config

    @property
    def config_found(self) -> bool:
        return Path(self._config_path).exists()

    # ------------------------------------------------------------------
    # Collaborators
    # ------------------------------------------------------------------

    def _get_llm_client(self):
        """Lazy-initialise and return the LLM client."""
        if self._llm_client is None:
            from seo_audit.integrations.llm_client import LLMClient
            llm_cfg = self.config.get("llm", {})
            primary = llm_cfg.get("primary", {})
            fallback = llm_cfg.get("fallback", {})
            cache_cfg = llm_cfg.get("cache", {})
            budget_cfg = llm_cfg.get("budget", {})
            rl_cfg = self.config.get("rate_limits", {})

            self._llm_client = LLMClient(
                openai_model=primary.get("model", "gpt-4o-mini"),
                gemini_model=fallback.get("model", "gemini-2.0-flash"),
                max_tokens=primary.get("max_tokens", 512),
                temperature=primary.get("temperature", 0.7),
                timeout=primary.get("timeout", 60),
                openai_rpm=rl_cfg.get("openai", {}).get("requests_per_minute", 60),
                gemini_rpm=rl_cfg.get("gemini", {}).get("requests_per_minute", 15),
                cache_enabled=cache_cfg.get("enabled", True),
                cache_ttl_hours=cache_cfg.get("ttl_hours", 24),
                cache_max_size=cache_cfg.get("max_size", 1000),
                max_monthly_budget=budget_cfg.get("max_monthly_usd", 10.0),
                budget_warning_pct=budget_cfg.get("warning_threshold_pct", 80.0),
            )
        return self._llm_client

    def _get_text_improver(self):
        if self._text_improver is None:
            from seo_audit.integrations.text_improver import TextImprover
            self._text_improver = TextImprover(self._get_llm_client())
        return self._text_improver

    def _get_page_fetcher(self):
        if self._page_fetcher is None:
            from seo_audit.integrations.page_fetcher import PageFetcher
            http_cfg = self.config.get("http", {})
            self._page_fetcher = PageFetcher(
                timeout=http_cfg.get("timeout", 30),
                user_agent=http_cfg.get("user_agent", ""),
                verify_ssl=http_cfg.get("verify_ssl", True),
            )
        return self._page_fetcher

    def get_workflow(self):
        """Build an :class:`AuditWorkflow` using the configured thresholds."""
        self._ensure_initialized()
        from seo_audit.modules.content.content_analyzer import (
            LONG_PARAGRAPH_WORDS,
            LONG_SENTENCE_WORDS,
            ContentAnalyzer,
        )
        from seo_audit.workflows import AuditWorkflow

        analysis_cfg = self.config.get("analysis", {})
        analyzer = ContentAnalyzer(
            long_paragraph_words=int(analysis_cfg.get("long_paragraph_words", LONG_PARAGRAPH_WORDS)),
            long_sentence_words=int(analysis_cfg.get("long_sentence_words", LONG_SENTENCE_WORDS)),
        )
        return AuditWorkflow(
            fetcher=self._get_page_fetcher(),
            improver=self._get_text_improver(),
            content_analyzer=analyzer,
        )

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def get_status(self) -> dict[str, dict[str, Any]]:
        """Return health status of configuration, LLM providers and HTTP settings."""
        self._ensure_initialized()
        status: dict[str, dict[str, Any]] = {}

        if self.config_found:
            status["configuration"] = {"status": "ok", "details": self._config_path}
        else:
            status["configuration"] = {"status": "warning", "details": "not found, using defaults"}

        usage = self._get_llm_client().get_usage_summary()
        providers = usage["providers"]
        status["llm"] = {
            "status": "ok" if providers else "warning",
            "details": f"providers: {', '.join(providers) or 'none configured'}",
            "usage": usage,
        }

        http_cfg = self.config.get("http", {})
        status["http"] = {
            "status": "ok",
            "details": f"timeout {http_cfg.get('timeout', 30)}s",
        }

        analysis_cfg = self.config.get("analysis", {})
        status["analysis"] = {
            "status": "ok",
            "details": (
                f"long paragraph > {analysis_cfg.get('long_paragraph_words', 40)} words, "
                f"long sentence > {analysis_cfg.get('long_sentence_words', 20)} words"
            ),
        }
        return status
