"""Tests for the LLM client, text improver and page fetcher."""

from unittest.mock import AsyncMock

import pytest

from seo_audit.integrations.llm_client import LLMClient, ResponseCache, UsageStats
from seo_audit.integrations.page_fetcher import FetchedPage, PageFetcher
from seo_audit.integrations.text_improver import TextImprover, build_prompt


class TestBuildPrompt:

    def test_sentence_prompt(self):
        prompt = build_prompt("Some very long sentence.", "sentence", max_length=150)
        assert prompt.startswith('Improve this sentence: "Some very long sentence."')
        assert "Make it clearer and easier to read" in prompt
        assert prompt.endswith("Keep it under 150 characters.")

    def test_paragraph_prompt(self):
        prompt = build_prompt("A paragraph.", "paragraph", target_reading_level="grade 8")
        assert prompt.startswith('Improve this paragraph: "A paragraph."')
        assert prompt.endswith("Target a grade 8 reading level.")
        assert "characters" not in prompt

    def test_title_prompt(self):
        assert "(50-60 characters)" in build_prompt("Solar", "title")

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            build_prompt("x", "haiku")


class TestTextImprover:

    @pytest.mark.asyncio
    async def test_improve_strips_quotes(self, mock_llm_client):
        mock_llm_client.generate_text = AsyncMock(return_value='  "A clearer sentence."  ')
        improver = TextImprover(mock_llm_client)
        assert improver.available
        assert await improver.improve("Sentence.", "sentence", max_length=150) == "A clearer sentence."
        prompt = mock_llm_client.generate_text.await_args.args[0]
        assert prompt.startswith("Improve this sentence:")

    @pytest.mark.asyncio
    async def test_blank_response_is_none(self, mock_llm_client):
        mock_llm_client.generate_text = AsyncMock(return_value="   ")
        assert await TextImprover(mock_llm_client).improve("Sentence.", "sentence") is None

    @pytest.mark.asyncio
    async def test_errors_propagate(self, mock_llm_client):
        mock_llm_client.generate_text = AsyncMock(side_effect=RuntimeError("rate limited"))
        with pytest.raises(RuntimeError, match="rate limited"):
            await TextImprover(mock_llm_client).improve("Sentence.", "sentence")


class TestLLMClient:

    @pytest.fixture()
    def unconfigured(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        return LLMClient()

    def test_not_configured_without_keys(self, unconfigured):
        assert not unconfigured.is_configured
        assert unconfigured.providers == []

    @pytest.mark.asyncio
    async def test_generate_without_provider_raises(self, unconfigured):
        with pytest.raises(RuntimeError, match="No LLM provider configured"):
            await unconfigured.generate_text("Improve this sentence: x")

    def test_usage_summary(self, unconfigured):
        summary = unconfigured.get_usage_summary()
        assert summary["total_requests"] == 0
        assert summary["cached_responses"] == 0


class TestResponseCache:

    def test_set_and_get(self):
        cache = ResponseCache()
        cache.set("prompt", "model", "value", temp=0.7)
        assert cache.get("prompt", "model", temp=0.7) == "value"
        assert cache.get("prompt", "model", temp=0.2) is None
        assert len(cache) == 1

    def test_expired_entries_are_dropped(self):
        cache = ResponseCache(ttl_hours=0)
        cache.set("prompt", "model", "value")
        assert cache.get("prompt", "model") is None
        assert len(cache) == 0

    def test_evicts_oldest_when_full(self):
        cache = ResponseCache(max_size=1)
        cache.set("first", "model", "1")
        cache.set("second", "model", "2")
        assert cache.get("first", "model") is None
        assert cache.get("second", "model") == "2"


class TestUsageStats:

    def test_add_usage(self):
        stats = UsageStats()
        cost = stats.add_usage(1000, 1000)
        assert cost == pytest.approx(0.00075)
        assert stats.total_requests == 1
        assert stats.monthly_cost_usd == pytest.approx(0.00075)


class TestPageFetcher:

    def test_fetched_page_ok(self):
        assert FetchedPage(url="u", html="<html></html>", status=200).ok
        assert not FetchedPage(url="u").ok

    @pytest.mark.asyncio
    async def test_connection_failure_returns_empty_page(self):
        page = await PageFetcher(timeout=5).fetch("http://127.0.0.1:9/")
        assert page.html == ""
        assert page.status == 0
        assert page.error
        assert not page.ok
