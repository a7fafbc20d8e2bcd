"""Shared pytest fixtures for SEO Audit tests."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Ensure project root is on sys.path so 'seo_audit' is importable.
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)


SAMPLE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <title>Renewable Energy Guide - Solar and Wind Power | GreenCo</title>
  <meta name="description" content="Learn how renewable energy from solar panels and wind turbines can lower your bills, cut emissions and keep the lights on at home.">
  <script>var energy = "energy energy energy";</script>
  <style>.energy { color: green; }</style>
</head>
<body>
  <h1>Renewable Energy Explained for Homeowners</h1>
  <h2>Why clean energy matters</h2>
  <!-- energy comment -->
  <p>Renewable energy is the future of energy.</p>
  <p>Solar panels turn sunlight into power.</p>
  <img src="/img/panels.jpg" alt="Solar panels on a roof">
  <img src="/img/turbine.jpg" width="2400" height="1600">
</body>
</html>
"""

LONG_PARAGRAPH = " ".join(["word"] * 45) + "."

LONG_CONTENT_HTML = (
    "<html lang=\"en\"><head><title>Long content</title></head><body>"
    "<p></p><p>Short one.</p><p>" + LONG_PARAGRAPH + "</p></body></html>"
)


@pytest.fixture()
def sample_html():
    return SAMPLE_HTML


@pytest.fixture()
def sample_document():
    """HtmlDocument for SAMPLE_HTML served from a hyphenated slug."""
    from seo_audit.document import HtmlDocument
    return HtmlDocument(SAMPLE_HTML, url="https://example.com/guides/renewable-energy")


@pytest.fixture()
def long_content_html():
    return LONG_CONTENT_HTML


@pytest.fixture()
def mock_llm_client():
    """Return a mock LLMClient that returns canned responses."""
    client = MagicMock()
    client.is_configured = True
    client.generate_text = AsyncMock(return_value="Mock LLM response text.")
    client.get_usage_summary = MagicMock(return_value={
        "total_requests": 0,
        "total_cost_usd": 0.0,
    })
    return client


@pytest.fixture()
def mock_improver():
    """Return a mock TextImprover whose rewrites always succeed."""
    improver = MagicMock()
    improver.available = True
    improver.improve = AsyncMock(return_value="A shorter, clearer rewrite.")
    return improver
