"""SEO Audit -- on-page, keyword and readability analysis for web pages."""

__version__ = "1.0.0"
