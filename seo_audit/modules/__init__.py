"""Analyzer modules: content, keywords and on-page checks."""
