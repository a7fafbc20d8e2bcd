"""Shared text and validation helpers."""
