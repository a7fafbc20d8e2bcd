"""Reporting -- findings model, report assembly and rendering."""

from seo_audit.reporting.report import AuditReport, Finding, ReportSection, Severity

__all__ = ["AuditReport", "Finding", "ReportSection", "Severity"]
