"""Render audit reports to the terminal (Rich) or to JSON."""

import json
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from seo_audit.reporting.report import AuditReport, ReportSection, Severity

_SEVERITY_STYLE = {
    Severity.SUCCESS: "[green]✔[/green]",
    Severity.INFO: "[cyan]ℹ[/cyan]",
    Severity.WARNING: "[yellow]⚠[/yellow]",
    Severity.ERROR: "[red]✘[/red]",
}

_STATUS_STYLE = {
    "success": "[green]✔ success[/green]",
    "error": "[red]✘ error[/red]",
    "skipped": "[yellow]○ skipped[/yellow]",
}


class ConsoleRenderer:
    """Pretty-print an :class:`AuditReport` with Rich.

    Usage::

        ConsoleRenderer(console).render(report)
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self._console = console or Console()

    def render(self, report: AuditReport) -> None:
        for section in report.sections:
            self.render_section(section)
        self.render_summary(report)

    def render_section(self, section: ReportSection) -> None:
        lines = self._section_lines(section, depth=0)
        self._console.print(Panel("\n".join(lines), title=f"[bold cyan]{escape(section.title)}[/bold cyan]"))

    def _section_lines(self, section: ReportSection, depth: int) -> list[str]:
        indent = "  " * depth
        lines: list[str] = []
        if depth:
            lines.append(f"{indent}[bold]{escape(section.title)}[/bold]")
        for finding in section.findings:
            lines.append(f"{indent}{_SEVERITY_STYLE[finding.severity]} {escape(finding.message)}")
        for child in section.subsections:
            lines.extend(self._section_lines(child, depth + 1))
        if section.recommendations:
            lines.append(f"{indent}[bold magenta]Recommendations:[/bold magenta]")
            for rec in section.recommendations:
                lines.append(f"{indent}  • {escape(rec)}")
        return lines

    def render_summary(self, report: AuditReport) -> None:
        table = Table(title="Audit Steps: " + report.url, show_header=True, header_style="bold magenta")
        table.add_column("Step", style="cyan", min_width=20)
        table.add_column("Status", min_width=10)
        table.add_column("Details", max_width=60)
        for step_name, step in report.steps.items():
            status = step.get("status", "unknown")
            if status == "error":
                detail = step.get("error", "")[:80]
            elif status == "skipped":
                detail = step.get("reason", "")
            else:
                detail = "; ".join(
                    f"{key}={step[key]}" for key in ("warnings", "errors") if step.get(key)
                )
            table.add_row(
                step_name.replace("_", " ").title(),
                _STATUS_STYLE.get(status, status),
                escape(detail),
            )
        self._console.print(table)
        if report.elapsed_seconds:
            self._console.print(f"Elapsed: {report.elapsed_seconds}s")


def render_json(report: AuditReport, indent: int = 2) -> str:
    return json.dumps(report.to_dict(), indent=indent, ensure_ascii=False)
