"""Typer CLI application for SEO Audit.

Provides commands to audit a live page, audit a saved HTML file offline and
show configuration status.
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

console = Console()
app = typer.Typer(
    name="seo-audit",
    help="SEO Audit -- on-page, keyword, readability and content quality checks.",
    add_completion=False,
    no_args_is_help=True,
)

OUTPUT_FORMATS = ("text", "json")


def _setup_logging(verbose: bool = False) -> None:
    """Configure logging level and format."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _run_async(coro):
    """Run an async coroutine from synchronous CLI context."""
    return asyncio.run(coro)


def _get_app(config_path: str):
    """Lazy-import and return an initialised SEOAudit instance."""
    from seo_audit.app import SEOAudit
    seo = SEOAudit(config_path=config_path)
    seo.initialize()
    return seo


def _check_options(analyzers: Optional[list[str]], keywords: str, fmt: str) -> list[str]:
    """Validate shared options, exiting with code 1 on bad input."""
    from seo_audit.workflows import resolve_analyzers

    if fmt not in OUTPUT_FORMATS:
        console.print(f"[red]✘[/red] Unknown format {fmt!r}. Choose from: {', '.join(OUTPUT_FORMATS)}")
        raise typer.Exit(code=1)
    try:
        return resolve_analyzers(analyzers, keywords)
    except ValueError as exc:
        console.print(f"[red]✘[/red] {exc}")
        raise typer.Exit(code=1)


def _emit(report, fmt: str) -> None:
    """Print the report in the requested format."""
    from seo_audit.reporting.renderers import ConsoleRenderer, render_json

    if fmt == "json":
        typer.echo(render_json(report))
        return
    if report.error:
        console.print(f"[red]✘[/red] {report.error}")
    ConsoleRenderer(console).render(report)
    totals = report.severity_totals()
    console.print(
        f"\n[bold]{totals['error']} errors, {totals['warning']} warnings, "
        f"{totals['success']} passed[/bold]"
    )


# ------------------------------------------------------------------
# audit
# ------------------------------------------------------------------
@app.command()
def audit(
    url: str = typer.Argument(..., help="Page URL to audit (e.g. https://example.com/page)."),
    analyzers: Optional[list[str]] = typer.Option(
        None, "--analyzer", "-a",
        help="Analyzer to run (title, meta, keywords, headings, images, content). Repeatable.",
    ),
    keywords: str = typer.Option("", "--keywords", "-k", help="Comma-separated target keywords."),
    no_suggestions: bool = typer.Option(False, "--no-suggestions", help="Skip LLM rewrite suggestions."),
    fmt: str = typer.Option("text", "--format", "-f", help="Output format: text, json."),
    config: str = typer.Option("config/settings.yaml", "--config", "-c", help="Path to settings.yaml."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Fetch a page and run the SEO analyzers on it."""
    from seo_audit.utils.validators import ensure_scheme, validate_url

    _setup_logging(verbose)
    url = ensure_scheme(url)
    ok, message = validate_url(url)
    if not ok:
        console.print(f"[red]✘[/red] {message}")
        raise typer.Exit(code=1)
    selected = _check_options(analyzers, keywords, fmt)

    seo = _get_app(config)
    workflow = seo.get_workflow()
    coro = workflow.run_audit(url, selected, keywords_input=keywords, suggest=not no_suggestions)
    if fmt == "text":
        console.print(Panel(f"[bold cyan]SEO Audit: {url}[/bold cyan]"))
        with Progress(SpinnerColumn(), TextColumn("[progress.description]{task.description}"), console=console) as progress:
            progress.add_task(description="Running " + ", ".join(selected) + "...", total=None)
            report = _run_async(coro)
    else:
        report = _run_async(coro)

    _emit(report, fmt)
    if not report.ok:
        raise typer.Exit(code=1)


# ------------------------------------------------------------------
# analyze-file
# ------------------------------------------------------------------
@app.command("analyze-file")
def analyze_file(
    path: Path = typer.Argument(..., help="Saved HTML file to audit."),
    url: str = typer.Option("", "--url", "-u", help="URL the page is served from (for the URL keyword check)."),
    analyzers: Optional[list[str]] = typer.Option(
        None, "--analyzer", "-a",
        help="Analyzer to run (title, meta, keywords, headings, images, content). Repeatable.",
    ),
    keywords: str = typer.Option("", "--keywords", "-k", help="Comma-separated target keywords."),
    no_suggestions: bool = typer.Option(False, "--no-suggestions", help="Skip LLM rewrite suggestions."),
    fmt: str = typer.Option("text", "--format", "-f", help="Output format: text, json."),
    config: str = typer.Option("config/settings.yaml", "--config", "-c", help="Path to settings.yaml."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Audit a saved HTML file without any network access to the page."""
    _setup_logging(verbose)
    if not path.is_file():
        console.print(f"[red]✘[/red] File not found: {path}")
        raise typer.Exit(code=1)
    selected = _check_options(analyzers, keywords, fmt)

    html = path.read_text(encoding="utf-8", errors="replace")
    seo = _get_app(config)
    workflow = seo.get_workflow()
    if fmt == "text":
        console.print(Panel(f"[bold cyan]SEO Audit: {path.name}[/bold cyan]"))
    report = _run_async(workflow.audit_html(
        html, url=url, analyzers=selected, keywords_input=keywords, suggest=not no_suggestions,
    ))
    _emit(report, fmt)


# ------------------------------------------------------------------
# status
# ------------------------------------------------------------------
_STATUS_DISPLAY = {
    "ok": "[green]✔ OK[/green]",
    "warning": "[yellow]⚠ Warning[/yellow]",
    "error": "[red]✘ Error[/red]",
}

_COMPONENT_LABELS = {
    "configuration": "Configuration",
    "llm": "LLM Providers",
    "http": "HTTP Fetching",
    "analysis": "Analysis",
}


@app.command()
def status(
    config: str = typer.Option("config/settings.yaml", "--config", "-c", help="Path to settings.yaml."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Show configuration and API key status."""
    _setup_logging(verbose)
    console.print(Panel("[bold cyan]System Status[/bold cyan]"))

    table = Table(title="Component Status", show_header=True, header_style="bold magenta")
    table.add_column("Component", style="cyan", min_width=20)
    table.add_column("Status", min_width=10)
    table.add_column("Details", max_width=60)

    seo = _get_app(config)
    for component, info in seo.get_status().items():
        state = info.get("status", "unknown")
        table.add_row(
            _COMPONENT_LABELS.get(component, component),
            _STATUS_DISPLAY.get(state, state),
            str(info.get("details", "")),
        )
    console.print(table)


def main() -> None:
    """Entry point for the ``seo-audit`` console script."""
    app()


if __name__ == "__main__":
    main()
