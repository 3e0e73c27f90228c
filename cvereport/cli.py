"""Typer CLI — render, print and explore vulnerability reports."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from cvereport import __version__
from cvereport.config import Settings
from cvereport.content import ReportLoadError, load_report
from cvereport.display.report import print_insight, print_report
from cvereport.insight.client import InsightClient
from cvereport.interaction.modal import Failed, InsightState
from cvereport.interaction.page import ReportPage
from cvereport.models.report import ReportModel
from cvereport.models.types import SectionId

app = typer.Typer(
    name="cvereport",
    help="cvereport — Interactive vulnerability analysis reports",
    no_args_is_help=True,
)
console = Console()

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool = False, config_level: str | None = None) -> None:
    if verbose:
        level = logging.DEBUG
    elif config_level:
        level = getattr(logging, config_level.upper(), logging.INFO)
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _load_settings(config: str | None, verbose: bool) -> Settings:
    """Load config and set up logging from its ``log_level``."""
    try:
        settings = Settings.load(config)
    except (OSError, yaml.YAMLError, ValidationError) as exc:
        console.print(f"[red]Invalid config {config}:[/] {escape(str(exc))}")
        raise typer.Exit(1) from None
    _setup_logging(verbose, config_level=settings.log_level)
    return settings


def _load_record(path: str | Path | None) -> ReportModel:
    try:
        return load_report(path)
    except ReportLoadError as exc:
        console.print(f"[red]{escape(str(exc))}[/]")
        raise typer.Exit(1) from None


def _parse_section(value: str) -> SectionId:
    try:
        return SectionId(value.strip().lower())
    except ValueError:
        valid = ", ".join(s.value for s in SectionId)
        console.print(f"[red]Unknown section: {escape(value)}[/] (choose from {valid})")
        raise typer.Exit(1) from None


def _require_client(settings: Settings) -> InsightClient:
    if not settings.insight.configured:
        console.print("[red]No API key configured.[/] Set CVEREPORT_INSIGHT_API_KEY.")
        raise typer.Exit(1)
    return InsightClient.from_settings(settings.insight)


@app.command()
def render(
    report: str | None = typer.Option(None, "--report", help="Report record (YAML or JSON)"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output directory"),
    format: str | None = typer.Option(None, help="Output formats: html,json"),  # noqa: A002
    step: int = typer.Option(1, "--step", help="Exploit step shown first (1-based)"),
    insights: bool = typer.Option(
        False, "--insights", help="Pre-generate AI insights into the HTML report",
    ),
    config: str | None = typer.Option(None, help="Path to config YAML"),
    verbose: bool = typer.Option(False, "-v", "--verbose"),
):
    """Export the report as self-contained HTML and/or JSON."""
    from cvereport.reporting.context import RenderContext
    from cvereport.reporting.engine import ReportEngine
    from cvereport.reporting.insights import generate_insights
    from cvereport.reporting.writer import report_dir_for

    settings = _load_settings(config, verbose)
    record = _load_record(report or settings.report_path)
    page = ReportPage(record, start_step=step - 1)

    generated: dict[str, InsightState] = {}
    if insights or settings.render.embed_insights:
        client = _require_client(settings)

        async def _pregenerate() -> dict[str, InsightState]:
            async with client:
                return await generate_insights(record, client)

        console.print("[blue]Generating AI insights...[/]")
        generated = asyncio.run(_pregenerate())

    formats = (
        [f.strip() for f in format.split(",") if f.strip()] if format
        else settings.render.formats
    )
    out_dir = report_dir_for(record.cve_id, Path(output) if output else settings.render.output_dir)
    paths = ReportEngine.default().generate(
        RenderContext.from_page(page, generated), out_dir, formats,
    )

    if not paths:
        console.print(f"[red]No reports written.[/] Unknown formats: {', '.join(formats)}")
        raise typer.Exit(1)
    console.print(f"[bold green]Report ready![/] {record.cve_id} ({page.carousel.label})")
    for path in paths:
        console.print(f"  - {path}")


@app.command()
def show(
    report: str | None = typer.Option(None, "--report", help="Report record (YAML or JSON)"),
    section: str | None = typer.Option(None, "--section", "-s", help="Only this section"),
    step: int | None = typer.Option(None, "--step", help="Only this exploit step (1-based)"),
    config: str | None = typer.Option(None, help="Path to config YAML"),
    verbose: bool = typer.Option(False, "-v", "--verbose"),
):
    """Print the report to the terminal."""
    settings = _load_settings(config, verbose)
    record = _load_record(report or settings.report_path)
    sections = [_parse_section(section)] if section else None
    index = None
    if step is not None:
        index = ReportPage(record, start_step=step - 1).carousel.index
    print_report(record, console, sections=sections, step=index)


@app.command()
def explain(
    section: str = typer.Argument(help="Section to explain: overview, flaw, exploit, fix"),
    step: int = typer.Option(1, "--step", help="Exploit step to explain (1-based)"),
    report: str | None = typer.Option(None, "--report", help="Report record (YAML or JSON)"),
    config: str | None = typer.Option(None, help="Path to config YAML"),
    verbose: bool = typer.Option(False, "-v", "--verbose"),
):
    """Request one AI insight and print it."""
    settings = _load_settings(config, verbose)
    record = _load_record(report or settings.report_path)
    target = _parse_section(section)
    if target is SectionId.REFLECTIONS:
        console.print("[red]No insight is available for the reflections section.[/]")
        raise typer.Exit(1)

    client = _require_client(settings)
    page = ReportPage(record, insight_source=client, start_step=step - 1)

    async def _run() -> InsightState:
        async with client:
            return await page.explain(target)

    console.print(f"[dim]Explaining {target.label} with {settings.insight.model}...[/]")
    state = asyncio.run(_run())
    print_insight(state, console)
    if isinstance(state, Failed):
        raise typer.Exit(1)


@app.command()
def tui(
    report: str | None = typer.Option(None, "--report", help="Report record (YAML or JSON)"),
    session_log: str | None = typer.Option(
        None, "--session-log", help="Write a JSONL event log under this directory",
    ),
    config: str | None = typer.Option(None, help="Path to config YAML"),
    verbose: bool = typer.Option(False, "-v", "--verbose"),
):
    """Launch the interactive TUI report viewer."""
    from cvereport.logging.session_logger import SessionLogger
    from cvereport.tui.app import ReportApp

    settings = _load_settings(config, verbose)
    record = _load_record(report or settings.report_path)

    client = InsightClient.from_settings(settings.insight) if settings.insight.configured else None
    page = ReportPage(record, insight_source=client)

    session_logger = None
    log_dir = Path(session_log) if session_log else (
        settings.tui.sessions_dir if settings.tui.session_log else None
    )
    if log_dir is not None:
        session_logger = SessionLogger(
            log_dir, record.cve_id, page.bus, max_sessions=settings.tui.max_sessions,
        )
        logger.info("Session log: %s", session_logger.session_dir)

    ReportApp(page, insight_client=client, session_logger=session_logger).run()


@app.command()
def version():
    """Show version."""
    console.print(f"cvereport v{__version__}")


def main() -> None:
    app()
