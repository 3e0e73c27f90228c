"""Static terminal rendering of a report with Rich."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from rich.columns import Columns
from rich.console import Console, Group, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from cvereport.interaction.modal import Failed, InsightState, Pending, Ready
from cvereport.models.types import SECTION_ORDER, SectionId
from cvereport.reporting.chart import bar_cells, severity_rating, severity_style

if TYPE_CHECKING:
    from cvereport.models.report import ExploitStep, ReportModel

BAR_WIDTH = 40


def code_panel(code: str, title: str = "", lexer: str = "php") -> Panel:
    """Verbatim code block."""
    syntax = Syntax(code, lexer, theme="monokai", word_wrap=False, background_color="default")
    return Panel(syntax, title=title or None, title_align="left", border_style="dim")


def cvss_bar(score: float, width: int = BAR_WIDTH) -> Text:
    filled = bar_cells(score, width)
    style = severity_style(score)
    bar = Text()
    bar.append("█" * filled, style=style)
    bar.append("░" * (width - filled), style="dim")
    bar.append(f" {score:g} / 10 ({severity_rating(score)})", style=f"bold {style}")
    return bar


def overview_panel(report: ReportModel) -> Panel:
    cvss = report.overview.cvss
    table = Table(show_header=True, header_style="bold", expand=True)
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Value", style="bold")
    table.add_column("Impact", style="dim")
    for c in cvss.vector_components:
        table.add_row(c.key, c.name, c.value, c.description)

    body = Group(
        Text(report.overview.text),
        Text(),
        cvss_bar(cvss.score),
        Text(cvss.vector_string, style="dim"),
        table,
    )
    return Panel(body, title="[bold]Vulnerability Overview[/]", border_style="blue")


def flaw_panel(report: ReportModel) -> Panel:
    parts: list = []
    if report.flaw.summary:
        parts.append(Text(report.flaw.summary, style="italic"))
    parts.append(code_panel(report.flaw.vulnerable_code, "Vulnerable Function"))
    if report.flaw.helper_function:
        parts.append(code_panel(report.flaw.helper_function, "Helper Function"))
    parts.append(Panel(
        Text.from_markup(html_to_markup(report.flaw.explanation)),
        title="The Core Flaw", border_style="yellow",
    ))
    return Panel(Group(*parts), title="[bold]The Flaw[/]", border_style="red")


def step_panel(step: ExploitStep, index: int, count: int) -> Panel:
    parts: list = [Text(step.content)]
    if step.code:
        parts.append(code_panel(step.code, lexer="text"))
    return Panel(
        Group(*parts),
        title=f"[bold]{step.title}[/]",
        subtitle=f"Step {index + 1} of {count}",
        border_style="magenta",
    )


def exploit_panel(report: ReportModel, step: int | None = None) -> Panel:
    """All steps, or only the one at *step* (0-based, clamped)."""
    steps = report.exploit_steps
    count = len(steps)
    if step is None:
        indices: Iterable[int] = range(count)
    else:
        indices = [max(0, min(step, count - 1))]
    body = Group(*(step_panel(steps[i], i, count) for i in indices))
    return Panel(body, title="[bold]The Exploit[/]", border_style="magenta")


def fix_panel(report: ReportModel) -> Panel:
    parts: list = []
    if report.fix.summary:
        parts.append(Text(report.fix.summary, style="italic"))
    parts.append(Columns([
        code_panel(report.fix.vulnerable_code, "Vulnerable Code"),
        code_panel(report.fix.patched_code, "Patched Code"),
    ], equal=True, expand=True))
    return Panel(Group(*parts), title="[bold]The Fix[/]", border_style="green")


def reflections_panel(report: ReportModel) -> Panel:
    cards = [
        Panel(Text(r.text), title=f"{r.icon} {r.title}".strip(), border_style="cyan")
        for r in report.reflections
    ]
    return Panel(
        Columns(cards, equal=True, expand=True),
        title="[bold]Key Reflections & Takeaways[/]", border_style="cyan",
    )


_PANELS = {
    SectionId.OVERVIEW: overview_panel,
    SectionId.FLAW: flaw_panel,
    SectionId.FIX: fix_panel,
    SectionId.REFLECTIONS: reflections_panel,
}


def print_report(
    report: ReportModel,
    console: Console | None = None,
    *,
    sections: Iterable[SectionId | str] | None = None,
    step: int | None = None,
) -> None:
    """Print the report, optionally limited to some sections."""
    console = console or Console()
    wanted = [SectionId(s) for s in sections] if sections else list(SECTION_ORDER)

    console.print(Rule(f"[bold]{report.heading}[/]"))
    if report.subtitle:
        console.print(Text(report.subtitle, style="dim", justify="center"))

    for section in SECTION_ORDER:
        if section not in wanted:
            continue
        if section is SectionId.EXPLOIT:
            console.print(exploit_panel(report, step))
        else:
            console.print(_PANELS[section](report))

    if report.references:
        refs = "  ".join(f"[link={r.url}]{r.label}[/link]" for r in report.references)
        console.print(Text.from_markup(f"[dim]References:[/] {refs}"))


def insight_renderable(state: InsightState) -> RenderableType:
    """Modal body for *state*."""
    if isinstance(state, Ready):
        return Panel(Text(state.text), title="✨ AI Insight", border_style="bright_magenta")
    if isinstance(state, Failed):
        return Text.from_markup(f"[red]Error:[/] {escape(state.message)}")
    if isinstance(state, Pending):
        return Text("Generating insight...", style="dim")
    return Text("No insight requested.", style="dim")


def print_insight(state: InsightState, console: Console | None = None) -> None:
    console = console or Console()
    console.print(insight_renderable(state))


def html_to_markup(explanation: str) -> str:
    """Map the explanation's inline HTML to Rich markup."""
    text = explanation.replace("[", r"\[")
    for tag, style in (("strong", "bold"), ("b", "bold"), ("em", "italic"), ("code", "cyan")):
        text = text.replace(f"<{tag}>", f"[{style}]").replace(f"</{tag}>", f"[/{style}]")
    return text
