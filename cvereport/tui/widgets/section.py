"""Report section widget — one scroll region per top-level section."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Label, Static

from cvereport.display.report import html_to_markup
from cvereport.interaction.carousel import StepCarousel
from cvereport.models.report import ExploitStep, ReportModel
from cvereport.models.types import SectionId
from cvereport.tui.widgets.code_block import CodeBlockWidget
from cvereport.tui.widgets.cvss_chart import CvssChartWidget
from cvereport.tui.widgets.step_carousel import StepCarouselWidget

_TITLES = {
    SectionId.OVERVIEW: "Vulnerability Overview",
    SectionId.FLAW: "The Flaw: Unsanitized Input",
    SectionId.EXPLOIT: "The Exploit: Step by Step",
    SectionId.FIX: "The Fix: Parameterized Queries",
    SectionId.REFLECTIONS: "Key Reflections & Takeaways",
}


class SectionWidget(Vertical):
    """Tracked region whose id is ``section-<section id>``."""

    DEFAULT_CSS = """
    SectionWidget {
        height: auto;
        min-height: 12;
        padding: 1 2;
        border-bottom: dashed $panel;
    }
    .section-title {
        text-style: bold;
        color: $accent;
        margin: 0 0 1 0;
    }
    .section-summary {
        text-style: italic;
        margin: 0 0 1 0;
    }
    .side-by-side {
        height: auto;
    }
    .side-by-side CodeBlockWidget {
        width: 1fr;
    }
    .reflection-card {
        width: 1fr;
        height: auto;
        border: round $secondary;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        section: SectionId,
        report: ReportModel,
        carousel: StepCarousel[ExploitStep],
        **kwargs,
    ) -> None:
        super().__init__(id=f"section-{section.value}", **kwargs)
        self.section = section
        self.report = report
        self.carousel = carousel

    def compose(self) -> ComposeResult:
        yield Label(_TITLES[self.section], classes="section-title")
        yield from getattr(self, f"_compose_{self.section.value}")()

    def _compose_overview(self) -> ComposeResult:
        yield Label(Text(self.report.overview.text))
        yield CvssChartWidget(self.report.overview.cvss)

    def _compose_flaw(self) -> ComposeResult:
        flaw = self.report.flaw
        if flaw.summary:
            yield Label(Text(flaw.summary), classes="section-summary")
        yield CodeBlockWidget(flaw.vulnerable_code, title="Vulnerable Function")
        if flaw.helper_function:
            yield CodeBlockWidget(flaw.helper_function, title="Helper Function")
        yield Static(Text.from_markup(html_to_markup(flaw.explanation)))

    def _compose_exploit(self) -> ComposeResult:
        yield StepCarouselWidget(self.carousel, id="carousel")

    def _compose_fix(self) -> ComposeResult:
        fix = self.report.fix
        if fix.summary:
            yield Label(Text(fix.summary), classes="section-summary")
        with Horizontal(classes="side-by-side"):
            yield CodeBlockWidget(fix.vulnerable_code, title="Vulnerable Code")
            yield CodeBlockWidget(fix.patched_code, title="Patched Code")

    def _compose_reflections(self) -> ComposeResult:
        with Horizontal(classes="side-by-side"):
            for r in self.report.reflections:
                card = Static(Text(r.text), classes="reflection-card")
                card.border_title = f"{r.icon} {r.title}".strip()
                yield card
