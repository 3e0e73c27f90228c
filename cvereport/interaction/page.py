"""ReportPage — composes the interactive state of one report."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from cvereport.events.bus import EventBus
from cvereport.insight.prompts import build_prompt
from cvereport.interaction.carousel import StepCarousel
from cvereport.interaction.modal import Idle, InsightModal, InsightSource, InsightState
from cvereport.interaction.nav import NavHeader, NavView
from cvereport.interaction.tracker import SectionTracker
from cvereport.models.report import ExploitStep, ReportModel
from cvereport.models.types import SECTION_ORDER, SectionId


@dataclass(frozen=True)
class PageState:
    """Immutable snapshot of every interactive cell on the page."""

    active_section: str
    step_index: int
    step_count: int
    menu_open: bool = False
    modal_open: bool = False
    insight: InsightState = Idle()

    @property
    def step_label(self) -> str:
        return f"Step {self.step_index + 1} of {self.step_count}"


class ReportPage:
    """Owns the tracker, carousel, header and optional insight modal.

    Each cell is written only by its own component. Readers either take
    :meth:`snapshot` or subscribe to :attr:`bus`.
    """

    def __init__(
        self,
        report: ReportModel,
        *,
        insight_source: InsightSource | None = None,
        bus: EventBus | None = None,
        start_step: int = 0,
    ) -> None:
        self.report = report
        self.bus = bus or EventBus()
        self.tracker = SectionTracker([s.value for s in SECTION_ORDER], bus=self.bus)
        self.carousel: StepCarousel[ExploitStep] = StepCarousel(
            report.exploit_steps, bus=self.bus, start=start_step,
        )
        self.header = NavHeader(bus=self.bus)
        self.modal = (
            InsightModal(insight_source, bus=self.bus) if insight_source is not None else None
        )

    @property
    def nav(self) -> NavView:
        return self.header.view(self.tracker.active_section)

    def snapshot(self) -> PageState:
        return PageState(
            active_section=self.tracker.active_section,
            step_index=self.carousel.index,
            step_count=self.carousel.count,
            menu_open=self.header.is_menu_open,
            modal_open=self.modal.is_open if self.modal else False,
            insight=self.modal.state if self.modal else Idle(),
        )

    def prompt_for(self, section: SectionId | str) -> str:
        return build_prompt(section, self.report, step_index=self.carousel.index)

    def explain(self, section: SectionId | str) -> asyncio.Task[InsightState]:
        """Open the insight modal for *section* using the current step."""
        if self.modal is None:
            raise RuntimeError("No insight client configured")
        return self.modal.open(self.prompt_for(section))
