"""Render context — everything a renderer needs, frozen at render time."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from cvereport.interaction.modal import InsightState
from cvereport.interaction.page import PageState, ReportPage
from cvereport.models.report import ReportModel


@dataclass(frozen=True)
class RenderContext:
    report: ReportModel
    state: PageState
    insights: dict[str, InsightState] = field(default_factory=dict)
    generated_at: datetime = field(default_factory=lambda: datetime.now(tz=UTC))

    @classmethod
    def from_page(
        cls, page: ReportPage, insights: dict[str, InsightState] | None = None,
    ) -> RenderContext:
        return cls(report=page.report, state=page.snapshot(), insights=dict(insights or {}))

    @property
    def timestamp(self) -> str:
        return self.generated_at.strftime("%Y-%m-%d %H:%M:%S UTC")
