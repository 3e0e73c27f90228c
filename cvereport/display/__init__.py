"""Rich terminal rendering of reports and insights."""

from __future__ import annotations

from cvereport.display.report import insight_renderable, print_insight, print_report

__all__ = ["insight_renderable", "print_insight", "print_report"]
