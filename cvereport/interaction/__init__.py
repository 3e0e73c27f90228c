"""Interactive page state: section tracking, step carousel, menu, insight modal."""

from __future__ import annotations

from cvereport.interaction.carousel import StepCarousel
from cvereport.interaction.modal import (
    Failed,
    Idle,
    InsightModal,
    InsightState,
    Pending,
    Ready,
)
from cvereport.interaction.nav import NavHeader, NavLink, NavView, nav_view
from cvereport.interaction.page import PageState, ReportPage
from cvereport.interaction.tracker import IntersectionEntry, SectionTracker

__all__ = [
    "Failed",
    "Idle",
    "InsightModal",
    "InsightState",
    "IntersectionEntry",
    "NavHeader",
    "NavLink",
    "NavView",
    "PageState",
    "Pending",
    "Ready",
    "ReportPage",
    "SectionTracker",
    "StepCarousel",
    "nav_view",
]
