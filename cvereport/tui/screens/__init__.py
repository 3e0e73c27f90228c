"""TUI screens."""

from cvereport.tui.screens.insight import InsightScreen

__all__ = ["InsightScreen"]
