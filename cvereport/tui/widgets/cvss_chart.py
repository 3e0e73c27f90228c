"""CVSS chart widget — score bar plus component chips."""

from __future__ import annotations

from rich.console import Group
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Label, Static

from cvereport.display.report import cvss_bar
from cvereport.models.report import CvssScore
from cvereport.reporting.chart import component_tooltip


class CvssChartWidget(Static):
    """Horizontal score bar on a ``[0, 10]`` axis, then one chip per metric.

    Each chip carries the component name, value and impact as its tooltip.
    """

    DEFAULT_CSS = """
    CvssChartWidget {
        height: auto;
        padding: 0 1;
        margin: 0 0 1 0;
    }
    #cvss-chips {
        height: auto;
        layout: horizontal;
    }
    .cvss-chip {
        width: auto;
        padding: 0 1;
        margin: 0 1 0 0;
        background: $boost;
    }
    """

    def __init__(self, cvss: CvssScore, **kwargs) -> None:
        super().__init__(**kwargs)
        self.cvss = cvss

    def compose(self) -> ComposeResult:
        yield Label(Group(cvss_bar(self.cvss.score), Text(self.cvss.vector_string, style="dim")))
        with Horizontal(id="cvss-chips"):
            for c in self.cvss.vector_components:
                chip = Label(f"{c.key}:{c.value}", classes="cvss-chip")
                chip.tooltip = component_tooltip(c)
                yield chip
