"""TUI widgets."""

from cvereport.tui.widgets.code_block import CodeBlockWidget
from cvereport.tui.widgets.cvss_chart import CvssChartWidget
from cvereport.tui.widgets.nav_header import NavHeaderWidget
from cvereport.tui.widgets.section import SectionWidget
from cvereport.tui.widgets.step_carousel import StepCarouselWidget

__all__ = [
    "CodeBlockWidget",
    "CvssChartWidget",
    "NavHeaderWidget",
    "SectionWidget",
    "StepCarouselWidget",
]
