"""HTML report renderer using Jinja2."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from cvereport.interaction.modal import insight_html, state_name
from cvereport.interaction.nav import nav_view
from cvereport.models.types import SECTION_ORDER
from cvereport.reporting.chart import component_tooltip, cvss_chart
from cvereport.reporting.context import RenderContext
from cvereport.reporting.writer import write_atomic

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["tooltip"] = component_tooltip
    return env


def step_insight_key(index: int) -> str:
    return f"exploit-{index}"


def _insight_entries(context: RenderContext) -> dict[str, dict[str, str]]:
    return {
        key: {"status": state_name(state), "html": insight_html(state)}
        for key, state in context.insights.items()
    }


def template_vars(context: RenderContext) -> dict[str, Any]:
    """Everything the template reads, pre-computed."""
    from cvereport import __version__

    report = context.report
    state = context.state
    chart = cvss_chart(report.overview.cvss.score)
    initial = {
        "activeSection": state.active_section,
        "stepIndex": state.step_index,
        "stepCount": state.step_count,
        "menuOpen": state.menu_open,
    }
    return {
        "report": report,
        "state": state,
        "nav": nav_view(state.active_section, state.menu_open),
        "sections": [s.value for s in SECTION_ORDER],
        "chart": chart,
        "insights": _insight_entries(context),
        "step_insight_key": step_insight_key,
        "initial_json": json.dumps(initial),
        "timestamp": context.timestamp,
        "version": __version__,
    }


def render_html(context: RenderContext) -> str:
    """Render the self-contained interactive page."""
    template = _environment().get_template("report.html.j2")
    return template.render(**template_vars(context))


class HtmlRenderer:
    """Renders the report as a single self-contained HTML page."""

    filename = "report.html"

    def render(self, context: RenderContext, output_dir: Path) -> Path:
        return write_atomic(output_dir / self.filename, render_html(context))
