"""JSON report renderer."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from cvereport.interaction.modal import Failed, InsightState, Ready, state_name
from cvereport.reporting.context import RenderContext
from cvereport.reporting.writer import write_atomic


def insight_payload(state: InsightState) -> dict[str, Any]:
    payload: dict[str, Any] = {"status": state_name(state)}
    if isinstance(state, Ready):
        payload["text"] = state.text
    elif isinstance(state, Failed):
        payload["message"] = state.message
    return payload


def assemble_data(context: RenderContext) -> dict[str, Any]:
    """Convert a render context to a JSON-serializable dict."""
    from cvereport import __version__

    state = context.state
    return {
        "version": __version__,
        "generatedAt": context.timestamp,
        "report": context.report.to_dict(),
        "state": {
            "activeSection": state.active_section,
            "stepIndex": state.step_index,
            "stepCount": state.step_count,
            "menuOpen": state.menu_open,
        },
        "insights": {key: insight_payload(s) for key, s in context.insights.items()},
    }


def render_json(context: RenderContext) -> str:
    """Render report data as formatted JSON string."""
    return json.dumps(assemble_data(context), indent=2, ensure_ascii=False, default=str)


class JsonRenderer:
    """Writes ``report.json``: the record, page state and any insights."""

    filename = "report.json"

    def render(self, context: RenderContext, output_dir: Path) -> Path:
        return write_atomic(output_dir / self.filename, render_json(context))
