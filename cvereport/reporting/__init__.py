"""HTML + JSON export of the interactive report."""

from __future__ import annotations

from cvereport.reporting.context import RenderContext
from cvereport.reporting.engine import ReportEngine
from cvereport.reporting.html import HtmlRenderer, render_html
from cvereport.reporting.json import JsonRenderer, render_json

__all__ = ["HtmlRenderer", "JsonRenderer", "RenderContext", "ReportEngine", "render_html", "render_json"]
