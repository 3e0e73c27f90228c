"""Report engine — orchestrates report generation across formats."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from cvereport.reporting.context import RenderContext

logger = logging.getLogger(__name__)


class ReportRenderer(Protocol):
    """Protocol for report renderers."""

    def render(self, context: RenderContext, output_dir: Path) -> Path: ...


class ReportEngine:
    """Generates reports in multiple formats."""

    def __init__(self) -> None:
        self._renderers: dict[str, ReportRenderer] = {}

    @classmethod
    def default(cls) -> ReportEngine:
        from cvereport.reporting.html import HtmlRenderer
        from cvereport.reporting.json import JsonRenderer

        engine = cls()
        engine.register("html", HtmlRenderer())
        engine.register("json", JsonRenderer())
        return engine

    def register(self, format_name: str, renderer: ReportRenderer) -> None:
        self._renderers[format_name] = renderer

    @property
    def formats(self) -> list[str]:
        return list(self._renderers.keys())

    def generate(
        self,
        context: RenderContext,
        output_dir: Path,
        formats: list[str] | None = None,
    ) -> list[Path]:
        """Generate reports in specified formats. Returns list of output paths."""
        output_dir.mkdir(parents=True, exist_ok=True)
        active_formats = formats or list(self._renderers.keys())
        paths: list[Path] = []

        for fmt in active_formats:
            renderer = self._renderers.get(fmt)
            if renderer is None:
                logger.warning("Unknown report format %r, skipping", fmt)
                continue
            path = renderer.render(context, output_dir)
            logger.info("Wrote %s report: %s", fmt, path)
            paths.append(path)

        return paths
