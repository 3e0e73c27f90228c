"""cvereport — interactive vulnerability analysis reports."""

from __future__ import annotations

__version__ = "1.0.0"

from cvereport.content import ReportLoadError, default_report, load_report  # noqa: E402
from cvereport.interaction.page import PageState, ReportPage  # noqa: E402
from cvereport.models.report import ReportModel  # noqa: E402
from cvereport.models.types import SectionId  # noqa: E402

__all__ = [
    "PageState",
    "ReportLoadError",
    "ReportModel",
    "ReportPage",
    "SectionId",
    "__version__",
    "default_report",
    "load_report",
]
