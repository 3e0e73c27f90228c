"""Report data models."""

from __future__ import annotations

from cvereport.models.report import (
    CvssComponent,
    CvssScore,
    ExploitStep,
    Fix,
    Flaw,
    Overview,
    Reference,
    Reflection,
    ReportModel,
)
from cvereport.models.types import SECTION_ORDER, SectionId

__all__ = [
    "SECTION_ORDER",
    "CvssComponent",
    "CvssScore",
    "ExploitStep",
    "Fix",
    "Flaw",
    "Overview",
    "Reference",
    "Reflection",
    "ReportModel",
    "SectionId",
]
