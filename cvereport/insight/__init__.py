"""AI insight generation — prompts and the text-generation client."""

from __future__ import annotations

from cvereport.insight.client import (
    NO_CONTENT_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    InsightClient,
    InsightEmptyResponseError,
    InsightError,
    InsightHTTPError,
    InsightTransportError,
)
from cvereport.insight.prompts import build_prompt

__all__ = [
    "NO_CONTENT_MESSAGE",
    "UNKNOWN_ERROR_MESSAGE",
    "InsightClient",
    "InsightEmptyResponseError",
    "InsightError",
    "InsightHTTPError",
    "InsightTransportError",
    "build_prompt",
]
