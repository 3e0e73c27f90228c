"""Tests for pre-generating insights for export."""

from __future__ import annotations

from cvereport.insight.client import InsightHTTPError
from cvereport.interaction.modal import Failed, Ready
from cvereport.reporting.insights import generate_insights, insight_prompts


def test_insight_prompts_keys(report):
    keys = list(insight_prompts(report))
    assert keys == [
        "overview", "flaw",
        "exploit-0", "exploit-1", "exploit-2", "exploit-3", "exploit-4",
        "fix",
    ]


async def test_generate_insights(report, fake_source):
    results = await generate_insights(report, fake_source, concurrency=2)
    assert len(results) == 8
    assert all(state == Ready("hello") for state in results.values())
    assert len(fake_source.prompts) == 8


async def test_generate_insights_keeps_failures(report, make_source):
    source = make_source(error=InsightHTTPError(429, "Too Many Requests"))
    results = await generate_insights(report, source)
    assert results["flaw"] == Failed("Too Many Requests")
