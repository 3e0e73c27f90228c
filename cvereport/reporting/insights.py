"""Pre-generate AI insights for embedding into an exported report."""

from __future__ import annotations

import asyncio
import logging

from cvereport.insight.prompts import flaw_prompt, fix_prompt, overview_prompt, step_prompt
from cvereport.interaction.modal import Failed, InsightModal, InsightSource, InsightState
from cvereport.models.report import ReportModel
from cvereport.reporting.html import step_insight_key

logger = logging.getLogger(__name__)


def insight_prompts(report: ReportModel) -> dict[str, str]:
    """Every prompt an exported report can carry, keyed by dialog id."""
    prompts = {
        "overview": overview_prompt(report),
        "flaw": flaw_prompt(report),
    }
    for i in range(len(report.exploit_steps)):
        prompts[step_insight_key(i)] = step_prompt(report, i)
    prompts["fix"] = fix_prompt(report)
    return prompts


async def generate_insights(
    report: ReportModel, source: InsightSource, *, concurrency: int = 3,
) -> dict[str, InsightState]:
    """Run one request per prompt. Failures are kept as ``Failed`` entries."""
    sem = asyncio.Semaphore(max(1, concurrency))

    async def _one(prompt: str) -> InsightState:
        async with sem:
            return await InsightModal(source).open(prompt)

    prompts = insight_prompts(report)
    states = await asyncio.gather(*(_one(p) for p in prompts.values()))
    results = dict(zip(prompts.keys(), states, strict=True))
    failed = sum(1 for s in results.values() if isinstance(s, Failed))
    logger.info("Generated %d insights (%d failed)", len(results), failed)
    return results
