"""Shared test fixtures."""

from __future__ import annotations

import asyncio

import pytest

from cvereport.content import CVE_2022_3141
from cvereport.events.bus import EventBus
from cvereport.interaction.page import ReportPage
from cvereport.models.report import ReportModel


class FakeInsightSource:
    """Scripted stand-in for the text-generation client.

    Returns *text*, or raises *error*. With ``gated=True`` each call waits
    for :meth:`release` so tests can interleave requests.
    """

    def __init__(self, text: str = "hello", error: Exception | None = None, gated: bool = False):
        self.text = text
        self.error = error
        self.prompts: list[str] = []
        self._gates: list[asyncio.Event] = []
        self._gated = gated

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self._gated:
            gate = asyncio.Event()
            self._gates.append(gate)
            await gate.wait()
        if self.error is not None:
            raise self.error
        return f"{self.text} #{len(self.prompts)}" if self._gated else self.text

    def release(self, index: int) -> None:
        self._gates[index].set()


@pytest.fixture
def report() -> ReportModel:
    return CVE_2022_3141


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def make_source():
    return FakeInsightSource


@pytest.fixture
def fake_source() -> FakeInsightSource:
    return FakeInsightSource()


@pytest.fixture
def page(report, fake_source, bus) -> ReportPage:
    return ReportPage(report, insight_source=fake_source, bus=bus)
