"""Custom Textual messages for page events."""

from __future__ import annotations

from textual.message import Message

from cvereport.interaction.modal import InsightState


class SectionActivated(Message):
    """Emitted when the section crossing the viewport midpoint changes."""

    def __init__(self, section: str, previous: str) -> None:
        super().__init__()
        self.section = section
        self.previous = previous


class StepChanged(Message):
    """Emitted when the carousel moves to a different step."""

    def __init__(self, index: int, count: int) -> None:
        super().__init__()
        self.index = index
        self.count = count


class MenuToggled(Message):
    def __init__(self, open: bool) -> None:
        super().__init__()
        self.open = open


class InsightResolved(Message):
    """Emitted when the latest insight request lands in Ready or Failed."""

    def __init__(self, state: InsightState, visible: bool) -> None:
        super().__init__()
        self.state = state
        self.visible = visible
