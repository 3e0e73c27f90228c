"""StepCarousel — clamped index into the exploit walkthrough."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Generic, TypeVar

from cvereport.events.bus import Event, EventBus, EventType

T = TypeVar("T")


class StepCarousel(Generic[T]):
    """Holds ``0 <= index <= count - 1`` with no wraparound."""

    def __init__(
        self, steps: Sequence[T], *, bus: EventBus | None = None, start: int = 0,
    ) -> None:
        if not steps:
            raise ValueError("StepCarousel needs at least one step")
        self._steps = tuple(steps)
        self._bus = bus
        self._index = self._clamp(start)

    @property
    def index(self) -> int:
        return self._index

    @property
    def count(self) -> int:
        return len(self._steps)

    @property
    def current(self) -> T:
        return self._steps[self._index]

    @property
    def can_advance(self) -> bool:
        return self._index < self.count - 1

    @property
    def can_retreat(self) -> bool:
        return self._index > 0

    @property
    def label(self) -> str:
        return f"Step {self._index + 1} of {self.count}"

    def advance(self) -> int:
        return self._move(min(self._index + 1, self.count - 1))

    def retreat(self) -> int:
        return self._move(max(self._index - 1, 0))

    def _clamp(self, index: int) -> int:
        return max(0, min(index, self.count - 1))

    def _move(self, new_index: int) -> int:
        if new_index != self._index:
            previous = self._index
            self._index = new_index
            if self._bus is not None:
                self._bus.emit(Event(
                    EventType.STEP_CHANGED,
                    {"index": new_index, "previous": previous, "count": self.count},
                ))
        return self._index
