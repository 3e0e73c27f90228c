"""Tests for the clamped step carousel."""

from __future__ import annotations

import random

import pytest

from cvereport.events.bus import EventType
from cvereport.interaction.carousel import StepCarousel

STEPS = ["a", "b", "c", "d", "e"]


class TestStepCarousel:
    def test_starts_at_zero(self):
        c = StepCarousel(STEPS)
        assert c.index == 0
        assert c.current == "a"
        assert c.label == "Step 1 of 5"

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            StepCarousel([])

    def test_start_is_clamped(self):
        assert StepCarousel(STEPS, start=99).index == 4
        assert StepCarousel(STEPS, start=-3).index == 0

    def test_retreat_at_zero_is_noop(self):
        c = StepCarousel(STEPS)
        assert c.retreat() == 0
        assert not c.can_retreat

    def test_advance_at_end_is_noop(self):
        c = StepCarousel(STEPS, start=4)
        assert c.advance() == 4
        assert not c.can_advance

    def test_advance_five_times_from_zero(self):
        c = StepCarousel(STEPS)
        for _ in range(5):
            c.advance()
        assert c.index == 4

    def test_retreat_five_times_from_end(self):
        c = StepCarousel(STEPS, start=4)
        for _ in range(5):
            c.retreat()
        assert c.index == 0

    def test_single_step(self):
        c = StepCarousel(["only"])
        c.advance()
        c.retreat()
        assert c.index == 0
        assert not c.can_advance
        assert not c.can_retreat

    def test_random_walk_stays_in_range(self):
        rng = random.Random(3141)
        c = StepCarousel(STEPS)
        for _ in range(500):
            rng.choice([c.advance, c.retreat])()
            assert 0 <= c.index <= len(STEPS) - 1

    def test_emits_only_on_change(self, bus):
        c = StepCarousel(STEPS, bus=bus)
        events = []
        bus.subscribe(EventType.STEP_CHANGED, lambda e: events.append(e.data))
        c.retreat()
        c.advance()
        assert events == [{"index": 1, "previous": 0, "count": 5}]
