"""Shared enums for the report sections."""

from __future__ import annotations

from enum import StrEnum


class SectionId(StrEnum):
    """Addressable top-level sections, in display order."""

    OVERVIEW = "overview"
    FLAW = "flaw"
    EXPLOIT = "exploit"
    FIX = "fix"
    REFLECTIONS = "reflections"

    @property
    def anchor(self) -> str:
        return f"#{self.value}"

    @property
    def label(self) -> str:
        return {
            SectionId.OVERVIEW: "Overview",
            SectionId.FLAW: "The Flaw",
            SectionId.EXPLOIT: "The Exploit",
            SectionId.FIX: "The Fix",
            SectionId.REFLECTIONS: "Reflections",
        }[self]


SECTION_ORDER: tuple[SectionId, ...] = tuple(SectionId)
