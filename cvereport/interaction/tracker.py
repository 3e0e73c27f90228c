"""SectionTracker — midpoint-crossing detection of the active section.

The host (a browser, the Textual app, a test) supplies region geometry.
Each registered region has a bounds provider returning ``(top, bottom)``
in viewport coordinates, or ``None`` while it is not laid out. The host
calls :meth:`SectionTracker.on_layout` whenever layout or scroll position
changes.

A region intersects when the horizontal line at half the viewport height
lies within it, the same as an intersection observer whose root margins
are shrunk by 50% at the top and bottom. Only changes of that flag are
reported, and the first evaluation after registering always reports.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

from cvereport.events.bus import Event, EventBus, EventType

logger = logging.getLogger(__name__)

Bounds = tuple[float, float]
BoundsProvider = Callable[[], Bounds | None]


@dataclass(frozen=True)
class IntersectionEntry:
    """One crossing event for a region."""

    section_id: str
    is_intersecting: bool


class SectionTracker:
    """Exposes the id of the section currently crossing the viewport midpoint."""

    def __init__(
        self,
        section_ids: Iterable[str],
        *,
        bus: EventBus | None = None,
        initial: str | None = None,
    ) -> None:
        self._declared: tuple[str, ...] = tuple(str(s) for s in section_ids)
        if not self._declared:
            raise ValueError("SectionTracker needs at least one section id")
        start = str(initial) if initial is not None else self._declared[0]
        if start not in self._declared:
            raise ValueError(f"Unknown section id: {start}")
        self._active = start
        self._bus = bus
        self._regions: dict[str, BoundsProvider] = {}
        self._intersecting: dict[str, bool] = {}

    @property
    def active_section(self) -> str:
        return self._active

    @property
    def section_ids(self) -> tuple[str, ...]:
        return self._declared

    @property
    def region_count(self) -> int:
        return len(self._regions)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_region(
        self, section_id: str, bounds_provider: BoundsProvider,
    ) -> Callable[[], None]:
        """Observe one section. Returns a callable that stops observing it."""
        section_id = str(section_id)
        if section_id not in self._declared:
            raise ValueError(f"Unknown section id: {section_id}")
        self._regions[section_id] = bounds_provider
        self._intersecting.pop(section_id, None)

        def unregister() -> None:
            if self._regions.get(section_id) is bounds_provider:
                del self._regions[section_id]
                self._intersecting.pop(section_id, None)

        return unregister

    def mount(self, regions: Mapping[str, BoundsProvider]) -> None:
        """Register every region in *regions*."""
        for section_id, provider in regions.items():
            self.register_region(section_id, provider)

    def disconnect(self) -> None:
        """Stop observing all regions."""
        self._regions.clear()
        self._intersecting.clear()

    # ------------------------------------------------------------------
    # Crossing detection
    # ------------------------------------------------------------------

    def on_layout(self, viewport_height: float) -> str:
        """Re-evaluate all regions against the viewport midpoint.

        Returns the active section id after processing the batch.
        """
        midpoint = viewport_height / 2
        entries: list[IntersectionEntry] = []
        for section_id, provider in list(self._regions.items()):
            bounds = provider()
            if bounds is None:
                continue
            top, bottom = bounds
            hit = top <= midpoint <= bottom
            if self._intersecting.get(section_id) != hit:
                self._intersecting[section_id] = hit
                entries.append(IntersectionEntry(section_id, hit))
        return self.handle_entries(entries)

    def handle_entries(self, entries: Iterable[IntersectionEntry]) -> str:
        """Apply a batch of crossing events. The last intersecting entry wins."""
        previous = self._active
        for entry in entries:
            if entry.is_intersecting and entry.section_id in self._declared:
                self._active = entry.section_id
        if self._active != previous:
            logger.debug("Active section %s -> %s", previous, self._active)
            if self._bus is not None:
                self._bus.emit(Event(
                    EventType.SECTION_ACTIVATED,
                    {"section": self._active, "previous": previous},
                ))
        return self._active
