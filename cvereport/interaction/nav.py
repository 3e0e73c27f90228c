"""Navigation header — menu flag plus a pure projection to nav links."""

from __future__ import annotations

from dataclasses import dataclass

from cvereport.events.bus import Event, EventBus, EventType
from cvereport.models.types import SECTION_ORDER, SectionId


@dataclass(frozen=True)
class NavLink:
    href: str
    label: str
    active: bool = False

    @property
    def section_id(self) -> str:
        return self.href.removeprefix("#")


@dataclass(frozen=True)
class NavView:
    links: tuple[NavLink, ...]
    menu_open: bool


def nav_view(
    active_section: str,
    is_menu_open: bool,
    sections: tuple[SectionId, ...] = SECTION_ORDER,
) -> NavView:
    """Project ``(active_section, is_menu_open)`` onto the header links."""
    links = tuple(
        NavLink(href=s.anchor, label=s.label, active=(s.value == str(active_section)))
        for s in sections
    )
    return NavView(links=links, menu_open=is_menu_open)


class NavHeader:
    """Owns the mobile-menu open flag."""

    def __init__(self, *, bus: EventBus | None = None) -> None:
        self._menu_open = False
        self._bus = bus

    @property
    def is_menu_open(self) -> bool:
        return self._menu_open

    def on_menu_toggle(self) -> bool:
        self._menu_open = not self._menu_open
        if self._bus is not None:
            self._bus.emit(Event(EventType.MENU_TOGGLED, {"open": self._menu_open}))
        return self._menu_open

    def view(self, active_section: str) -> NavView:
        return nav_view(active_section, self._menu_open)
