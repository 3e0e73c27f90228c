"""Tests for the navigation header and its projection."""

from __future__ import annotations

from cvereport.events.bus import EventType
from cvereport.interaction.nav import NavHeader, nav_view


class TestNavView:
    def test_links_in_section_order(self):
        view = nav_view("overview", False)
        assert [link.href for link in view.links] == [
            "#overview", "#flaw", "#exploit", "#fix", "#reflections",
        ]

    def test_exactly_one_active(self):
        view = nav_view("exploit", False)
        active = [link for link in view.links if link.active]
        assert len(active) == 1
        assert active[0].section_id == "exploit"
        assert active[0].label == "The Exploit"

    def test_menu_flag_passed_through(self):
        assert nav_view("flaw", True).menu_open is True


class TestNavHeader:
    def test_starts_closed(self):
        assert NavHeader().is_menu_open is False

    def test_toggle_twice_restores(self):
        header = NavHeader()
        assert header.on_menu_toggle() is True
        assert header.on_menu_toggle() is False
        assert header.is_menu_open is False

    def test_toggle_emits(self, bus):
        header = NavHeader(bus=bus)
        events = []
        bus.subscribe(EventType.MENU_TOGGLED, lambda e: events.append(e.data["open"]))
        header.on_menu_toggle()
        header.on_menu_toggle()
        assert events == [True, False]

    def test_view_reflects_menu(self):
        header = NavHeader()
        header.on_menu_toggle()
        view = header.view("fix")
        assert view.menu_open
        assert [link.active for link in view.links] == [False, False, False, True, False]
