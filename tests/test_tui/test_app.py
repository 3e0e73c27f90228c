"""Tests for the TUI app, screens and widgets."""

from __future__ import annotations

from textual.widgets import Button

from cvereport.interaction.modal import Pending, Ready
from cvereport.interaction.page import ReportPage


def test_app_import():
    from cvereport.tui.app import ReportApp
    assert ReportApp.TITLE == "CVE Report"


def test_screens_import():
    from cvereport.tui.screens import InsightScreen
    assert InsightScreen is not None


def test_widgets_import():
    from cvereport.tui.widgets import (
        CodeBlockWidget,
        CvssChartWidget,
        NavHeaderWidget,
        SectionWidget,
        StepCarouselWidget,
    )
    assert all([
        CodeBlockWidget, CvssChartWidget, NavHeaderWidget,
        SectionWidget, StepCarouselWidget,
    ])


def test_app_bindings():
    from cvereport.tui.app import ReportApp
    keys = set()
    for b in ReportApp.BINDINGS:
        keys.add(b[0] if isinstance(b, tuple) else b.key)
    assert {"q", "m", "i", "o", "left", "right", "1", "2", "3", "4", "5"} <= keys


class TestReportApp:
    async def test_sections_mounted(self, report):
        from cvereport.tui.app import ReportApp

        app = ReportApp(ReportPage(report))
        async with app.run_test() as pilot:
            await pilot.pause()
            for sid in ("overview", "flaw", "exploit", "fix", "reflections"):
                assert app.query_one(f"#section-{sid}") is not None
            assert app.page.tracker.region_count == 5

    async def test_step_keys_move_carousel(self, report):
        from cvereport.tui.app import ReportApp

        page = ReportPage(report)
        app = ReportApp(page)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.query_one("#step-prev", Button).disabled
            await pilot.press("right")
            await pilot.pause()
            assert page.carousel.index == 1
            assert not app.query_one("#step-prev", Button).disabled
            await pilot.press("left", "left")
            await pilot.pause()
            assert page.carousel.index == 0

    async def test_menu_toggle(self, report):
        from cvereport.tui.app import ReportApp
        from cvereport.tui.widgets import NavHeaderWidget

        page = ReportPage(report)
        app = ReportApp(page)
        async with app.run_test() as pilot:
            await pilot.press("m")
            await pilot.pause()
            assert page.header.is_menu_open
            assert app.query_one("#nav", NavHeaderWidget).has_class("menu-open")
            await pilot.press("m")
            await pilot.pause()
            assert not page.header.is_menu_open

    async def test_explain_without_client(self, report):
        from cvereport.tui.app import ReportApp
        from cvereport.tui.screens import InsightScreen

        app = ReportApp(ReportPage(report))
        async with app.run_test() as pilot:
            await pilot.press("i")
            await pilot.pause()
            assert not isinstance(app.screen, InsightScreen)

    async def test_insight_screen(self, page, fake_source):
        from cvereport.tui.app import ReportApp
        from cvereport.tui.screens import InsightScreen

        app = ReportApp(page)
        async with app.run_test() as pilot:
            await pilot.press("i")
            await pilot.pause()
            assert isinstance(app.screen, InsightScreen)
            assert page.modal.state == Ready("hello")
            assert len(fake_source.prompts) == 1
            await pilot.press("escape")
            await pilot.pause()
            assert not isinstance(app.screen, InsightScreen)
            assert not page.modal.is_open

    async def test_number_key_scrolls_to_section(self, report):
        from cvereport.tui.app import ReportApp

        page = ReportPage(report)
        app = ReportApp(page)
        async with app.run_test(size=(100, 24)) as pilot:
            await pilot.pause()
            await pilot.press("4")
            await pilot.pause()
            app._sync_layout()
            assert page.tracker.active_section == "fix"

    async def test_reopen_shows_late_insight(self, report, make_source, bus):
        from cvereport.tui.app import ReportApp
        from cvereport.tui.screens import InsightScreen

        source = make_source(gated=True)
        page = ReportPage(report, insight_source=source, bus=bus)
        app = ReportApp(page)
        async with app.run_test() as pilot:
            await pilot.press("i")
            await pilot.pause()
            assert isinstance(app.screen, InsightScreen)
            assert page.modal.state == Pending()

            await pilot.press("escape")
            await pilot.pause()
            assert not page.modal.is_open

            source.release(0)
            for _ in range(20):
                if isinstance(page.modal.state, Ready):
                    break
                await pilot.pause()
            assert page.modal.state == Ready("hello #1")

            await pilot.press("o")
            await pilot.pause()
            assert isinstance(app.screen, InsightScreen)
            assert page.modal.is_open
            assert page.modal.state == Ready("hello #1")
            assert len(source.prompts) == 1

    async def test_reopen_before_request(self, page):
        from cvereport.tui.app import ReportApp
        from cvereport.tui.screens import InsightScreen

        app = ReportApp(page)
        async with app.run_test() as pilot:
            await pilot.press("o")
            await pilot.pause()
            assert not isinstance(app.screen, InsightScreen)
