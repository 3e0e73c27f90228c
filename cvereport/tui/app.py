"""ReportApp — interactive Textual viewer for one vulnerability report."""

from __future__ import annotations

import logging
from collections.abc import Callable

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widget import Widget
from textual.widgets import Footer, Header

from cvereport.events.bus import Event, EventType
from cvereport.insight.client import InsightClient
from cvereport.interaction.page import ReportPage
from cvereport.interaction.tracker import Bounds
from cvereport.logging.session_logger import SessionLogger
from cvereport.models.types import SECTION_ORDER, SectionId
from cvereport.tui.messages import InsightResolved, MenuToggled, SectionActivated, StepChanged
from cvereport.tui.screens.insight import InsightScreen
from cvereport.tui.widgets.nav_header import NavHeaderWidget
from cvereport.tui.widgets.section import SectionWidget
from cvereport.tui.widgets.step_carousel import StepCarouselWidget

logger = logging.getLogger(__name__)


class ReportApp(App):
    """Scrollable report with a live nav header, step carousel and insight overlay."""

    TITLE = "CVE Report"

    CSS = """
    #sections {
        height: 1fr;
    }
    """

    BINDINGS = [
        ("m", "toggle_menu", "Menu"),
        Binding("left", "prev_step", "Prev step", priority=True),
        Binding("right", "next_step", "Next step", priority=True),
        ("i", "explain", "Explain"),
        ("o", "reopen_insight", "Reopen insight"),
        ("1", "goto('overview')", "Overview"),
        ("2", "goto('flaw')", "Flaw"),
        ("3", "goto('exploit')", "Exploit"),
        ("4", "goto('fix')", "Fix"),
        ("5", "goto('reflections')", "Reflections"),
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        page: ReportPage,
        *,
        insight_client: InsightClient | None = None,
        session_logger: SessionLogger | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.page = page
        self._insight_client = insight_client
        self._session_logger = session_logger
        self._insight_title = "AI Insight"
        self.sub_title = page.report.heading

        bus = page.bus
        bus.subscribe(EventType.SECTION_ACTIVATED, self._relay_section)
        bus.subscribe(EventType.STEP_CHANGED, self._relay_step)
        bus.subscribe(EventType.MENU_TOGGLED, self._relay_menu)
        bus.subscribe(EventType.INSIGHT_RESOLVED, self._relay_insight)

    def compose(self) -> ComposeResult:
        yield Header()
        yield NavHeaderWidget(self.page.nav, id="nav")
        with VerticalScroll(id="sections"):
            for section in SECTION_ORDER:
                yield SectionWidget(section, self.page.report, self.page.carousel)
        yield Footer()

    async def on_mount(self) -> None:
        if self._session_logger is not None:
            await self._session_logger.open()

        scroll = self.query_one("#sections", VerticalScroll)
        self.page.tracker.mount({
            section.value: self._bounds_of(self.query_one(f"#section-{section.value}"), scroll)
            for section in SECTION_ORDER
        })
        self.watch(scroll, "scroll_y", self._sync_layout, init=False)
        self.call_after_refresh(self._sync_layout)

    async def on_unmount(self) -> None:
        self.page.tracker.disconnect()
        if self._insight_client is not None:
            await self._insight_client.close()
        if self._session_logger is not None:
            await self._session_logger.close()

    def on_resize(self) -> None:
        self.call_after_refresh(self._sync_layout)

    # ------------------------------------------------------------------
    # Section tracking
    # ------------------------------------------------------------------

    @staticmethod
    def _bounds_of(widget: Widget, scroll: VerticalScroll) -> Callable[[], Bounds | None]:
        def bounds() -> Bounds | None:
            region = widget.virtual_region
            if region.height == 0:
                return None
            top = region.y - scroll.scroll_y
            return (top, top + region.height)

        return bounds

    def _sync_layout(self) -> None:
        scroll = self.query_one("#sections", VerticalScroll)
        self.page.tracker.on_layout(scroll.size.height)

    # ------------------------------------------------------------------
    # Bus -> message relays
    # ------------------------------------------------------------------

    def _relay_section(self, event: Event) -> None:
        self.post_message(SectionActivated(event.data["section"], event.data["previous"]))

    def _relay_step(self, event: Event) -> None:
        self.post_message(StepChanged(event.data["index"], event.data["count"]))

    def _relay_menu(self, event: Event) -> None:
        self.post_message(MenuToggled(event.data["open"]))

    def _relay_insight(self, event: Event) -> None:
        if self.page.modal is not None:
            self.post_message(InsightResolved(self.page.modal.state, event.data["visible"]))

    # ------------------------------------------------------------------
    # Message handlers
    # ------------------------------------------------------------------

    def on_section_activated(self, message: SectionActivated) -> None:
        self.query_one("#nav", NavHeaderWidget).update_view(self.page.nav)

    def on_menu_toggled(self, message: MenuToggled) -> None:
        self.query_one("#nav", NavHeaderWidget).update_view(self.page.nav)

    def on_step_changed(self, message: StepChanged) -> None:
        self.query_one("#carousel", StepCarouselWidget).refresh_step()

    def on_insight_resolved(self, message: InsightResolved) -> None:
        if not message.visible:
            self.notify("Insight ready. Press o to view it.")

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_toggle_menu(self) -> None:
        self.page.header.on_menu_toggle()

    def action_prev_step(self) -> None:
        self.page.carousel.retreat()

    def action_next_step(self) -> None:
        self.page.carousel.advance()

    def action_goto(self, section_id: str) -> None:
        scroll = self.query_one("#sections", VerticalScroll)
        scroll.scroll_to_widget(self.query_one(f"#section-{section_id}"), top=True, animate=False)

    def action_explain(self) -> None:
        section = SectionId(self.page.tracker.active_section)
        if self.page.modal is None:
            self.notify(
                "Set CVEREPORT_INSIGHT_API_KEY to enable insights.", severity="warning",
            )
            return
        if section is SectionId.REFLECTIONS:
            self.notify("No insight is available for this section.", severity="warning")
            return
        logger.info("Requesting insight for %s", section.value)
        task = self.page.explain(section)
        self._insight_title = f"AI Insight: {section.label}"
        self.push_screen(InsightScreen(self.page.modal, task, title=self._insight_title))

    def action_reopen_insight(self) -> None:
        if self.page.modal is None or isinstance(self.screen, InsightScreen):
            return
        task = self.page.modal.reopen()
        if task is None:
            self.notify("No insight requested yet. Press i first.", severity="warning")
            return
        self.push_screen(InsightScreen(self.page.modal, task, title=self._insight_title))
