"""Insight screen — modal overlay showing an AI explanation."""

from __future__ import annotations

import asyncio

from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Label, Static

from cvereport.display.report import insight_renderable
from cvereport.interaction.modal import InsightModal, InsightState


class InsightScreen(ModalScreen[None]):
    """Shows ``Pending`` until the request task finishes, then its outcome."""

    BINDINGS = [
        ("escape", "close", "Close"),
    ]

    DEFAULT_CSS = """
    InsightScreen {
        align: center middle;
    }
    #insight-dialog {
        width: 80%;
        max-width: 100;
        height: auto;
        max-height: 80%;
        border: thick $accent;
        background: $surface;
        padding: 1 2;
    }
    #insight-title {
        text-style: bold;
        margin: 0 0 1 0;
    }
    #insight-body-scroll {
        height: auto;
        max-height: 30;
    }
    #insight-close {
        margin: 1 0 0 0;
    }
    """

    def __init__(
        self,
        modal: InsightModal,
        task: asyncio.Task[InsightState],
        title: str = "AI Insight",
    ) -> None:
        super().__init__()
        self._modal = modal
        self._task = task
        self._title = title

    def compose(self) -> ComposeResult:
        with Vertical(id="insight-dialog"):
            yield Label(f"✨ {self._title}", id="insight-title")
            with VerticalScroll(id="insight-body-scroll"):
                yield Static(insight_renderable(self._modal.state), id="insight-body")
            yield Button("Close", id="insight-close", variant="primary")

    def on_mount(self) -> None:
        self.run_worker(self._await_result(), exclusive=True)

    async def _await_result(self) -> None:
        await asyncio.wait({self._task})
        self.show_state(self._modal.state)

    def show_state(self, state: InsightState) -> None:
        self.query_one("#insight-body", Static).update(insight_renderable(state))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "insight-close":
            self.action_close()

    def action_close(self) -> None:
        self._modal.close()
        self.dismiss(None)
