"""Step carousel widget — one exploit step at a time with Prev/Next."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Label, Static

from cvereport.interaction.carousel import StepCarousel
from cvereport.models.report import ExploitStep
from cvereport.tui.widgets.code_block import CodeBlockWidget


class StepCarouselWidget(Static):
    """Renders the carousel's current step; buttons are disabled at the bounds."""

    DEFAULT_CSS = """
    StepCarouselWidget {
        height: auto;
        border: solid $secondary;
        padding: 0 1;
    }
    #step-controls {
        height: 3;
        align: center middle;
    }
    #step-label {
        width: 16;
        content-align: center middle;
    }
    #step-title {
        text-style: bold;
    }
    """

    def __init__(self, carousel: StepCarousel[ExploitStep], **kwargs) -> None:
        super().__init__(**kwargs)
        self.carousel = carousel

    def compose(self) -> ComposeResult:
        yield Label("", id="step-title")
        yield Label("", id="step-content")
        yield CodeBlockWidget("", lexer="text", id="step-code")
        with Horizontal(id="step-controls"):
            yield Button("◀ Prev", id="step-prev")
            yield Label("", id="step-label")
            yield Button("Next ▶", id="step-next")

    def on_mount(self) -> None:
        self.refresh_step()

    def refresh_step(self) -> None:
        step = self.carousel.current
        self.query_one("#step-title", Label).update(Text(step.title))
        self.query_one("#step-content", Label).update(Text(step.content))
        code = self.query_one("#step-code", CodeBlockWidget)
        code.update(Text(step.code))
        code.display = bool(step.code)
        self.query_one("#step-label", Label).update(self.carousel.label)
        self.query_one("#step-prev", Button).disabled = not self.carousel.can_retreat
        self.query_one("#step-next", Button).disabled = not self.carousel.can_advance

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "step-prev":
            self.carousel.retreat()
        elif event.button.id == "step-next":
            self.carousel.advance()
        else:
            return
        event.stop()
        self.refresh_step()
