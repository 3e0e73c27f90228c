"""Navigation header widget — section links plus the menu toggle."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.widgets import Label, Static

from cvereport.interaction.nav import NavView


class NavHeaderWidget(Static):
    """One label per section; the active one is highlighted.

    Links sit in a row while the menu is closed and stack vertically when open.
    """

    DEFAULT_CSS = """
    NavHeaderWidget {
        height: auto;
        layout: horizontal;
        padding: 0 1;
        border-bottom: solid $primary;
    }
    NavHeaderWidget.menu-open {
        layout: vertical;
    }
    .nav-link {
        width: auto;
        padding: 0 2;
    }
    .nav-link.active {
        text-style: bold;
        color: $accent;
    }
    #menu-icon {
        width: 3;
    }
    """

    def __init__(self, view: NavView, **kwargs) -> None:
        super().__init__(**kwargs)
        self._view = view

    def compose(self) -> ComposeResult:
        yield Label(self._icon(self._view.menu_open), id="menu-icon")
        for i, link in enumerate(self._view.links, start=1):
            yield Label(
                f"{i} {link.label}",
                id=f"nav-{link.section_id}",
                classes="nav-link active" if link.active else "nav-link",
            )

    def on_mount(self) -> None:
        self.set_class(self._view.menu_open, "menu-open")

    def update_view(self, view: NavView) -> None:
        self._view = view
        for link in view.links:
            self.query_one(f"#nav-{link.section_id}", Label).set_class(link.active, "active")
        self.query_one("#menu-icon", Label).update(self._icon(view.menu_open))
        self.set_class(view.menu_open, "menu-open")

    @staticmethod
    def _icon(menu_open: bool) -> str:
        return "✕" if menu_open else "☰"
