"""Verbatim code block widget."""

from __future__ import annotations

from rich.syntax import Syntax
from textual.widgets import Static


class CodeBlockWidget(Static):
    """Monospace, whitespace-preserving code listing."""

    DEFAULT_CSS = """
    CodeBlockWidget {
        height: auto;
        border: round $panel;
        padding: 0 1;
        margin: 0 0 1 0;
    }
    """

    def __init__(self, code: str, *, lexer: str = "php", title: str = "", **kwargs) -> None:
        super().__init__(
            Syntax(code, lexer, theme="monokai", word_wrap=False, background_color="default"),
            **kwargs,
        )
        self.code = code
        if title:
            self.border_title = title
