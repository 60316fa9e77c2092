"""Textual app for picking one row when fzf is unavailable."""

from __future__ import annotations

from typing import ClassVar

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import OptionList, Static
from textual.widgets.option_list import Option


class _SelectRowApp(App[None]):
    CSS = """
    Screen {
        layout: vertical;
    }

    #header {
        margin-bottom: 1;
        text-style: bold;
    }

    #options {
        height: 1fr;
        border: round #808080;
    }

    #hint {
        color: $text-muted;
    }
    """

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("enter", "confirm", show=False),
        Binding("q", "cancel", show=False),
        Binding("escape", "cancel", show=False),
    ]

    def __init__(self, lines: list[str], header: str) -> None:
        super().__init__()
        self._lines = lines
        self._header = header
        self.selection: str | None = None

    def compose(self) -> ComposeResult:
        yield Static(f"[{self._header}]", id="header", markup=False)
        yield OptionList(*[Option(Text.from_ansi(line)) for line in self._lines], id="options")
        yield Static("Use ↑/↓ to move, Enter to select, q/Esc to cancel.", id="hint")

    def on_mount(self) -> None:
        self.query_one(OptionList).focus()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.selection = self._lines[event.option_index]
        self.exit()

    def action_confirm(self) -> None:
        options = self.query_one(OptionList)
        if options.highlighted is None:
            return
        self.selection = self._lines[options.highlighted]
        self.exit()

    def action_cancel(self) -> None:
        self.selection = None
        self.exit()


def run_textual_select(lines: list[str], header: str) -> str | None:
    """Run Textual picker and return the selected line."""
    app = _SelectRowApp(list(lines), header)
    app.run()
    return app.selection
