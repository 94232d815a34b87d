"""Recoverable "something went wrong" modal screen."""

from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Button, Static


class FaultModal(ModalScreen[None]):
    """Shows a rendering fault and lets the user reset just that fault."""

    BINDINGS = [
        ("escape", "retry", "Try again"),
        ("enter", "retry", "Try again"),
    ]

    CSS = """
    FaultModal {
        align: center middle;
        background: $background 60%;
    }

    #fault-dialog {
        width: 56;
        height: auto;
        border: round $error;
        background: $panel;
        padding: 1 2;
    }

    #fault-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #fault-detail {
        color: #dddddd;
        margin-bottom: 1;
    }
    """

    def __init__(self, error: BaseException) -> None:
        super().__init__()
        self.error_text = str(error) or type(error).__name__

    def compose(self) -> ComposeResult:
        with Container(id="fault-dialog"):
            yield Static("Something went wrong", id="fault-title")
            yield Static(self.error_text, id="fault-detail", markup=False)
            yield Button("Try again", id="fault-retry", variant="warning")

    @on(Button.Pressed, "#fault-retry")
    def _retry_pressed(self) -> None:
        self.action_retry()

    def action_retry(self) -> None:
        self.dismiss(None)
