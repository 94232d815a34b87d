"""Confirmation screen shown after a successful submission."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Static

from preorder.faults import contain_faults
from preorder.flow import OrderSession
from preorder.messages import format_rupees
from preorder.rendering import format_agent_status, format_summary_lines

if TYPE_CHECKING:
    from preorder.order_app import PreorderApp


class ConfirmationScreen(Screen[None]):
    """Order details, the WhatsApp preview and the share link."""

    BINDINGS = [
        ("w", "send_whatsapp", "Send via WhatsApp"),
        ("n", "new_order", "Place Another Order"),
    ]

    CSS = """
    #confirm-body {
        height: 1fr;
        padding: 0 2;
    }

    #confirm-title {
        text-style: bold;
        color: #5fbf72;
        margin-top: 1;
    }

    .section-title {
        text-style: bold;
        color: #f59e0b;
        margin-top: 1;
    }

    #confirm-details, #confirm-items, #whatsapp-preview {
        border: tall $surface;
        padding: 0 1;
    }

    #agent-status {
        border: round $secondary;
        padding: 0 1;
        margin-top: 1;
    }

    #confirm-actions {
        height: auto;
        margin-top: 1;
    }

    #confirm-actions Button {
        width: 1fr;
    }
    """

    def __init__(self, session: OrderSession) -> None:
        super().__init__()
        self.session = session

    @property
    def preorder_app(self) -> PreorderApp:
        return self.app  # type: ignore[return-value]

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="confirm-body"):
            yield Static(id="confirm-title")
            yield Static(id="confirm-details")
            yield Static("Order Summary", classes="section-title")
            yield Static(id="confirm-items")
            yield Static("WhatsApp Message Preview", id="whatsapp-title", classes="section-title")
            yield Static(id="whatsapp-preview")
            with Horizontal(id="confirm-actions"):
                yield Button("Send via WhatsApp", id="send-whatsapp", variant="success")
                yield Button("Place Another Order", id="new-order")
            yield Static(id="agent-status")
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_view()

    @on(Button.Pressed, "#send-whatsapp")
    def _send_pressed(self) -> None:
        self.action_send_whatsapp()

    @on(Button.Pressed, "#new-order")
    def _new_order_pressed(self) -> None:
        self.action_new_order()

    def action_send_whatsapp(self) -> None:
        url = self.session.confirmation().whatsapp_url
        if not url:
            return
        self.app.open_url(url)
        self.notify(url, title="Opening WhatsApp", timeout=30)

    def action_new_order(self) -> None:
        self.preorder_app.new_order()

    @contain_faults
    def refresh_view(self) -> None:
        details = self.session.confirmation()

        title = Text("✓ Order Placed!\n", style="bold #5fbf72")
        title.append("Your order has been sent to the restaurant", style="dim")
        self.query_one("#confirm-title", Static).update(title)

        info = Text()
        rows = (
            ("Order ID", details.order_id),
            ("Name", details.customer_name),
            ("Arrival", details.arrival_time),
            ("Total", format_rupees(details.total_price)),
        )
        for idx, (label, value) in enumerate(rows):
            if idx:
                info.append("\n")
            info.append(f"{label:<10}", style="dim")
            info.append(str(value), style="bold")
        self.query_one("#confirm-details", Static).update(info)

        items = format_summary_lines(details.lines)
        if details.special_instructions:
            items.append("\n\nSpecial Instructions\n", style="dim")
            items.append(details.special_instructions, style="italic")
        self.query_one("#confirm-items", Static).update(items)

        has_message = bool(details.whatsapp_message)
        self.query_one("#whatsapp-title", Static).display = has_message
        preview = self.query_one("#whatsapp-preview", Static)
        preview.display = has_message
        preview.update(Text(details.whatsapp_message))
        self.query_one("#send-whatsapp", Button).display = bool(details.whatsapp_url)

        self.query_one("#agent-status", Static).update(format_agent_status(False))
