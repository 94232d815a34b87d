"""Order form screen: customer details, menu, instructions and summary."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import Button, Footer, Header, Input, Label, Static, TextArea

from preorder.config import MIN_LEAD_MINUTES, MIN_TIME_REFRESH_SECONDS
from preorder.faults import contain_faults
from preorder.flow import OrderSession
from preorder.menu_picker import MenuPicker
from preorder.messages import format_rupees
from preorder.models import OrderForm
from preorder.rendering import format_agent_status, format_arrival_hint, format_field_error, format_order_summary
from preorder.validation import PHONE_LENGTH

if TYPE_CHECKING:
    from preorder.order_app import PreorderApp


class OrderScreen(Screen[None]):
    """Collects the order; submission is handed to the app's worker."""

    BINDINGS = [
        Binding("ctrl+s", "place_order", "Place Order", priority=True),
        ("escape", "back", "Back"),
    ]

    CSS = """
    #order-body {
        height: 1fr;
        padding: 0 2;
    }

    .section-title {
        text-style: bold;
        color: #f59e0b;
        margin-top: 1;
    }

    .field-error {
        height: auto;
    }

    #arrival-hint {
        color: $text-muted;
    }

    #menu {
        border: round $secondary;
        padding: 0 1;
        height: auto;
    }

    #menu:focus {
        border: round #f59e0b;
    }

    #instructions {
        height: 5;
    }

    #summary {
        border: tall $surface;
        padding: 0 1;
    }

    #agent-status {
        border: round $secondary;
        padding: 0 1;
        margin-top: 1;
    }

    #order-error {
        color: #ffb3b3;
        margin-top: 1;
    }

    #order-actions {
        dock: bottom;
        height: auto;
        padding: 0 2;
    }

    #place-order {
        width: 1fr;
    }
    """

    def __init__(self, session: OrderSession) -> None:
        super().__init__()
        self.session = session
        self._synced_form: OrderForm | None = None
        self._min_time_timer: Timer | None = None

    @property
    def preorder_app(self) -> PreorderApp:
        return self.app  # type: ignore[return-value]

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="order-body"):
            yield Static("Your Details", classes="section-title")
            yield Label("Name *")
            yield Input(placeholder="Enter your name", id="name")
            yield Static(id="name-error", classes="field-error")
            yield Label("Phone Number * (+91)")
            yield Input(placeholder="10-digit number", id="phone", restrict=r"[0-9]*", max_length=PHONE_LENGTH)
            yield Static(id="phone-error", classes="field-error")
            yield Label("Arrival Time * (HH:MM, 24-hour)")
            yield Input(placeholder="e.g. 19:30", id="arrival", max_length=5)
            yield Static(id="arrival-hint")
            yield Static(id="arrival-error", classes="field-error")

            yield Static("Menu", classes="section-title")
            yield Static(id="items-error", classes="field-error")
            yield MenuPicker(
                quantities=lambda: self.session.form.items,
                on_add=self._add_item,
                on_remove=self._remove_item,
                id="menu",
            )

            yield Static("Special Instructions", classes="section-title")
            yield TextArea(id="instructions")

            yield Static("Order Summary", classes="section-title")
            yield Static(id="summary")
            yield Static(id="agent-status")
            yield Static(id="order-error")
        with Horizontal(id="order-actions"):
            yield Button("Back", id="back")
            yield Button("Place Order", id="place-order", variant="warning")
        yield Footer()

    def on_mount(self) -> None:
        self.session.refresh_min_time()
        self._min_time_timer = self.set_interval(MIN_TIME_REFRESH_SECONDS, self._tick_min_time)
        self.refresh_view()
        self.query_one("#name", Input).focus()

    def on_unmount(self) -> None:
        if self._min_time_timer is not None:
            self._min_time_timer.stop()
            self._min_time_timer = None

    @contain_faults
    def _tick_min_time(self) -> None:
        self.session.refresh_min_time()
        self._refresh_arrival_hint()

    # Input handlers

    @on(Input.Changed, "#name")
    def _name_changed(self, event: Input.Changed) -> None:
        self.session.set_customer_name(event.value)
        self._refresh_errors()

    @on(Input.Changed, "#phone")
    def _phone_changed(self, event: Input.Changed) -> None:
        self.session.set_phone(event.value)
        self._refresh_errors()

    @on(Input.Changed, "#arrival")
    def _arrival_changed(self, event: Input.Changed) -> None:
        self.session.set_arrival_time(event.value)
        self._refresh_errors()

    @on(TextArea.Changed, "#instructions")
    def _instructions_changed(self, event: TextArea.Changed) -> None:
        self.session.set_special_instructions(event.text_area.text)

    @on(Button.Pressed, "#back")
    def _back_pressed(self) -> None:
        self.action_back()

    @on(Button.Pressed, "#place-order")
    def _place_order_pressed(self) -> None:
        self.action_place_order()

    def _add_item(self, item_id: str) -> None:
        self.session.add_item(item_id)
        self._refresh_cart()

    def _remove_item(self, item_id: str) -> None:
        self.session.remove_item(item_id)
        self._refresh_cart()

    # Actions

    def action_back(self) -> None:
        self.preorder_app.back_home()

    def action_place_order(self) -> None:
        self.preorder_app.place_order()

    # Rendering

    @contain_faults
    def refresh_view(self) -> None:
        if self.session.form is not self._synced_form:
            self._sync_inputs()
        self._refresh_arrival_hint()
        self._refresh_errors()
        self._refresh_cart()

        loading = self.session.loading
        self.query_one("#agent-status", Static).update(format_agent_status(loading))
        self.query_one("#order-error", Static).update(
            Text(self.session.error_message) if self.session.error_message else Text()
        )
        self.query_one("#back", Button).disabled = loading

    def _sync_inputs(self) -> None:
        form = self.session.form
        self._synced_form = form
        self.query_one("#name", Input).value = form.customer_name
        self.query_one("#phone", Input).value = form.phone
        self.query_one("#arrival", Input).value = form.arrival_time
        self.query_one("#instructions", TextArea).load_text(form.special_instructions)
        self.query_one(MenuPicker).refresh_rows()

    @contain_faults
    def _refresh_arrival_hint(self) -> None:
        hint = format_arrival_hint(self.session.min_time, MIN_LEAD_MINUTES)
        self.query_one("#arrival-hint", Static).update(hint)

    @contain_faults
    def _refresh_errors(self) -> None:
        errors = self.session.errors
        self.query_one("#name-error", Static).update(format_field_error(errors.customer_name))
        self.query_one("#phone-error", Static).update(format_field_error(errors.phone))
        self.query_one("#arrival-error", Static).update(format_field_error(errors.arrival_time))
        self.query_one("#items-error", Static).update(format_field_error(errors.items))

    @contain_faults
    def _refresh_cart(self) -> None:
        self.query_one("#summary", Static).update(format_order_summary(self.session.form.items))
        self._refresh_errors()

        button = self.query_one("#place-order", Button)
        if self.session.loading:
            button.label = "Processing Order..."
            button.disabled = True
            return
        button.disabled = False
        total = self.session.total_price
        count = self.session.total_quantity
        if total > 0:
            button.label = f"Place Order - {format_rupees(total)} ({count} items)"
        else:
            button.label = "Place Order"
