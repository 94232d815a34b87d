"""Landing screen with the restaurant branding and the Order Now action."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual import on
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Static

from preorder.config import LOGO_IMAGE_URL
from preorder.constant import RESTAURANT_NAME, RESTAURANT_TAGLINE
from preorder.faults import contain_faults
from preorder.flow import OrderSession

if TYPE_CHECKING:
    from preorder.order_app import PreorderApp


class HomeScreen(Screen[None]):
    """Branding, the sample-mode notice and the way into the order form."""

    BINDINGS = [
        ("o", "order_now", "Order Now"),
    ]

    CSS = """
    #home-layout {
        align: center middle;
        height: 1fr;
    }

    #home-brand {
        width: auto;
        content-align: center middle;
        margin-bottom: 1;
    }

    #home-sample-notice {
        width: auto;
        color: #f59e0b;
        margin-bottom: 1;
    }

    #order-now {
        width: 30;
    }

    #home-footnote {
        width: auto;
        color: $text-muted;
        margin-top: 1;
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
        with Vertical(id="home-layout"):
            yield Static(id="home-brand")
            yield Static(id="home-sample-notice")
            yield Button("Order Now", id="order-now", variant="warning")
            yield Static("Pre-order and skip the wait", id="home-footnote")
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_view()
        self.query_one("#order-now", Button).focus()

    @on(Button.Pressed, "#order-now")
    def _order_now_pressed(self) -> None:
        self.action_order_now()

    def action_order_now(self) -> None:
        self.preorder_app.order_now()

    @contain_faults
    def refresh_view(self) -> None:
        brand = Text(justify="center")
        brand.append(RESTAURANT_NAME, style=f"bold white link {LOGO_IMAGE_URL}")
        brand.append(f"\n{RESTAURANT_TAGLINE}", style="bold #f59e0b")
        brand.append("\n\nOrder before you arrive", style="dim")
        self.query_one("#home-brand", Static).update(brand)

        notice = self.query_one("#home-sample-notice", Static)
        if self.session.sample_mode:
            notice.update("Sample mode active -- press Order Now to see a pre-filled order form")
            notice.display = True
        else:
            notice.update("")
            notice.display = False
