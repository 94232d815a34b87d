"""Outbound text: the agent order message and the WhatsApp share link."""

from __future__ import annotations

from urllib.parse import quote

from preorder.cart import selected_lines
from preorder.clock import format_time_for_display
from preorder.config import WHATSAPP_BASE_URL, WHATSAPP_PHONE
from preorder.models import OrderForm

# Characters JavaScript's encodeURIComponent leaves untouched.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def format_rupees(amount: int) -> str:
    return f"Rs.{amount}"


def build_agent_message(form: OrderForm, order_id: str, total: int) -> str:
    """Compose the plain-text order block sent to the agent."""
    item_lines = "\n".join(
        f"{quantity} x {item.name} - {format_rupees(item.price * quantity)}"
        for item, quantity in selected_lines(form.items)
    )
    return (
        f"Customer Name: {form.customer_name}\n"
        f"Phone: {form.phone}\n"
        f"Arrival Time: {format_time_for_display(form.arrival_time)}\n"
        f"Order ID: {order_id}\n"
        "\n"
        "Items:\n"
        f"{item_lines}\n"
        "\n"
        f"Total: {format_rupees(total)}\n"
        "\n"
        f"Special Instructions: {form.special_instructions or 'None'}"
    )


def build_whatsapp_url(message: str, phone: str = WHATSAPP_PHONE) -> str:
    """Deep link that opens WhatsApp with ``message`` pre-filled; empty if no message."""
    if not message:
        return ""
    return f"{WHATSAPP_BASE_URL}/{phone}?text={quote(message, safe=_URI_COMPONENT_SAFE)}"
