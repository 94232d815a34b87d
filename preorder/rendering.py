"""Rich text rendering for menu rows, summaries and status badges."""

from __future__ import annotations

from collections.abc import Mapping

from rich.text import Text

from preorder.cart import selected_lines, total_price
from preorder.clock import format_time_for_display
from preorder.constant import CATEGORY_LABELS
from preorder.messages import format_rupees
from preorder.models import MenuItem

_ACCENT = "bold #f59e0b"


def badge_style(active: bool) -> str:
    """Return a consistent badge style for the agent status."""
    if active:
        return "bold #0b0f19 on #f59e0b"
    return "bold #0b1f0f on #5fbf72"


def format_agent_status(active: bool) -> Text:
    text = Text()
    text.append("Powered by AI\n", style="dim")
    text.append("● ", style="#f59e0b" if active else "#5fbf72")
    text.append("Order Dispatch Agent  ")
    text.append(" Processing " if active else " Ready ", style=badge_style(active))
    return text


def format_category_tabs(categories: list[str], current: str) -> Text:
    text = Text()
    for idx, category in enumerate(categories):
        if idx:
            text.append("  ")
        label = f" {CATEGORY_LABELS.get(category, category.title())} "
        if category == current:
            text.append(label, style="bold #0b0f19 on #f59e0b")
        else:
            text.append(label, style="dim")
    return text


def format_menu_row(item: MenuItem, quantity: int, selected: bool) -> Text:
    """Render one menu line with a pointer, price and quantity control."""
    text = Text()
    text.append("➤ " if selected else "  ")
    text.append(item.name, style="bold" if quantity else "")
    text.append(f"  {format_rupees(item.price)}", style=_ACCENT)
    if quantity:
        text.append(f"   [-] {quantity} [+]", style=_ACCENT)
    else:
        text.append("   ADD", style="dim")
    return text


def format_order_summary(items: Mapping[str, int]) -> Text:
    """Selected lines in catalog order followed by the total, or the empty-cart notice."""
    lines = selected_lines(items)
    if not lines:
        text = Text("Your cart is empty\n", style="dim")
        text.append("Add items from the menu above", style="dim italic")
        return text

    text = Text()
    for item, quantity in lines:
        text.append(f"{quantity}x {item.name}")
        text.append(f"  {format_rupees(item.price * quantity)}\n", style=_ACCENT)
    text.append("Total", style="bold")
    text.append(f"  {format_rupees(total_price(items))}", style=_ACCENT)
    return text


def format_summary_lines(lines: list[tuple[MenuItem, int]]) -> Text:
    text = Text()
    for idx, (item, quantity) in enumerate(lines):
        if idx:
            text.append("\n")
        text.append(f"{quantity}x {item.name}")
        text.append(f"  {format_rupees(item.price * quantity)}", style=_ACCENT)
    return text


def format_field_error(message: str | None) -> Text:
    if not message:
        return Text()
    return Text(f"! {message}", style="#ffb3b3")


def format_arrival_hint(min_time: str, lead_minutes: int) -> str:
    return f"Earliest arrival: {format_time_for_display(min_time)} (at least {lead_minutes} minutes from now)"
