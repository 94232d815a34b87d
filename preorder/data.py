"""Static menu catalog and canned sample data."""

from __future__ import annotations

from preorder.constant import MENU_ENTRIES, SAMPLE_CONFIRMATION_FIELDS, SAMPLE_ORDER_FIELDS
from preorder.models import AgentResponseData, MenuItem, OrderForm

MENU_ITEMS: tuple[MenuItem, ...] = tuple(
    MenuItem(
        item_id=str(entry["id"]),
        name=str(entry["name"]),
        price=int(entry["price"]),  # type: ignore[arg-type]
        category=str(entry["category"]),
    )
    for entry in MENU_ENTRIES
)

MENU_BY_ID: dict[str, MenuItem] = {item.item_id: item for item in MENU_ITEMS}

MENU_BY_CATEGORY: dict[str, list[MenuItem]] = {}
for _item in MENU_ITEMS:
    MENU_BY_CATEGORY.setdefault(_item.category, []).append(_item)
del _item


def sample_order_form(arrival_time: str) -> OrderForm:
    """Build a fresh copy of the canned sample order with the given arrival time."""
    return OrderForm(
        customer_name=str(SAMPLE_ORDER_FIELDS["customer_name"]),
        phone=str(SAMPLE_ORDER_FIELDS["phone"]),
        arrival_time=arrival_time,
        items=dict(SAMPLE_ORDER_FIELDS["items"]),  # type: ignore[call-overload]
        special_instructions=str(SAMPLE_ORDER_FIELDS["special_instructions"]),
    )


def sample_confirmation() -> AgentResponseData:
    """Return the canned confirmation shown in sample mode."""
    return AgentResponseData(**SAMPLE_CONFIRMATION_FIELDS)  # type: ignore[arg-type]
