"""Cart mutation and price helpers over the item-id -> quantity mapping."""

from __future__ import annotations

from collections.abc import Mapping

from preorder.data import MENU_BY_ID, MENU_ITEMS
from preorder.models import MenuItem, OrderForm


class UnknownMenuItemError(KeyError):
    """Raised when a cart operation names an id that is not in the catalog."""


def add_item(form: OrderForm, item_id: str) -> int:
    """Add one unit of an item and return its new quantity."""
    if item_id not in MENU_BY_ID:
        raise UnknownMenuItemError(item_id)
    quantity = form.items.get(item_id, 0) + 1
    form.items[item_id] = quantity
    return quantity


def remove_item(form: OrderForm, item_id: str) -> int:
    """Remove one unit of an item; the key is dropped with the last unit."""
    current = form.items.get(item_id, 0)
    if current <= 1:
        form.items.pop(item_id, None)
        return 0
    form.items[item_id] = current - 1
    return current - 1


def selected_lines(items: Mapping[str, int]) -> list[tuple[MenuItem, int]]:
    """Selected items with their quantities, in catalog order."""
    return [(item, items[item.item_id]) for item in MENU_ITEMS if items.get(item.item_id, 0) > 0]


def total_price(items: Mapping[str, int]) -> int:
    return sum(item.price * quantity for item, quantity in selected_lines(items))


def total_quantity(items: Mapping[str, int]) -> int:
    return sum(quantity for quantity in items.values())
