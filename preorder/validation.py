"""Client-side validation of the order form."""

from __future__ import annotations

import re

from preorder.cart import total_quantity
from preorder.clock import format_time_for_display, is_valid_time
from preorder.config import MIN_LEAD_MINUTES
from preorder.models import OrderForm, ValidationErrors

PHONE_LENGTH = 10
_PHONE_RE = re.compile(r"[0-9]{10}")


def validate_phone(phone: str) -> bool:
    return _PHONE_RE.fullmatch(phone) is not None


def sanitize_phone(raw: str) -> str:
    """Keep digits only, truncated to the expected length."""
    return "".join(ch for ch in raw if ch in "0123456789")[:PHONE_LENGTH]


def validate_order_form(form: OrderForm, min_time: str) -> ValidationErrors:
    """Check every field and return the full set of messages."""
    errors = ValidationErrors()

    if len(form.customer_name.strip()) < 2:
        errors.customer_name = "Name must be at least 2 characters"

    if not validate_phone(form.phone):
        errors.phone = "Enter a valid 10-digit phone number"

    if not form.arrival_time:
        errors.arrival_time = "Please select an arrival time"
    elif not is_valid_time(form.arrival_time):
        errors.arrival_time = "Enter arrival time as HH:MM (24-hour)"
    elif form.arrival_time < min_time:
        errors.arrival_time = (
            f"Arrival must be at least {MIN_LEAD_MINUTES} minutes from now "
            f"(after {format_time_for_display(min_time)})"
        )

    if total_quantity(form.items) == 0:
        errors.items = "Please add at least one item to your order"

    return errors
