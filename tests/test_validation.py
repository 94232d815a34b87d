from __future__ import annotations

from dataclasses import replace

import pytest

from preorder.models import OrderForm
from preorder.validation import sanitize_phone, validate_order_form, validate_phone

MIN_TIME = "18:25"


def test_complete_form_is_valid(rahul_form: OrderForm) -> None:
    errors = validate_order_form(rahul_form, MIN_TIME)
    assert errors.is_valid
    assert errors.messages() == {}


def test_empty_form_reports_every_field() -> None:
    errors = validate_order_form(OrderForm(), MIN_TIME)

    assert not errors.is_valid
    assert errors.customer_name == "Name must be at least 2 characters"
    assert errors.phone == "Enter a valid 10-digit phone number"
    assert errors.arrival_time == "Please select an arrival time"
    assert errors.items == "Please add at least one item to your order"


def test_empty_cart_fails_only_on_items(rahul_form: OrderForm) -> None:
    errors = validate_order_form(replace(rahul_form, items={}), MIN_TIME)
    assert set(errors.messages()) == {"items"}


@pytest.mark.parametrize("name", ["", " ", "R", "  R  "])
def test_short_names_fail(rahul_form: OrderForm, name: str) -> None:
    errors = validate_order_form(replace(rahul_form, customer_name=name), MIN_TIME)
    assert set(errors.messages()) == {"customer_name"}


def test_two_character_name_after_trim_passes(rahul_form: OrderForm) -> None:
    errors = validate_order_form(replace(rahul_form, customer_name="  Al "), MIN_TIME)
    assert errors.is_valid


@pytest.mark.parametrize(
    "phone",
    ["", "987654321", "98765432101", "+919876543210", "98765-43210", "987654321a", "9876543210\n", "٩٨٧٦٥٤٣٢١٠"],
)
def test_invalid_phones(phone: str) -> None:
    assert not validate_phone(phone)


@pytest.mark.parametrize("phone", ["9876543210", "0000000000", "1234567890"])
def test_ten_digit_phones_pass(phone: str) -> None:
    assert validate_phone(phone)


def test_sanitize_phone_keeps_ten_digits() -> None:
    assert sanitize_phone("+91 98765-43210") == "9198765432"
    assert sanitize_phone("98a76") == "9876"


def test_arrival_before_minimum_fails_with_12_hour_message(rahul_form: OrderForm) -> None:
    errors = validate_order_form(replace(rahul_form, arrival_time="18:24"), MIN_TIME)
    assert errors.arrival_time == "Arrival must be at least 25 minutes from now (after 6:25 PM)"


@pytest.mark.parametrize("arrival", ["18:25", "18:26", "23:59"])
def test_arrival_at_or_after_minimum_passes(rahul_form: OrderForm, arrival: str) -> None:
    assert validate_order_form(replace(rahul_form, arrival_time=arrival), MIN_TIME).is_valid


@pytest.mark.parametrize("arrival", ["7pm", "25:00", "19:5", "1930"])
def test_malformed_arrival_fails(rahul_form: OrderForm, arrival: str) -> None:
    errors = validate_order_form(replace(rahul_form, arrival_time=arrival), MIN_TIME)
    assert errors.arrival_time == "Enter arrival time as HH:MM (24-hour)"


def test_clearing_one_field_leaves_the_others() -> None:
    errors = validate_order_form(OrderForm(), MIN_TIME)
    errors.clear("phone")

    assert errors.phone is None
    assert set(errors.messages()) == {"customer_name", "arrival_time", "items"}
