"""Order session: form state plus the home -> order -> confirmation flow."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from preorder.agent_client import NETWORK_FAILURE_MESSAGE, AgentReply, AgentUnavailableError, resolve_confirmation
from preorder.cart import add_item, remove_item, selected_lines, total_price, total_quantity
from preorder.clock import format_time_for_display, min_arrival_time, normalize_time_input
from preorder.config import AGENT_ID
from preorder.data import sample_confirmation, sample_order_form
from preorder.messages import build_agent_message, build_whatsapp_url
from preorder.models import (
    VIEW_CONFIRMATION,
    VIEW_HOME,
    VIEW_ORDER,
    AgentResponseData,
    MenuItem,
    OrderForm,
    ValidationErrors,
)
from preorder.order_ids import generate_order_id
from preorder.validation import sanitize_phone, validate_order_form

logger = logging.getLogger(__name__)


class OrderGateway(Protocol):
    async def submit_order(self, message: str, agent_id: str) -> AgentReply: ...


@dataclass(frozen=True)
class ConfirmationDetails:
    """Values shown on the confirmation screen after fallbacks are applied."""

    order_id: str
    customer_name: str
    arrival_time: str
    total_price: int
    whatsapp_message: str
    whatsapp_url: str
    lines: list[tuple[MenuItem, int]]
    special_instructions: str


class OrderSession:
    """All state for one customer's visit to the ordering app."""

    def __init__(
        self,
        gateway: OrderGateway,
        *,
        agent_id: str = AGENT_ID,
        clock: Callable[[], datetime] = datetime.now,
        order_id_factory: Callable[[], str] = generate_order_id,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.gateway = gateway
        self.on_change = on_change
        self.agent_id = agent_id
        self.clock = clock
        self.order_id_factory = order_id_factory

        self.view = VIEW_HOME
        self.sample_mode = False
        self.loading = False
        self.error_message = ""
        self.order_id = ""
        self.agent_response: AgentResponseData | None = None
        self.form = OrderForm()
        self.errors = ValidationErrors()
        self.min_time = min_arrival_time(self.clock())

    @property
    def total_price(self) -> int:
        return total_price(self.form.items)

    @property
    def total_quantity(self) -> int:
        return total_quantity(self.form.items)

    def refresh_min_time(self) -> str:
        self.min_time = min_arrival_time(self.clock())
        return self.min_time

    # Transitions

    def order_now(self) -> None:
        if self.view != VIEW_HOME:
            return
        if self.sample_mode:
            self.form = sample_order_form(self.refresh_min_time())
        self.errors = ValidationErrors()
        self.error_message = ""
        self.view = VIEW_ORDER
        logger.info("view_change to=order sample=%s", self.sample_mode)

    def back(self) -> None:
        if self.view != VIEW_ORDER or self.loading:
            return
        self.error_message = ""
        self.view = VIEW_HOME
        logger.info("view_change to=home")

    def new_order(self) -> None:
        if self.view != VIEW_CONFIRMATION:
            return
        self.form = OrderForm()
        self.errors = ValidationErrors()
        self.agent_response = None
        self.order_id = ""
        self.error_message = ""
        self.view = VIEW_HOME
        logger.info("view_change to=home reason=new_order")

    def set_sample_mode(self, enabled: bool) -> None:
        """Flip the sample flag; on the order view the form follows it immediately."""
        if self.loading:
            return
        self.sample_mode = enabled
        if self.view == VIEW_ORDER:
            self.form = sample_order_form(self.refresh_min_time()) if enabled else OrderForm()
            self.errors = ValidationErrors()
        logger.info("sample_mode enabled=%s view=%s", enabled, self.view)

    # Form edits

    def set_customer_name(self, value: str) -> None:
        self.form.customer_name = value
        self.errors.clear("customer_name")

    def set_phone(self, value: str) -> None:
        self.form.phone = sanitize_phone(value)
        self.errors.clear("phone")

    def set_arrival_time(self, value: str) -> None:
        self.form.arrival_time = normalize_time_input(value)
        self.errors.clear("arrival_time")

    def set_special_instructions(self, value: str) -> None:
        self.form.special_instructions = value

    def add_item(self, item_id: str) -> int:
        quantity = add_item(self.form, item_id)
        self.errors.clear("items")
        return quantity

    def remove_item(self, item_id: str) -> int:
        return remove_item(self.form, item_id)

    # Submission

    def validate(self) -> bool:
        self.errors = validate_order_form(self.form, self.min_time)
        return self.errors.is_valid

    async def submit(self) -> bool:
        """Validate and place the order; True when the confirmation view is reached."""
        logger.info("submit_enter view=%s loading=%s sample=%s", self.view, self.loading, self.sample_mode)
        if self.view != VIEW_ORDER or self.loading:
            return False
        if not self.validate():
            logger.info("submit_blocked reason=validation fields=%s", sorted(self.errors.messages()))
            return False

        self.loading = True
        self.error_message = ""
        self.order_id = self.order_id_factory()
        if self.on_change is not None:
            self.on_change()
        try:
            if self.sample_mode:
                self.agent_response = sample_confirmation()
                self.view = VIEW_CONFIRMATION
                logger.info("submit_sample order_id=%s", self.order_id)
                return True
            return await self._submit_to_agent()
        finally:
            self.loading = False

    async def _submit_to_agent(self) -> bool:
        current_total = self.total_price
        message = build_agent_message(self.form, self.order_id, current_total)
        try:
            reply = await self.gateway.submit_order(message, self.agent_id)
        except AgentUnavailableError:
            self.error_message = NETWORK_FAILURE_MESSAGE
            logger.warning("submit_failed order_id=%s reason=network", self.order_id)
            return False

        if not reply.ok:
            self.error_message = reply.failure_message()
            logger.warning("submit_failed order_id=%s reason=agent error=%r", self.order_id, self.error_message)
            return False

        self.agent_response = resolve_confirmation(
            reply.result or {},
            order_id=self.order_id,
            total_price=current_total,
            customer_name=self.form.customer_name,
            arrival_time=format_time_for_display(self.form.arrival_time),
        )
        self.view = VIEW_CONFIRMATION
        logger.info("submit_confirmed order_id=%s agent_order_id=%s", self.order_id, self.agent_response.order_id)
        return True

    def confirmation(self) -> ConfirmationDetails:
        data = self.agent_response or AgentResponseData()
        message = data.whatsapp_message or ""
        return ConfirmationDetails(
            order_id=data.order_id if data.order_id is not None else self.order_id,
            customer_name=data.customer_name if data.customer_name is not None else self.form.customer_name,
            arrival_time=(
                data.arrival_time if data.arrival_time is not None else format_time_for_display(self.form.arrival_time)
            ),
            total_price=data.total_price if data.total_price is not None else self.total_price,
            whatsapp_message=message,
            whatsapp_url=build_whatsapp_url(message),
            lines=selected_lines(self.form.items),
            special_instructions=self.form.special_instructions,
        )
