"""Domain models for the pre-order form."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

VIEW_HOME = "home"
VIEW_ORDER = "order"
VIEW_CONFIRMATION = "confirmation"


@dataclass(frozen=True)
class MenuItem:
    """A fixed catalog entry priced in whole rupees."""

    item_id: str
    name: str
    price: int
    category: str


@dataclass
class OrderForm:
    """Everything the customer has entered for the current order."""

    customer_name: str = ""
    phone: str = ""
    arrival_time: str = ""
    items: dict[str, int] = field(default_factory=dict)
    special_instructions: str = ""


@dataclass
class AgentResponseData:
    """Confirmation details, either returned by the agent or filled in locally."""

    whatsapp_message: str | None = None
    order_id: str | None = None
    total_price: int | None = None
    customer_name: str | None = None
    arrival_time: str | None = None


@dataclass
class ValidationErrors:
    """One optional message per validated form field."""

    customer_name: str | None = None
    phone: str | None = None
    arrival_time: str | None = None
    items: str | None = None

    @property
    def is_valid(self) -> bool:
        return not self.messages()

    def messages(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name)}

    def clear(self, field_name: str) -> None:
        if getattr(self, field_name, None) is not None:
            setattr(self, field_name, None)
