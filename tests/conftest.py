from __future__ import annotations

from datetime import datetime

import pytest

from preorder.agent_client import AgentReply
from preorder.flow import OrderSession
from preorder.models import OrderForm

FIXED_NOW = datetime(2026, 10, 19, 18, 0)


class FakeGateway:
    def __init__(self, reply: AgentReply | None = None, error: Exception | None = None) -> None:
        self.reply = reply if reply is not None else AgentReply(success=True, result={})
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def submit_order(self, message: str, agent_id: str) -> AgentReply:
        self.calls.append((message, agent_id))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def session(gateway: FakeGateway) -> OrderSession:
    return OrderSession(
        gateway,
        agent_id="agent-test",
        clock=lambda: FIXED_NOW,
        order_id_factory=lambda: "NID-LOCAL",
    )


@pytest.fixture
def rahul_form() -> OrderForm:
    return OrderForm(
        customer_name="Rahul Sharma",
        phone="9876543210",
        arrival_time="19:30",
        items={"pasta-alfredo": 2, "burger-tandoori": 1, "burger-cheeseburst": 1},
        special_instructions="",
    )
