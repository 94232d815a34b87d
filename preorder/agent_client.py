"""
HTTP client for the order dispatch agent.

The agent endpoint takes the composed order text plus an agent id and answers
with an envelope shaped like::

    {"success": true, "response": {"result": {...}, "message": "..."}, "error": null}

Field names inside ``result`` are not stable (``order_id`` vs ``orderId``), so
the reply is read tolerantly and every field has a local fallback.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from preorder.config import AGENT_API_KEY, AGENT_TIMEOUT_SECONDS, AGENT_URL
from preorder.models import AgentResponseData

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Something went wrong. Please try again."
NETWORK_FAILURE_MESSAGE = "Network error. Please check your connection and try again."


class AgentError(Exception):
    """Base error for agent calls."""


class AgentUnavailableError(AgentError):
    """The request never produced a response (DNS, refused connection, timeout...)."""


@dataclass(frozen=True)
class AgentReply:
    """Normalized reply envelope."""

    success: bool
    result: dict[str, Any] | None = None
    error: str | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.success and self.result is not None

    def failure_message(self) -> str:
        if self.error is not None:
            return self.error
        if self.message is not None:
            return self.message
        return GENERIC_FAILURE_MESSAGE


def _coerce_result(raw: Any) -> dict[str, Any] | None:
    if isinstance(raw, Mapping):
        return dict(raw)
    if isinstance(raw, str) and raw.strip():
        try:
            decoded = json.loads(raw)
        except ValueError:
            return {"whatsapp_message": raw}
        if isinstance(decoded, Mapping):
            return dict(decoded)
        return {"whatsapp_message": raw}
    return None


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def parse_envelope(payload: Any) -> AgentReply:
    """Turn whatever JSON the endpoint returned into an ``AgentReply``."""
    if not isinstance(payload, Mapping):
        return AgentReply(success=False)

    response = payload.get("response")
    result = None
    message = None
    if isinstance(response, Mapping):
        result = _coerce_result(response.get("result"))
        message = _optional_text(response.get("message"))

    return AgentReply(
        success=bool(payload.get("success")),
        result=result,
        error=_optional_text(payload.get("error")),
        message=message,
    )


def _pick(data: Mapping[str, Any], snake: str, camel: str, default: Any) -> Any:
    value = data.get(snake)
    if value is None:
        value = data.get(camel)
    if value is None:
        return default
    return value


def _coerce_total(value: Any, fallback: int) -> int:
    if isinstance(value, bool):
        return fallback
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return fallback


def resolve_confirmation(
    result: Mapping[str, Any],
    *,
    order_id: str,
    total_price: int,
    customer_name: str,
    arrival_time: str,
) -> AgentResponseData:
    """Read each confirmation field under both spellings, falling back to local values."""
    return AgentResponseData(
        whatsapp_message=str(_pick(result, "whatsapp_message", "whatsappMessage", "")),
        order_id=str(_pick(result, "order_id", "orderId", order_id)),
        total_price=_coerce_total(_pick(result, "total_price", "totalPrice", total_price), total_price),
        customer_name=str(_pick(result, "customer_name", "customerName", customer_name)),
        arrival_time=str(_pick(result, "arrival_time", "arrivalTime", arrival_time)),
    )


class AgentGateway:
    """Client for submitting composed orders to the agent endpoint."""

    def __init__(
        self,
        url: str = AGENT_URL,
        api_key: str = AGENT_API_KEY,
        timeout: float = AGENT_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.url = url
        self.api_key = api_key
        self.client = client or httpx.AsyncClient(timeout=timeout)

    async def submit_order(self, message: str, agent_id: str) -> AgentReply:
        """Send one order; raises ``AgentUnavailableError`` if no response arrives."""
        headers = {"x-api-key": self.api_key} if self.api_key else {}
        logger.info("agent_request url=%s agent_id=%s chars=%d", self.url, agent_id, len(message))
        try:
            response = await self.client.post(
                self.url,
                json={"message": message, "agent_id": agent_id},
                headers=headers,
            )
        except httpx.RequestError as exc:
            logger.warning("agent_unreachable error=%r", exc)
            raise AgentUnavailableError(str(exc)) from exc

        try:
            payload = response.json()
        except ValueError:
            logger.warning("agent_reply_not_json status=%s", response.status_code)
            payload = None

        reply = parse_envelope(payload)
        logger.info("agent_reply status=%s success=%s has_result=%s", response.status_code, reply.success, reply.result is not None)
        return reply

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()
