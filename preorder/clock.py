"""Arrival-time helpers for "HH:MM" 24-hour wall-clock strings."""

from __future__ import annotations

import re
from datetime import datetime, timedelta

from preorder.config import MIN_LEAD_MINUTES

_TIME_24H_RE = re.compile(r"([01][0-9]|2[0-3]):[0-5][0-9]")
_LOOSE_TIME_RE = re.compile(r"([0-9]{1,2}):([0-9]{2})")


def min_arrival_time(now: datetime | None = None) -> str:
    """Earliest arrival accepted for an order placed at ``now``."""
    moment = (now or datetime.now()) + timedelta(minutes=MIN_LEAD_MINUTES)
    return moment.strftime("%H:%M")


def is_valid_time(value: str) -> bool:
    return bool(_TIME_24H_RE.fullmatch(value))


def normalize_time_input(raw: str) -> str:
    """Zero-pad "H:MM" to "HH:MM"; anything else is returned stripped but unchanged."""
    value = raw.strip()
    match = _LOOSE_TIME_RE.fullmatch(value)
    if match is None:
        return value
    return f"{int(match.group(1)):02d}:{match.group(2)}"


def format_time_for_display(time24: str) -> str:
    """Render "19:05" as "7:05 PM"; empty input renders as empty."""
    if not time24:
        return ""
    hour_str, _, minute_str = time24.partition(":")
    hour = int(hour_str)
    suffix = "PM" if hour >= 12 else "AM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minute_str} {suffix}"
