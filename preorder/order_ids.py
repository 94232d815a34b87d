"""Local order identifiers, used until the agent supplies its own."""

from __future__ import annotations

import random

from preorder.config import ORDER_ID_ALPHABET, ORDER_ID_PREFIX, ORDER_ID_SUFFIX_LENGTH

_rng = random.SystemRandom()


def generate_order_id(rng: random.Random | None = None) -> str:
    """Return e.g. ``NID-7QK2A``."""
    source = rng or _rng
    suffix = "".join(source.choice(ORDER_ID_ALPHABET) for _ in range(ORDER_ID_SUFFIX_LENGTH))
    return f"{ORDER_ID_PREFIX}{suffix}"
