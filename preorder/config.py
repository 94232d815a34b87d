"""Runtime configuration defaults for the agent call, sharing and logging."""

from __future__ import annotations

import os

AGENT_ID = os.environ.get("PREORDER_AGENT_ID", "699ba20ff7b4833211504832")
AGENT_URL = os.environ.get("PREORDER_AGENT_URL", "http://localhost:3000/api/agent")
AGENT_API_KEY = os.environ.get("PREORDER_AGENT_API_KEY", "")
AGENT_TIMEOUT_SECONDS = float(os.environ.get("PREORDER_AGENT_TIMEOUT", "120"))

# Restaurant number that receives the forwarded confirmation.
WHATSAPP_PHONE = os.environ.get("PREORDER_WHATSAPP_PHONE", "919876543210")
WHATSAPP_BASE_URL = "https://wa.me"

ORDER_ID_PREFIX = "NID-"
ORDER_ID_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
ORDER_ID_SUFFIX_LENGTH = 5

MIN_LEAD_MINUTES = 25
MIN_TIME_REFRESH_SECONDS = 60

LOGO_IMAGE_URL = "https://asset.lyzr.app/pGb7L6O7"

LOG_PATH = os.environ.get("PREORDER_LOG_PATH", "/tmp/preorder-debug.log")
LOG_LEVEL = os.environ.get("PREORDER_LOG_LEVEL", "INFO")
