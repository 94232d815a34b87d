"""Logging setup: the terminal belongs to Textual, so records go to a file and the devtools console."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.logging import TextualHandler

from preorder.config import LOG_LEVEL, LOG_PATH

_LOGGING_CONFIGURED = False

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(log_path: str = LOG_PATH, level: str = LOG_LEVEL) -> None:
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    root_logger = logging.getLogger("preorder")
    root_logger.setLevel(level.upper())
    root_logger.propagate = False

    try:
        path = Path(log_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        # Logging must never interfere with app flow.
        file_handler = None
    if file_handler is not None:
        file_handler.setFormatter(logging.Formatter(_FORMAT))
        root_logger.addHandler(file_handler)

    root_logger.addHandler(TextualHandler())

    _LOGGING_CONFIGURED = True
