"""Fault boundary for screen rendering."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any, Protocol, TypeVar

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class FaultReporter(Protocol):
    def report_fault(self, error: BaseException) -> None: ...


def contain_faults(method: F) -> F:
    """
    Catch any exception raised while a screen renders and hand it to the app.

    The wrapped method must belong to a widget or screen whose ``app`` offers
    ``report_fault``; the app then shows a recoverable fault modal instead of
    tearing down the whole UI.
    """

    @functools.wraps(method)
    def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
        try:
            return method(self, *args, **kwargs)
        except Exception as exc:
            logger.exception("render_fault where=%s.%s", type(self).__name__, method.__name__)
            reporter: FaultReporter = self.app
            reporter.report_fault(exc)
            return None

    return wrapper  # type: ignore[return-value]
