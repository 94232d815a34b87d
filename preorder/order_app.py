"""Main Textual app class."""

from __future__ import annotations

import logging

from textual.app import App
from textual.binding import Binding
from textual.screen import Screen
from textual.worker import Worker, WorkerState

from preorder.agent_client import AgentGateway
from preorder.confirmation_screen import ConfirmationScreen
from preorder.constant import RESTAURANT_NAME, RESTAURANT_TAGLINE
from preorder.fault_modal import FaultModal
from preorder.flow import OrderGateway, OrderSession
from preorder.home_screen import HomeScreen
from preorder.logging_config import configure_logging
from preorder.models import VIEW_CONFIRMATION, VIEW_ORDER
from preorder.order_screen import OrderScreen

logger = logging.getLogger(__name__)


class PreorderApp(App):
    """A Textual app for pre-ordering pasta and burgers before arrival."""

    TITLE = RESTAURANT_NAME
    SUB_TITLE = RESTAURANT_TAGLINE

    BINDINGS = [
        Binding("f2", "toggle_sample_mode", "Sample data", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, gateway: OrderGateway | None = None, session: OrderSession | None = None) -> None:
        super().__init__()
        self.gateway = gateway if gateway is not None else AgentGateway()
        self.session = session if session is not None else OrderSession(self.gateway)
        self.session.on_change = self.refresh_current_view
        self._submit_worker: Worker[bool] | None = None

    def on_mount(self) -> None:
        logger.info("app_mount")
        self.push_screen(self._screen_for_view())

    async def on_unmount(self) -> None:
        if isinstance(self.gateway, AgentGateway):
            await self.gateway.close()

    def _screen_for_view(self) -> Screen:
        if self.session.view == VIEW_ORDER:
            return OrderScreen(self.session)
        if self.session.view == VIEW_CONFIRMATION:
            return ConfirmationScreen(self.session)
        return HomeScreen(self.session)

    def show_current_view(self) -> None:
        self.switch_screen(self._screen_for_view())

    def refresh_current_view(self) -> None:
        for screen in reversed(self.screen_stack):
            refresh = getattr(screen, "refresh_view", None)
            if refresh is not None:
                refresh()
                return

    def _update_sub_title(self) -> None:
        if self.session.sample_mode:
            self.sub_title = f"{RESTAURANT_TAGLINE} · Sample data"
        else:
            self.sub_title = RESTAURANT_TAGLINE

    # Navigation

    def order_now(self) -> None:
        self.session.order_now()
        self.show_current_view()

    def back_home(self) -> None:
        if self.session.loading:
            return
        self.session.back()
        self.show_current_view()

    def new_order(self) -> None:
        self.session.new_order()
        self.show_current_view()

    def action_toggle_sample_mode(self) -> None:
        if self.session.loading:
            return
        self.session.set_sample_mode(not self.session.sample_mode)
        self._update_sub_title()
        self.refresh_current_view()

    # Submission

    def place_order(self) -> None:
        if self._submit_worker is not None and not self._submit_worker.is_finished:
            logger.info("submit_blocked reason=in_flight")
            return
        self._submit_worker = self.run_worker(self._submit_order(), name="submit-order", exit_on_error=False)

    async def _submit_order(self) -> bool:
        placed = await self.session.submit()
        if placed:
            self.show_current_view()
        else:
            self.refresh_current_view()
        return placed

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        if event.worker is self._submit_worker and event.state == WorkerState.ERROR:
            error = event.worker.error
            logger.error("submit_worker_failed error=%r", error)
            if error is not None:
                self.report_fault(error)

    # Fault boundary

    def report_fault(self, error: BaseException) -> None:
        """Show a recoverable fault modal on top of the current screen."""
        if isinstance(self.screen, FaultModal):
            return
        self.push_screen(FaultModal(error), callback=lambda _: self.refresh_current_view())


def main() -> None:
    """Run the Textual application."""
    configure_logging()
    PreorderApp().run()


if __name__ == "__main__":
    main()
