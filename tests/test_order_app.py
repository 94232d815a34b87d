from __future__ import annotations

from datetime import datetime, timedelta

from preorder.agent_client import AgentReply
from preorder.confirmation_screen import ConfirmationScreen
from preorder.fault_modal import FaultModal
from preorder.flow import OrderSession
from preorder.home_screen import HomeScreen
from preorder.models import VIEW_CONFIRMATION, VIEW_HOME, VIEW_ORDER
from preorder.order_app import PreorderApp
from preorder.order_screen import OrderScreen
from preorder.rendering import format_arrival_hint

from conftest import FIXED_NOW, FakeGateway


class MovingClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def advance(self, minutes: int) -> None:
        self.now += timedelta(minutes=minutes)

    def __call__(self) -> datetime:
        return self.now


def make_app(gateway: FakeGateway, clock=None) -> PreorderApp:
    session = OrderSession(gateway, clock=clock or (lambda: FIXED_NOW), order_id_factory=lambda: "NID-LOCAL")
    return PreorderApp(gateway=gateway, session=session)


async def test_sample_mode_walkthrough_skips_the_agent() -> None:
    gateway = FakeGateway()
    app = make_app(gateway)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert isinstance(app.screen, HomeScreen)

        await pilot.press("f2")
        assert app.session.sample_mode

        await pilot.press("o")
        await pilot.pause()
        assert isinstance(app.screen, OrderScreen)
        assert app.session.form.customer_name == "Rahul Sharma"
        assert app.session.form.arrival_time == "18:25"

        await pilot.press("ctrl+s")
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert isinstance(app.screen, ConfirmationScreen)
        assert app.session.view == VIEW_CONFIRMATION
        assert app.session.confirmation().order_id == "NID-A7K2M"
        assert gateway.calls == []

        await pilot.press("n")
        await pilot.pause()
        assert isinstance(app.screen, HomeScreen)
        assert app.session.view == VIEW_HOME


async def test_incomplete_form_stays_on_order_screen() -> None:
    gateway = FakeGateway()
    app = make_app(gateway)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("o")
        await pilot.pause()

        await pilot.press("ctrl+s")
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert isinstance(app.screen, OrderScreen)
        assert app.session.view == VIEW_ORDER
        assert app.session.errors.phone == "Enter a valid 10-digit phone number"
        assert gateway.calls == []


async def test_agent_failure_keeps_the_form() -> None:
    gateway = FakeGateway(reply=AgentReply(success=False))
    app = make_app(gateway)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("o")
        await pilot.pause()
        await pilot.press("r", "a", "h", "u", "l")
        await pilot.pause()
        app.session.set_phone("9876543210")
        app.session.set_arrival_time("19:30")
        app.session.add_item("burger-classic")

        await pilot.press("ctrl+s")
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert isinstance(app.screen, OrderScreen)
        assert app.session.error_message == "Something went wrong. Please try again."
        assert app.session.form.customer_name == "rahul"
        assert len(gateway.calls) == 1


async def test_fault_modal_resets_without_losing_the_session() -> None:
    gateway = FakeGateway()
    app = make_app(gateway)
    async with app.run_test() as pilot:
        await pilot.pause()
        app.report_fault(RuntimeError("render exploded"))
        await pilot.pause()
        assert isinstance(app.screen, FaultModal)

        await pilot.press("escape")
        await pilot.pause()
        assert isinstance(app.screen, HomeScreen)
        assert app.session.view == VIEW_HOME


async def test_confirmation_render_fault_is_contained(monkeypatch) -> None:
    def broken(*args, **kwargs):
        raise ValueError("cannot render items")

    monkeypatch.setattr("preorder.confirmation_screen.format_summary_lines", broken)
    gateway = FakeGateway()
    app = make_app(gateway)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("f2")
        await pilot.press("o")
        await pilot.pause()
        await pilot.press("ctrl+s")
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert isinstance(app.screen, FaultModal)
        assert app.session.view == VIEW_CONFIRMATION
        assert app.session.agent_response is not None


async def test_cart_render_fault_on_order_screen_is_contained(monkeypatch) -> None:
    gateway = FakeGateway()
    app = make_app(gateway)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("o")
        await pilot.pause()

        def broken(*args, **kwargs):
            raise ValueError("summary exploded")

        monkeypatch.setattr("preorder.order_screen.format_order_summary", broken)
        app.screen.query_one("#menu").focus()
        await pilot.pause()
        await pilot.press("enter")
        await pilot.pause()

        assert isinstance(app.screen, FaultModal)
        assert app.session.view == VIEW_ORDER
        assert app.session.total_quantity == 1


async def test_min_time_follows_the_clock_while_ordering(monkeypatch) -> None:
    hints: list[str] = []

    def recording_hint(min_time: str, lead_minutes: int) -> str:
        hints.append(min_time)
        return format_arrival_hint(min_time, lead_minutes)

    monkeypatch.setattr("preorder.order_screen.format_arrival_hint", recording_hint)
    clock = MovingClock(FIXED_NOW)
    app = make_app(FakeGateway(), clock=clock)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.session.min_time == "18:25"

        clock.advance(5)
        await pilot.press("o")
        await pilot.pause()
        assert app.session.min_time == "18:30"
        assert hints[-1] == "18:30"

        clock.advance(10)
        screen = app.screen
        assert isinstance(screen, OrderScreen)
        screen._tick_min_time()
        await pilot.pause()
        assert app.session.min_time == "18:40"
        assert hints[-1] == "18:40"


def test_arrival_hint_text() -> None:
    assert format_arrival_hint("18:40", 25) == "Earliest arrival: 6:40 PM (at least 25 minutes from now)"


async def test_min_time_timer_stops_when_leaving_order_view() -> None:
    app = make_app(FakeGateway())
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("o")
        await pilot.pause()
        screen = app.screen
        assert isinstance(screen, OrderScreen)
        assert screen._min_time_timer is not None

        await pilot.press("escape")
        await pilot.pause()
        await pilot.pause()

        assert isinstance(app.screen, HomeScreen)
        assert screen._min_time_timer is None


async def test_arrival_hint_fault_on_tick_is_contained(monkeypatch) -> None:
    app = make_app(FakeGateway())
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("o")
        await pilot.pause()

        def broken(*args, **kwargs):
            raise ValueError("hint exploded")

        monkeypatch.setattr("preorder.order_screen.format_arrival_hint", broken)
        screen = app.screen
        assert isinstance(screen, OrderScreen)
        screen._tick_min_time()
        await pilot.pause()

        assert isinstance(app.screen, FaultModal)
        assert app.session.view == VIEW_ORDER


async def test_send_whatsapp_opens_link_through_the_app(monkeypatch) -> None:
    opened: list[str] = []
    app = make_app(FakeGateway())
    monkeypatch.setattr(app, "open_url", lambda url, **kwargs: opened.append(url))
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("f2")
        await pilot.press("o")
        await pilot.pause()
        await pilot.press("ctrl+s")
        await app.workers.wait_for_complete()
        await pilot.pause()
        assert isinstance(app.screen, ConfirmationScreen)

        await pilot.press("w")
        await pilot.pause()

        assert len(opened) == 1
        assert opened[0].startswith("https://wa.me/")
        assert "text=NEW%20ORDER" in opened[0]
