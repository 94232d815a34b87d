"""Keyboard-driven menu list with per-category tabs."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from rich.text import Text
from textual.binding import Binding
from textual.reactive import reactive
from textual.widgets import Static

from preorder.constant import CATEGORY_PRICE_HINTS
from preorder.data import MENU_BY_CATEGORY
from preorder.faults import contain_faults
from preorder.models import MenuItem
from preorder.rendering import format_category_tabs, format_menu_row


class MenuPicker(Static, can_focus=True):
    """Browse the catalog one category at a time and adjust quantities."""

    BINDINGS = [
        Binding("up,k", "move_cursor(-1)", "Previous", show=False),
        Binding("down,j", "move_cursor(1)", "Next", show=False),
        Binding("left,h", "switch_category(-1)", "Prev tab", show=False),
        Binding("right,l", "switch_category(1)", "Next tab", show=False),
        Binding("enter,plus", "add_current", "Add"),
        Binding("backspace,minus", "remove_current", "Remove"),
    ]

    category_index = reactive(0)
    cursor_index = reactive(0)

    def __init__(
        self,
        quantities: Callable[[], Mapping[str, int]],
        on_add: Callable[[str], None],
        on_remove: Callable[[str], None],
        *,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self.quantities = quantities
        self.on_add = on_add
        self.on_remove = on_remove
        self.categories = list(MENU_BY_CATEGORY)

    @property
    def current_category(self) -> str:
        return self.categories[self.category_index]

    def current_items(self) -> list[MenuItem]:
        return MENU_BY_CATEGORY[self.current_category]

    def current_item(self) -> MenuItem | None:
        items = self.current_items()
        if not items:
            return None
        return items[min(self.cursor_index, len(items) - 1)]

    def on_mount(self) -> None:
        self.refresh_rows()

    def on_focus(self) -> None:
        self.refresh_rows()

    def on_blur(self) -> None:
        self.refresh_rows()

    def action_move_cursor(self, delta: int) -> None:
        items = self.current_items()
        if not items:
            return
        self.cursor_index = (self.cursor_index + delta) % len(items)
        self.refresh_rows()

    def action_switch_category(self, delta: int) -> None:
        self.category_index = (self.category_index + delta) % len(self.categories)
        self.cursor_index = 0
        self.refresh_rows()

    def action_add_current(self) -> None:
        item = self.current_item()
        if item is None:
            return
        self.on_add(item.item_id)
        self.refresh_rows()

    def action_remove_current(self) -> None:
        item = self.current_item()
        if item is None:
            return
        self.on_remove(item.item_id)
        self.refresh_rows()

    @contain_faults
    def refresh_rows(self) -> None:
        quantities = self.quantities()
        lines = Text()
        lines.append_text(format_category_tabs(self.categories, self.current_category))
        lines.append(f"\n{CATEGORY_PRICE_HINTS.get(self.current_category, '')}\n", style="dim")

        for idx, item in enumerate(self.current_items()):
            lines.append("\n")
            selected = self.has_focus and idx == self.cursor_index
            lines.append_text(format_menu_row(item, quantities.get(item.item_id, 0), selected))

        if self.has_focus:
            lines.append("\n\n↑/↓ move  ←/→ tab  Enter/+ add  Backspace/- remove", style="dim")
        self.update(lines)
