"""Navigation menu on the left of the screen."""

from dataclasses import dataclass

from rich.panel import Panel
from rich.text import Text

from ..config import DEFAULT_LAYOUT, LayoutConfig
from ..events import Command, Event, Resize
from ..styles import StylePalette
from ..views import ViewId
from .base import Component


@dataclass(frozen=True)
class SidebarItem:
    view_id: ViewId
    label: str
    key: str


# Display order matches ViewId order
SIDEBAR_ITEMS = (
    SidebarItem(ViewId.DASHBOARD, "📊 Dashboard", "1"),
    SidebarItem(ViewId.DATA, "📁 Data Browser", "2"),
    SidebarItem(ViewId.SETTINGS, "⚙️ Settings", "3"),
    SidebarItem(ViewId.HELP, "❓ Help", "4"),
)

SHORTCUTS = ("q - Quit", "1-4 - Navigate", "Ctrl+C - Quit")


class Sidebar(Component):
    def __init__(
        self,
        palette: StylePalette,
        layout: LayoutConfig = DEFAULT_LAYOUT,
        items: tuple[SidebarItem, ...] = SIDEBAR_ITEMS,
    ):
        super().__init__(palette, layout)
        self.items = items
        self.width = layout.sidebar_width
        self.height = 20

    @property
    def item_width(self) -> int:
        return max(0, self.width - 4)

    def update(self, event: Event) -> list[Command]:
        if isinstance(event, Resize):
            self.height = max(0, event.height - self.layout.chrome_height)
        return []

    def _render_item(self, item: SidebarItem, active: bool) -> Text:
        rule = self.palette.button_style(active)
        line = Text(f"{item.key} {item.label}", style=rule.style)
        line.truncate(self.item_width, overflow="ellipsis", pad=True)
        return line

    def render_menu(self, current: ViewId) -> Text:
        """Menu text with the item for `current` highlighted."""
        muted = self.palette.muted_text.style
        menu = Text()
        menu.append("Navigation", style=self.palette.subtitle.style)
        menu.append("\n\n")

        for item in self.items:
            menu.append_text(self._render_item(item, item.view_id == current))
            menu.append("\n")

        menu.append("\n")
        menu.append("─" * self.item_width)
        menu.append("\n\n")

        menu.append("Shortcuts:", style=muted)
        for shortcut in SHORTCUTS:
            menu.append("\n")
            menu.append(shortcut, style=muted)
        return menu

    def render(self, current: ViewId) -> Panel:
        rule = self.palette.sidebar
        return Panel(
            self.render_menu(current),
            box=rule.box,
            style=rule.style,
            border_style=rule.border_style,
            padding=rule.padding,
            width=self.width,
            height=self.height,
        )
