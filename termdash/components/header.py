"""Title bar across the top of the screen."""

from rich.align import Align
from rich.text import Text

from ..config import DEFAULT_LAYOUT, LayoutConfig
from ..events import Command, Event, Resize
from ..styles import StylePalette
from .base import Component

DEFAULT_TITLE = "TermDash"


class Header(Component):
    def __init__(
        self,
        palette: StylePalette,
        layout: LayoutConfig = DEFAULT_LAYOUT,
        title: str = DEFAULT_TITLE,
    ):
        super().__init__(palette, layout)
        self.title = title
        self.width = 80

    def update(self, event: Event) -> list[Command]:
        if isinstance(event, Resize):
            self.width = max(0, event.width)
        return []

    def render(self) -> Align:
        rule = self.palette.header
        return Align(
            Text(self.title, style=rule.style),
            align=rule.align,
            style=rule.style,
            vertical="middle",
            width=self.width,
            height=self.layout.header_height,
        )
