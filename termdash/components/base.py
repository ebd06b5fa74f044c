"""Common interface of the screen chrome components."""

from ..config import DEFAULT_LAYOUT, LayoutConfig
from ..events import Command, Event
from ..styles import StylePalette


class Component:
    """Piece of persistent chrome that tracks the terminal size it was last given."""

    def __init__(self, palette: StylePalette, layout: LayoutConfig = DEFAULT_LAYOUT):
        self.palette = palette
        self.layout = layout

    def init(self) -> list[Command]:
        return []

    def update(self, event: Event) -> list[Command]:
        return []
