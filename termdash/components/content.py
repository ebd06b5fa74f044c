"""Bordered frame around the active view."""

from rich.console import RenderableType
from rich.panel import Panel

from ..config import DEFAULT_LAYOUT, LayoutConfig
from ..events import Command, Event, Resize
from ..styles import StylePalette
from .base import Component


class ContentFrame(Component):
    """
    Frame for the active view's content.

    width/height hold the last size seen in a resize event (width is the
    inner width, inside the borders). The size actually drawn is passed to
    render() by the caller, which recomputes it on every frame.
    """

    def __init__(self, palette: StylePalette, layout: LayoutConfig = DEFAULT_LAYOUT):
        super().__init__(palette, layout)
        self.width = 60
        self.height = 20

    def update(self, event: Event) -> list[Command]:
        if isinstance(event, Resize):
            self.width = self.layout.inner_width(event.width)
            self.height = max(0, event.height - self.layout.chrome_height)
        return []

    def render(self, content: RenderableType, width: int, height: int) -> Panel:
        rule = self.palette.content
        return Panel(
            content,
            box=rule.box,
            style=rule.style,
            border_style=rule.border_style,
            padding=rule.padding,
            width=max(0, width),
            height=max(0, height),
        )
