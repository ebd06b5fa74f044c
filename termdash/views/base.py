"""Shared behaviour of the four dashboard views."""

from enum import Enum

from rich.text import Text

from ..config import DEFAULT_LAYOUT, LayoutConfig
from ..events import Command, Event, Resize
from ..styles import StylePalette


class ViewId(Enum):
    """Available views, in navigation order"""

    DASHBOARD = "dashboard"
    DATA = "data"
    SETTINGS = "settings"
    HELP = "help"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class BaseView:
    """
    Static content provider shown inside the content frame.

    Subclasses supply the heading, title, description and render(). The
    cached width/height follow resize events; rendering does not depend on
    them yet.
    """

    view_id: ViewId
    heading: str = ""

    def __init__(self, palette: StylePalette, layout: LayoutConfig = DEFAULT_LAYOUT):
        self.palette = palette
        self.layout = layout
        self.width = 60
        self.height = 20

    def init(self) -> list[Command]:
        return []

    def update(self, event: Event) -> list[Command]:
        if isinstance(event, Resize):
            self.width = self.layout.inner_width(event.width)
            self.height = max(0, event.height - self.layout.chrome_height)
        return []

    def render(self) -> Text:
        raise NotImplementedError("Subclasses must implement render()")

    def title(self) -> str:
        raise NotImplementedError("Subclasses must implement title()")

    def description(self) -> str:
        raise NotImplementedError("Subclasses must implement description()")

    # Text building helpers

    def _begin(self) -> Text:
        text = Text()
        text.append(self.heading, style=self.palette.title.style)
        text.append("\n\n")
        return text

    def _section(self, text: Text, label: str) -> None:
        text.append(label, style=self.palette.subtitle.style)
        text.append("\n")

    def _checked(self, text: Text, label: str) -> None:
        text.append("• ")
        text.append("✓", style=self.palette.success_text.style)
        text.append(f" {label}\n")

    def _shortcut(self, text: Text, key: str, action: str) -> None:
        text.append("• ")
        text.append(key, style=self.palette.muted_text.style)
        text.append(f" - {action}\n")

    def _finish(self, text: Text) -> Text:
        text.rstrip()
        return text
