"""
TermDash application controller.

Owns the application state, routes resize and key events to the chrome
components and the active view, and composes the screen.
"""

import io
import logging
from dataclasses import dataclass

from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.table import Table
from rich.text import Text

from .components import ContentFrame, Header, Sidebar
from .config import DEFAULT_LAYOUT, LayoutConfig, RunConfig
from .events import Command, Event, KeyPress, Resize, batch, quit_command
from .exceptions import ConfigurationError
from .styles import StylePalette, create_palette
from .views import BaseView, ViewId, create_views

logger = logging.getLogger(__name__)

FAREWELL = "Thanks for using TermDash! 👋"

QUIT_KEYS = frozenset({"q", "ctrl+c"})
NAVIGATION_KEYS = {
    "1": ViewId.DASHBOARD,
    "2": ViewId.DATA,
    "3": ViewId.SETTINGS,
    "4": ViewId.HELP,
}


@dataclass
class AppState:
    """Mutable state of the running dashboard"""

    active_view: ViewId = ViewId.DASHBOARD
    width: int = 80
    height: int = 24
    quitting: bool = False


def to_view_id(value: ViewId | str) -> ViewId:
    """Accept a ViewId or its name."""
    if isinstance(value, ViewId):
        return value
    try:
        return ViewId(value)
    except ValueError:
        raise ConfigurationError(f"Unknown view '{value}'") from None


def capture(renderable: RenderableType, width: int, height: int) -> str:
    """Render to an ANSI string as a terminal of the given size would show it."""
    console = Console(
        file=io.StringIO(),
        width=max(1, width),
        height=max(1, height),
        force_terminal=True,
        color_system="truecolor",
        legacy_windows=False,
    )
    console.print(renderable)
    return console.file.getvalue()


class DashboardApp:
    """Main dashboard application"""

    def __init__(
        self,
        palette: StylePalette | None = None,
        layout: LayoutConfig = DEFAULT_LAYOUT,
        initial_view: ViewId | str = ViewId.DASHBOARD,
        width: int = 80,
        height: int = 24,
    ):
        self.palette = palette or create_palette()
        self.layout = layout
        self.state = AppState(
            active_view=to_view_id(initial_view),
            width=max(0, width),
            height=max(0, height),
        )

        self.header = Header(self.palette, layout)
        self.sidebar = Sidebar(self.palette, layout)
        self.content = ContentFrame(self.palette, layout)
        self.views: dict[ViewId, BaseView] = create_views(self.palette, layout)

        # Size every component and view for the starting terminal
        initial = Resize(self.state.width, self.state.height)
        for target in (*self.components, *self.views.values()):
            target.update(initial)

    @classmethod
    def from_config(cls, config: RunConfig, palette: StylePalette | None = None) -> "DashboardApp":
        config.validate()
        return cls(
            palette=palette,
            initial_view=config.initial_view,
            width=config.initial_width,
            height=config.initial_height,
        )

    @property
    def components(self) -> tuple[Header, Sidebar, ContentFrame]:
        return (self.header, self.sidebar, self.content)

    @property
    def current_view(self) -> BaseView:
        """The view shown in the content frame."""
        try:
            return self.views[self.state.active_view]
        except KeyError:
            raise ConfigurationError(
                f"No view registered for '{self.state.active_view}'"
            ) from None

    def available_views(self) -> list[ViewId]:
        return list(self.views)

    def init(self) -> list[Command]:
        """Start-up commands of every component and of the initial view."""
        return batch(*(component.init() for component in self.components), self.current_view.init())

    def switch_view(self, view_id: ViewId | str) -> list[Command]:
        """Make `view_id` the active view and return its start-up commands."""
        view_id = to_view_id(view_id)
        if view_id not in self.views:
            raise ConfigurationError(f"No view registered for '{view_id.value}'")
        if view_id != self.state.active_view:
            logger.debug(f"Switching view: {self.state.active_view.value} -> {view_id.value}")
        self.state.active_view = view_id
        return list(self.current_view.init())

    def handle_event(self, event: Event) -> tuple["DashboardApp", list[Command]]:
        """
        Apply one event to the application.

        Resize events reach every component and then the active view. Quit
        keys end the application; number keys switch views; other keys are
        left to the active view.

        Returns:
            The application and the commands the host should run
        """
        if self.state.quitting:
            return self, []

        cmds: list[Command] = []

        if isinstance(event, Resize):
            self.state.width = max(0, event.width)
            self.state.height = max(0, event.height)
            logger.debug(f"Resized to {self.state.width}x{self.state.height}")
            for component in self.components:
                cmds.extend(component.update(event))

        elif isinstance(event, KeyPress):
            if event.key in QUIT_KEYS:
                logger.debug(f"Quit requested ({event.key})")
                self.state.quitting = True
                return self, [quit_command]

            if event.key in NAVIGATION_KEYS:
                cmds = self.switch_view(NAVIGATION_KEYS[event.key])

        cmds.extend(self.current_view.update(event))
        return self, cmds

    def _render_status_bar(self) -> Align:
        rule = self.palette.status_bar
        status_text = (
            f"View: {self.state.active_view.label} | Press 'q' to quit | 1-4 for navigation"
        )
        return Align(
            Text(status_text, style=rule.style),
            align=rule.align,
            style=rule.style,
            width=self.state.width,
            height=self.layout.status_height,
        )

    def compose(self) -> RenderableType:
        """Build the full screen from the current state."""
        if self.state.quitting:
            return self.palette.quit_text.apply(FAREWELL)

        view = self.current_view
        content_width, content_height = self.layout.content_size(
            self.state.width, self.state.height
        )

        # rich treats a zero panel height as unbounded; drop the body when the
        # frame borders no longer fit
        if content_height < self.layout.frame_border:
            return Group(self.header.render(), self._render_status_bar())

        body = Table.grid(padding=0)
        body.add_column(width=self.layout.sidebar_width)
        body.add_column(width=content_width)
        body.add_row(
            self.sidebar.render(self.state.active_view),
            self.content.render(view.render(), content_width, content_height),
        )

        return Group(self.header.render(), body, self._render_status_bar())

    def render(self) -> str:
        """The screen as a styled text block."""
        return capture(self.compose(), self.state.width, self.state.height)
