from ..config import DEFAULT_LAYOUT, LayoutConfig
from ..styles import StylePalette
from .base import BaseView, ViewId
from .dashboard import DashboardView
from .data import DataView
from .help import HelpView
from .settings import SettingsView

VIEW_CLASSES: dict[ViewId, type[BaseView]] = {
    ViewId.DASHBOARD: DashboardView,
    ViewId.DATA: DataView,
    ViewId.SETTINGS: SettingsView,
    ViewId.HELP: HelpView,
}


def create_views(
    palette: StylePalette, layout: LayoutConfig = DEFAULT_LAYOUT
) -> dict[ViewId, BaseView]:
    """Build the fixed view registry, one instance per ViewId."""
    return {view_id: cls(palette, layout) for view_id, cls in VIEW_CLASSES.items()}


__all__ = [
    "BaseView",
    "ViewId",
    "DashboardView",
    "DataView",
    "SettingsView",
    "HelpView",
    "VIEW_CLASSES",
    "create_views",
]
