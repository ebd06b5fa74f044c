from .app import AppState, DashboardApp
from .events import KeyPress, Quit, Resize
from .styles import StylePalette, create_palette
from .views import ViewId

__version__ = "0.1.0"

__all__ = [
    "AppState",
    "DashboardApp",
    "KeyPress",
    "Quit",
    "Resize",
    "StylePalette",
    "create_palette",
    "ViewId",
]
