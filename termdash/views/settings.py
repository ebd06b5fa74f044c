"""Settings view. Read-only: it lists options but never changes them."""

from rich.text import Text

from .base import BaseView, ViewId


class SettingsView(BaseView):
    view_id = ViewId.SETTINGS
    heading = "⚙️ Settings"

    def render(self) -> Text:
        palette = self.palette
        text = self._begin()

        self._section(text, "Theme Settings:")
        text.append("• ")
        text.append_text(palette.button.apply("Light Theme"))
        text.append(" (current)\n• ")
        text.append_text(palette.button.apply("Dark Theme"))
        text.append("\n\n")

        self._section(text, "Display Settings:")
        for option in ("Show borders", "Show status bar", "Show navigation"):
            self._checked(text, option)
        text.append("• ")
        text.append("○", style=palette.text.style)
        text.append(" Compact mode\n\n")

        self._section(text, "Application Settings:")
        text.append("• Auto-save: ")
        text.append("Enabled", style=palette.success_text.style)
        text.append("\n• Notifications: ")
        text.append("Enabled", style=palette.success_text.style)
        text.append("\n• Debug mode: ")
        text.append("Disabled", style=palette.text.style)
        text.append("\n• Log level: ")
        text.append("Info", style=palette.foreground(palette.info))
        text.append("\n\n")

        self._section(text, "Keyboard Shortcuts:")
        self._shortcut(text, "1-4", "Navigate views")
        self._shortcut(text, "q", "Quit application")
        self._shortcut(text, "Ctrl+C", "Force quit")
        self._shortcut(text, "Tab", "Focus next element")
        self._shortcut(text, "Enter", "Activate/Confirm")

        return self._finish(text)

    def title(self) -> str:
        return "Settings"

    def description(self) -> str:
        return "Application configuration"
