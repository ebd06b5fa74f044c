"""Help view: navigation keys, shortcuts and usage tips."""

from rich.text import Text

from .base import BaseView, ViewId

TIPS = (
    "Resize your terminal window to see responsive design",
    "Use number keys for quick navigation",
    "Check the status bar for current view information",
)


class HelpView(BaseView):
    view_id = ViewId.HELP
    heading = "❓ Help & Documentation"

    def render(self) -> Text:
        muted = self.palette.muted_text.style
        text = self._begin()

        self._section(text, "About TermDash:")
        text.append("This is a prototype Terminal User Interface built with Python and Rich.\n")
        text.append("It demonstrates modern TUI patterns and best practices.\n\n")

        self._section(text, "Navigation:")
        self._shortcut(text, "1", "Dashboard: Overview and quick actions")
        self._shortcut(text, "2", "Data Browser: View and manage data")
        self._shortcut(text, "3", "Settings: Configure application")
        self._shortcut(text, "4", "Help: This documentation")
        text.append("\n")

        self._section(text, "Keyboard Shortcuts:")
        text.append("• ")
        text.append("q", style=muted)
        text.append(" or ")
        text.append("Ctrl+C", style=muted)
        text.append(" - Quit application\n")
        self._shortcut(text, "1-4", "Switch between views")
        self._shortcut(text, "Tab", "Focus next element")
        self._shortcut(text, "Enter", "Activate/Confirm")
        self._shortcut(text, "Escape", "Cancel/Go back")
        text.append("\n")

        self._section(text, "Features:")
        for feature in (
            "Responsive design",
            "Modern styling",
            "Keyboard navigation",
            "Multiple views",
            "Component-based architecture",
        ):
            self._checked(text, feature)
        text.append("\n")

        self._section(text, "Tips:")
        for tip in TIPS:
            text.append(f"• {tip}\n")

        return self._finish(text)

    def title(self) -> str:
        return "Help"

    def description(self) -> str:
        return "Documentation and help"
