"""Dashboard view: welcome text, feature list and navigation hints."""

from rich.text import Text

from .base import BaseView, ViewId

FEATURES = (
    "Modern TUI interface",
    "Responsive design",
    "Keyboard navigation",
    "Multiple views",
    "Styled components",
)


class DashboardView(BaseView):
    view_id = ViewId.DASHBOARD
    heading = "📊 Dashboard"

    def render(self) -> Text:
        info = self.palette.foreground(self.palette.info)
        text = self._begin()

        text.append("Welcome to the TermDash prototype!", style=self.palette.text.style)
        text.append("\n\n")

        self._section(text, "Features:")
        for feature in FEATURES:
            self._checked(text, feature)
        text.append("\n")

        self._section(text, "Quick Stats:")
        for label, value in (("Views", len(ViewId)), ("Components", 3), ("Themes", 2)):
            text.append(f"• {label}: ")
            text.append(str(value), style=info)
            text.append("\n")
        text.append("\n")

        self._section(text, "Getting Started:")
        text.append("Use the number keys (1-4) to navigate between views:\n")
        text.append("1 - Dashboard (current)\n")
        text.append("2 - Data Browser\n")
        text.append("3 - Settings\n")
        text.append("4 - Help\n\n")
        text.append("Press 'q' or Ctrl+C to quit.")

        return self._finish(text)

    def title(self) -> str:
        return "Dashboard"

    def description(self) -> str:
        return "Overview and quick actions"
