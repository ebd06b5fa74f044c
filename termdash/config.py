"""
Layout and run-time settings for the dashboard.

Nothing here is read from the environment or from disk; the CLI maps its
flags onto RunConfig.
"""

from dataclasses import dataclass

from .exceptions import ConfigurationError

VIEW_NAMES = ("dashboard", "data", "settings", "help")


@dataclass(frozen=True)
class LayoutConfig:
    """Fixed sizes of the screen chrome."""

    header_height: int = 3
    sidebar_width: int = 20
    status_height: int = 1
    # Cells taken by the two borders of a framed region, across or down
    frame_border: int = 2

    @property
    def chrome_height(self) -> int:
        return self.header_height + self.status_height

    def content_size(self, width: int, height: int) -> tuple[int, int]:
        """Outer size of the content frame for a terminal of width x height."""
        return (
            max(0, width - self.sidebar_width),
            max(0, height - self.chrome_height),
        )

    def inner_width(self, width: int) -> int:
        """Width left inside the content frame once its borders are drawn."""
        return max(0, width - self.sidebar_width - self.frame_border)


DEFAULT_LAYOUT = LayoutConfig()


@dataclass
class RunConfig:
    """Settings for the interactive host."""

    initial_view: str = "dashboard"
    refresh_per_second: float = 10.0
    alt_screen: bool = True
    initial_width: int = 80
    initial_height: int = 24

    def validate(self) -> None:
        """
        Check the settings before the dashboard starts.

        Raises:
            ConfigurationError: If the initial view is unknown or a rate is
                not positive
        """
        if self.initial_view not in VIEW_NAMES:
            raise ConfigurationError(
                f"Unknown view '{self.initial_view}'. Choose one of: {', '.join(VIEW_NAMES)}"
            )
        if self.refresh_per_second <= 0:
            raise ConfigurationError(
                f"Refresh rate must be positive, got {self.refresh_per_second}"
            )
        if self.initial_width < 0 or self.initial_height < 0:
            raise ConfigurationError("Initial terminal size must not be negative")
