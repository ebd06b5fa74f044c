"""
Colour palette and named style rules shared by every component and view.

The palette is built once by create_palette() and handed around by
reference. It is frozen; nothing may change it after construction.
"""

from dataclasses import dataclass

from rich.align import AlignMethod
from rich.box import ROUNDED, Box
from rich.style import Style
from rich.text import Text


@dataclass(frozen=True)
class StyleRule:
    """Attributes applied to one semantic region of the screen."""

    style: Style
    border_style: Style | None = None
    box: Box | None = None
    padding: tuple[int, int] = (0, 0)
    align: AlignMethod = "left"

    def apply(self, content: str) -> Text:
        """Render a short inline string with this rule's style and horizontal padding."""
        pad = " " * self.padding[1]
        return Text(f"{pad}{content}{pad}", style=self.style)


@dataclass(frozen=True)
class StylePalette:
    """Named colours plus one StyleRule per semantic role."""

    # Colours
    primary: str
    secondary: str
    success: str
    warning: str
    error: str
    info: str
    bg_primary: str
    bg_secondary: str
    text_primary: str
    text_secondary: str
    text_muted: str

    # Component rules
    header: StyleRule
    sidebar: StyleRule
    content: StyleRule
    status_bar: StyleRule

    # Interactive elements
    button: StyleRule
    button_active: StyleRule

    # Text rules
    quit_text: StyleRule
    title: StyleRule
    subtitle: StyleRule
    text: StyleRule
    muted_text: StyleRule
    error_text: StyleRule
    success_text: StyleRule
    warning_text: StyleRule

    def button_style(self, active: bool) -> StyleRule:
        """Rule for a navigation button."""
        return self.button_active if active else self.button

    def foreground(self, color: str) -> Style:
        """Plain text style recoloured with one of the palette colours."""
        return self.text.style + Style(color=color)


def create_palette() -> StylePalette:
    """Build the default light palette."""
    primary = "#007ACC"
    secondary = "#6C757D"
    success = "#28A745"
    warning = "#FFC107"
    error = "#DC3545"
    info = "#17A2B8"
    bg_primary = "#FFFFFF"
    bg_secondary = "#F8F9FA"
    text_primary = "#000000"
    text_secondary = "#6C757D"
    text_muted = "#ADB5BD"

    return StylePalette(
        primary=primary,
        secondary=secondary,
        success=success,
        warning=warning,
        error=error,
        info=info,
        bg_primary=bg_primary,
        bg_secondary=bg_secondary,
        text_primary=text_primary,
        text_secondary=text_secondary,
        text_muted=text_muted,
        header=StyleRule(
            style=Style(color=text_primary, bgcolor=primary, bold=True),
            padding=(0, 1),
            align="center",
        ),
        sidebar=StyleRule(
            style=Style(color=text_primary, bgcolor=bg_secondary),
            border_style=Style(color=secondary),
            box=ROUNDED,
            padding=(1, 1),
        ),
        content=StyleRule(
            style=Style(color=text_primary, bgcolor=bg_primary),
            border_style=Style(color=secondary),
            box=ROUNDED,
            padding=(1, 2),
        ),
        status_bar=StyleRule(
            style=Style(color=text_secondary, bgcolor=bg_secondary),
            padding=(0, 1),
            align="center",
        ),
        button=StyleRule(
            style=Style(color=text_primary, bgcolor=primary),
            padding=(0, 1),
        ),
        # Plain button colours, reversed
        button_active=StyleRule(
            style=Style(color=text_primary, bgcolor=primary, bold=True, reverse=True),
            padding=(0, 1),
        ),
        quit_text=StyleRule(style=Style(color=success, bold=True), align="center"),
        title=StyleRule(style=Style(color=primary, bold=True)),
        subtitle=StyleRule(style=Style(color=secondary, bold=True)),
        text=StyleRule(style=Style(color=text_primary)),
        muted_text=StyleRule(style=Style(color=text_muted)),
        error_text=StyleRule(style=Style(color=error, bold=True)),
        success_text=StyleRule(style=Style(color=success, bold=True)),
        warning_text=StyleRule(style=Style(color=warning, bold=True)),
    )
