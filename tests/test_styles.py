"""
Tests for the style palette.
"""

import dataclasses

import pytest
from rich.box import ROUNDED
from rich.style import Style
from rich.text import Text

from termdash.styles import StylePalette, StyleRule, create_palette


class TestCreatePalette:
    """Tests for create_palette()."""

    def test_colors_are_set(self, palette):
        for name in ("primary", "secondary", "success", "warning", "error", "info"):
            assert getattr(palette, name).startswith("#")

    def test_every_rule_has_a_style(self, palette):
        for field in dataclasses.fields(StylePalette):
            value = getattr(palette, field.name)
            if isinstance(value, StyleRule):
                assert isinstance(value.style, Style)

    def test_framed_rules_use_rounded_border(self, palette):
        assert palette.sidebar.box is ROUNDED
        assert palette.content.box is ROUNDED
        assert palette.sidebar.border_style == Style(color=palette.secondary)

    def test_header_is_bold_and_centered(self, palette):
        assert palette.header.style.bold
        assert palette.header.align == "center"

    def test_palette_is_frozen(self, palette):
        with pytest.raises(dataclasses.FrozenInstanceError):
            palette.primary = "#FFFFFF"

    def test_fresh_palettes_are_equal(self):
        assert create_palette() == create_palette()


class TestStylePaletteHelpers:
    """Tests for the palette helper methods."""

    def test_button_style(self, palette):
        assert palette.button_style(True) is palette.button_active
        assert palette.button_style(False) is palette.button

    def test_active_button_differs_from_plain(self, palette):
        active = palette.button_active.style
        assert active.bold
        assert active.reverse
        assert active != palette.button.style

    def test_foreground_keeps_text_attributes(self, palette):
        style = palette.foreground(palette.warning)
        assert style.color == Style(color=palette.warning).color


class TestStyleRule:
    """Tests for StyleRule.apply()."""

    def test_apply_pads_horizontally(self):
        rule = StyleRule(style=Style(bold=True), padding=(0, 1))
        text = rule.apply("OK")

        assert isinstance(text, Text)
        assert text.plain == " OK "
        assert text.style == Style(bold=True)

    def test_apply_without_padding(self):
        rule = StyleRule(style=Style(italic=True))
        assert rule.apply("OK").plain == "OK"
