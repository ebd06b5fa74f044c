"""
Tests for the header, sidebar and content frame.
"""

import pytest
from rich.align import Align
from rich.panel import Panel
from rich.text import Text

from termdash.components import SIDEBAR_ITEMS, ContentFrame, Header, Sidebar
from termdash.events import KeyPress, Resize
from termdash.views import ViewId


class TestHeader:
    def test_defaults(self, palette):
        header = Header(palette)
        assert header.title == "TermDash"
        assert header.width == 80
        assert header.init() == []

    def test_resize_tracks_width(self, palette):
        header = Header(palette)

        assert header.update(Resize(120, 40)) == []
        assert header.width == 120

    def test_other_events_ignored(self, palette):
        header = Header(palette)
        header.update(KeyPress("2"))
        assert header.width == 80

    def test_render(self, palette):
        header = Header(palette, title="Custom")
        header.update(Resize(50, 10))
        rendered = header.render()

        assert isinstance(rendered, Align)
        assert rendered.align == "center"
        assert rendered.width == 50
        assert rendered.height == 3
        assert rendered.renderable.plain == "Custom"
        assert rendered.renderable.style == palette.header.style


class TestSidebarItems:
    def test_items_follow_view_order(self):
        assert [item.view_id for item in SIDEBAR_ITEMS] == list(ViewId)
        assert [item.key for item in SIDEBAR_ITEMS] == ["1", "2", "3", "4"]


class TestSidebar:
    def test_resize_tracks_height(self, palette):
        sidebar = Sidebar(palette)

        sidebar.update(Resize(80, 30))
        assert sidebar.height == 26
        assert sidebar.width == 20

        sidebar.update(Resize(80, 2))
        assert sidebar.height == 0

    @pytest.mark.parametrize("current", list(ViewId))
    def test_exactly_one_active_item(self, palette, current):
        sidebar = Sidebar(palette)
        menu = sidebar.render_menu(current)

        active = [s for s in menu.spans if s.style == palette.button_active.style]
        inactive = [s for s in menu.spans if s.style == palette.button.style]

        assert len(active) == 1
        assert len(inactive) == len(SIDEBAR_ITEMS) - 1
        item = next(i for i in SIDEBAR_ITEMS if i.view_id == current)
        assert menu.plain[active[0].start : active[0].end].startswith(f"{item.key} ")

    def test_items_are_padded_to_item_width(self, palette):
        sidebar = Sidebar(palette)
        menu = sidebar.render_menu(ViewId.DASHBOARD)

        for span in menu.spans:
            if span.style in (palette.button.style, palette.button_active.style):
                assert Text(menu.plain[span.start : span.end]).cell_len == sidebar.item_width

    def test_rule_and_shortcuts(self, palette):
        sidebar = Sidebar(palette)
        plain = sidebar.render_menu(ViewId.HELP).plain

        assert plain.startswith("Navigation")
        assert "─" * 16 in plain
        assert "─" * 17 not in plain
        assert plain.endswith("Shortcuts:\nq - Quit\n1-4 - Navigate\nCtrl+C - Quit")

    def test_render_panel(self, palette):
        sidebar = Sidebar(palette)
        sidebar.update(Resize(80, 24))
        panel = sidebar.render(ViewId.DATA)

        assert isinstance(panel, Panel)
        assert panel.width == 20
        assert panel.height == 20
        assert panel.box is palette.sidebar.box


class TestContentFrame:
    def test_resize_tracks_inner_size(self, palette):
        frame = ContentFrame(palette)

        assert frame.update(Resize(100, 30)) == []
        assert (frame.width, frame.height) == (78, 26)

    def test_resize_is_clamped(self, palette):
        frame = ContentFrame(palette)
        frame.update(Resize(5, 1))
        assert (frame.width, frame.height) == (0, 0)

    def test_render_uses_given_size(self, palette):
        frame = ContentFrame(palette)
        frame.update(Resize(100, 30))
        panel = frame.render(Text("hello"), 50, 10)

        assert panel.width == 50
        assert panel.height == 10
        assert panel.renderable.plain == "hello"
        # Cached size is only kept for later use
        assert (frame.width, frame.height) == (78, 26)

    def test_render_clamps_negative_size(self, palette):
        panel = ContentFrame(palette).render(Text(""), -5, -1)
        assert (panel.width, panel.height) == (0, 0)
