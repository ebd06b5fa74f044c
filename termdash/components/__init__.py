from .base import Component
from .content import ContentFrame
from .header import Header
from .sidebar import SIDEBAR_ITEMS, Sidebar, SidebarItem

__all__ = ["Component", "ContentFrame", "Header", "Sidebar", "SidebarItem", "SIDEBAR_ITEMS"]
