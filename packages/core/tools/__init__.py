from .menu_tools import MENU_NOT_FOUND, get_menu
from .registry import (
    ToolDefinition,
    ToolRegistry,
    build_menu_tool_registry,
    build_search_tool_registry,
)
from .search_tools import google_search

__all__ = [
    "MENU_NOT_FOUND",
    "get_menu",
    "google_search",
    "ToolDefinition",
    "ToolRegistry",
    "build_menu_tool_registry",
    "build_search_tool_registry",
]
