"""MCP tools for Selector MCP Server."""

from .selector_tools import register_selector_tools
from .object_tools import register_object_tools

__all__ = ["register_selector_tools", "register_object_tools"]
