"""Selector MCP - fluent CSS selector builder with an MCP tool surface."""

__version__ = "0.1.0"

from .builders.selector_builder import Selector, SelectorBuilder, css_selector_builder, stringify
from .objects import Rectangle, get_json, from_json

__all__ = [
    "Selector",
    "SelectorBuilder",
    "css_selector_builder",
    "stringify",
    "Rectangle",
    "get_json",
    "from_json",
    "__version__",
]
