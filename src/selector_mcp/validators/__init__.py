"""Selector validation components for Selector MCP Server."""

from .selector_validator import SelectorValidator, SelectorValidationResult

__all__ = [
    "SelectorValidator",
    "SelectorValidationResult",
]
