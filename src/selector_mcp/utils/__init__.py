"""Utility modules for Selector MCP Server."""

from .errors import (
    SelectorMCPError,
    ValidationError,
    SelectorError,
    DuplicateFragmentError,
    FragmentOrderError,
    SerializationError,
    ConfigurationError,
    ToolExecutionError,
)
from .logging_config import setup_logging

__all__ = [
    "SelectorMCPError",
    "ValidationError",
    "SelectorError",
    "DuplicateFragmentError",
    "FragmentOrderError",
    "SerializationError",
    "ConfigurationError",
    "ToolExecutionError",
    "setup_logging",
]
