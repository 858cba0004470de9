"""Custom error classes for Selector MCP Server."""

from typing import Optional, Dict, Any


class SelectorMCPError(Exception):
    """Base exception class for Selector MCP Server."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(SelectorMCPError):
    """Exception raised when a selector or object fails validation."""

    def __init__(
        self,
        message: str,
        selector: Optional[str] = None,
        kind: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.selector = selector
        self.kind = kind


class ConfigurationError(SelectorMCPError):
    """Exception raised when configuration is invalid."""

    pass


class ToolExecutionError(SelectorMCPError):
    """Exception raised when MCP tool execution fails."""

    def __init__(self, tool_name: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.tool_name = tool_name


class SelectorError(ValidationError):
    """Exception raised when a selector fragment cannot be appended."""

    pass


class DuplicateFragmentError(SelectorError):
    """Element, id or pseudo-element appended twice to the same compound."""

    pass


class FragmentOrderError(SelectorError):
    """Fragment appended after a fragment that must follow it."""

    pass


class SerializationError(ValidationError):
    """Exception raised when JSON encoding or decoding fails."""

    pass

