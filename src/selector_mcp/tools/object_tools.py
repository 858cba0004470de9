"""MCP tools for rectangle objects and JSON round-tripping."""

import time
from typing import Dict, Any

from ..objects.rectangle import Rectangle
from ..objects.serialization import get_json, from_json
from ..config import SelectorMCPConfig
from ..utils.logging_config import log_tool_execution, log_tool_completion
from ..utils.errors import ToolExecutionError


def register_object_tools(mcp: Any, config: SelectorMCPConfig) -> None:
    """Register object tools with the MCP server."""

    @mcp.tool()
    async def rectangle_area(width: float, height: float) -> Dict[str, Any]:
        """Return the area of a width x height rectangle."""
        start_time = time.time()
        tool_name = "rectangle_area"

        try:
            log_tool_execution(tool_name, {"width": width, "height": height})
            rectangle = Rectangle(width, height)
            response = {
                "width": rectangle.width,
                "height": rectangle.height,
                "area": rectangle.get_area(),
            }
            log_tool_completion(tool_name, True, time.time() - start_time)
            return response
        except Exception as e:
            error_msg = f"Area calculation failed: {str(e)}"
            log_tool_completion(tool_name, False, time.time() - start_time, error_msg)
            raise ToolExecutionError(tool_name, error_msg)

    @mcp.tool()
    async def to_json(value: Any) -> Dict[str, Any]:
        """
        Encode a value as compact JSON.

        Args:
            value: Any JSON-compatible value

        Returns:
            Dictionary with the JSON text
        """
        start_time = time.time()
        tool_name = "to_json"

        try:
            log_tool_execution(tool_name, {"type": type(value).__name__})
            text = get_json(value)
            log_tool_completion(tool_name, True, time.time() - start_time)
            return {"json": text}
        except Exception as e:
            error_msg = f"JSON encoding failed: {str(e)}"
            log_tool_completion(tool_name, False, time.time() - start_time, error_msg)
            raise ToolExecutionError(tool_name, error_msg)

    @mcp.tool()
    async def rectangle_from_json(json_text: str) -> Dict[str, Any]:
        """
        Restore a rectangle from its JSON representation.

        Args:
            json_text: JSON object with width and height

        Returns:
            Dictionary with the rectangle's dimensions and area
        """
        start_time = time.time()
        tool_name = "rectangle_from_json"

        try:
            log_tool_execution(tool_name, {"json_length": len(json_text)})
            rectangle = from_json(Rectangle, json_text)
            response = {
                "width": rectangle.width,
                "height": rectangle.height,
                "area": rectangle.get_area(),
            }
            log_tool_completion(tool_name, True, time.time() - start_time)
            return response
        except Exception as e:
            error_msg = f"Rectangle decoding failed: {str(e)}"
            log_tool_completion(tool_name, False, time.time() - start_time, error_msg)
            raise ToolExecutionError(tool_name, error_msg)
