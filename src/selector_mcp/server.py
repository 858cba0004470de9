"""Main MCP server implementation using FastMCP."""

import asyncio
import sys
from typing import Optional, Any

from fastmcp import FastMCP

from selector_mcp.config import load_config, SelectorMCPConfig
from selector_mcp.utils.logging_config import setup_logging, get_logger
from selector_mcp.utils.errors import ConfigurationError
from selector_mcp.tools.selector_tools import register_selector_tools
from selector_mcp.tools.object_tools import register_object_tools


class SelectorMCPServer:
    """Main Selector MCP Server class."""

    def __init__(self, config: SelectorMCPConfig):
        self.config = config
        self.logger = get_logger("server")

        self.mcp: Any = FastMCP(name="SelectorMCP")

        # Register all tools before the server starts
        self._register_tools()

        self.logger.info("Selector MCP Server initialized")

    def _register_tools(self) -> None:
        """Register all MCP tools."""
        try:
            register_selector_tools(self.mcp, self.config)
            self.logger.info("Registered selector tools")

            if self.config.features.object_tools:
                register_object_tools(self.mcp, self.config)
                self.logger.info("Registered object tools")

        except Exception as e:
            self.logger.error(f"Failed to register tools: {e}")
            raise ConfigurationError(f"Tool registration failed: {e}")

    async def start(self) -> None:
        """Start the MCP server."""
        try:
            self.logger.info("Starting Selector MCP Server...")
            await self.mcp.run_async()
        except Exception as e:
            self.logger.error(f"Server failed to start: {e}")
            raise

    def run(self) -> None:
        """Run the server (blocking)."""
        try:
            asyncio.run(self.start())
        except KeyboardInterrupt:
            self.logger.info("Server stopped by user")
        except Exception as e:
            self.logger.error(f"Server error: {e}")
            sys.exit(1)


def create_server(config_path: Optional[str] = None) -> SelectorMCPServer:
    """
    Create and configure the MCP server.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Configured SelectorMCPServer instance
    """
    try:
        # Load configuration from file and environment
        config = load_config(config_path)

        # Configure logging before anything logs
        setup_logging(config.logging)

        return SelectorMCPServer(config)

    except Exception as e:
        print(f"Failed to create server: {e}", file=sys.stderr)
        sys.exit(1)


def main() -> None:
    """Main entry point for the server."""
    import argparse
    import os

    parser = argparse.ArgumentParser(description="Selector MCP Server")
    parser.add_argument("--config", "-c", type=str, help="Path to configuration file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (overrides the configuration file)",
    )
    parser.add_argument("--version", action="version", version="0.1.0")

    args = parser.parse_args()

    # Only an explicit flag overrides the configured level
    if args.log_level is not None:
        os.environ["LOG_LEVEL"] = args.log_level

    server = create_server(args.config)
    server.run()


if __name__ == "__main__":
    main()
