"""Pytest configuration and fixtures for Selector MCP Server tests."""

import pytest
import tempfile
import os
from pathlib import Path
from typing import Any, Callable, Dict, Generator
from unittest.mock import MagicMock

from selector_mcp.builders.selector_builder import SelectorBuilder
from selector_mcp.config import SelectorMCPConfig, BuilderConfig
from selector_mcp.validators.selector_validator import SelectorValidator


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def test_config() -> SelectorMCPConfig:
    """Test configuration."""
    return SelectorMCPConfig(builder=BuilderConfig(max_chain_length=8))


@pytest.fixture
def builder() -> SelectorBuilder:
    """Selector builder facade for testing."""
    return SelectorBuilder()


@pytest.fixture
def selector_validator(test_config: SelectorMCPConfig) -> SelectorValidator:
    """Selector validator instance for testing."""
    return SelectorValidator(test_config.analysis)


@pytest.fixture
def register_tools() -> Callable[..., Dict[str, Any]]:
    """Register tools on a mock MCP and return them by name."""

    def _register(register_func: Callable[..., None], config: SelectorMCPConfig) -> Dict[str, Any]:
        mock_mcp = MagicMock()
        registered_tools: Dict[str, Any] = {}

        def tool_decorator():
            def decorator(func):
                registered_tools[func.__name__] = func
                return func

            return decorator

        mock_mcp.tool = tool_decorator
        register_func(mock_mcp, config)
        return registered_tools

    return _register


@pytest.fixture
def sample_parts() -> list[dict[str, str]]:
    """Parts for 'div#main.container:hover > span.label'."""
    return [
        {"kind": "element", "value": "div"},
        {"kind": "id", "value": "main"},
        {"kind": "class", "value": "container"},
        {"kind": "pseudo_class", "value": "hover"},
        {"kind": "combinator", "value": ">"},
        {"kind": "element", "value": "span"},
        {"kind": "class", "value": "label"},
    ]


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Set up test environment variables."""
    os.environ["LOG_LEVEL"] = "CRITICAL"

    yield

    os.environ.pop("LOG_LEVEL", None)
