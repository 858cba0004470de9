"""MCP tools for building and validating CSS selectors."""

import time
from typing import Dict, Any, List

from ..builders.selector_builder import Selector, SelectorBuilder
from ..validators.selector_validator import SelectorValidator
from ..config import SelectorMCPConfig
from ..utils.logging_config import (
    log_tool_execution,
    log_tool_completion,
    log_selector_built,
    get_logger,
)
from ..utils.errors import SelectorError, ToolExecutionError


def _selector_response(selector: Selector) -> Dict[str, Any]:
    return {
        "selector": selector.stringify(),
        "fragments": [
            {"kind": fragment.kind.value, "value": fragment.value}
            for fragment in selector.fragments
        ],
        "specificity": selector.specificity(),
    }


def register_selector_tools(mcp: Any, config: SelectorMCPConfig) -> None:
    """Register all selector tools with the MCP server."""

    builder = SelectorBuilder()
    validator = SelectorValidator(config.analysis, config.builder.combinators)

    logger = get_logger("selector_tools")

    def _check_chain(selector: Selector) -> None:
        compounds = len(selector.compounds())
        if compounds > config.builder.max_chain_length:
            raise SelectorError(
                f"Selector has {compounds} compounds, "
                f"limit is {config.builder.max_chain_length}",
                selector=selector.stringify(),
            )

    @mcp.tool()
    async def build_selector(parts: List[Dict[str, str]]) -> Dict[str, Any]:
        """
        Build a CSS selector from ordered parts.

        Args:
            parts: List of {"kind": ..., "value": ...} objects. Kinds are
                element, id, class, attr, pseudo_class, pseudo_element and
                combinator (" ", "+", "~", ">").

        Returns:
            Dictionary with the rendered selector, its fragments and specificity
        """
        start_time = time.time()
        tool_name = "build_selector"

        try:
            log_tool_execution(tool_name, {"part_count": len(parts)})

            selector = builder.build(parts, config.builder.combinators)
            _check_chain(selector)

            response = _selector_response(selector)
            if config.builder.log_rendered:
                log_selector_built(response["selector"], len(selector.fragments))

            duration = time.time() - start_time
            log_tool_completion(tool_name, True, duration)

            return response

        except Exception as e:
            duration = time.time() - start_time
            error_msg = f"Selector build failed: {str(e)}"
            log_tool_completion(tool_name, False, duration, error_msg)
            raise ToolExecutionError(tool_name, error_msg)

    @mcp.tool()
    async def combine_selectors(
        left: List[Dict[str, str]], combinator: str, right: List[Dict[str, str]]
    ) -> Dict[str, Any]:
        """
        Combine two selectors with a combinator.

        Args:
            left: Parts of the left-hand selector
            combinator: One of the configured combinators
            right: Parts of the right-hand selector

        Returns:
            Dictionary with the rendered selector, its fragments and specificity
        """
        start_time = time.time()
        tool_name = "combine_selectors"

        try:
            log_tool_execution(
                tool_name,
                {"left_parts": len(left), "combinator": combinator, "right_parts": len(right)},
            )

            if combinator not in config.builder.combinators:
                raise SelectorError(
                    f"Unsupported combinator '{combinator}', "
                    f"expected one of {config.builder.combinators}"
                )

            selector = builder.combine(
                builder.build(left, config.builder.combinators),
                combinator,
                builder.build(right, config.builder.combinators),
            )
            _check_chain(selector)

            response = _selector_response(selector)
            if config.builder.log_rendered:
                log_selector_built(response["selector"], len(selector.fragments))

            duration = time.time() - start_time
            log_tool_completion(tool_name, True, duration)

            return response

        except Exception as e:
            duration = time.time() - start_time
            error_msg = f"Selector combine failed: {str(e)}"
            log_tool_completion(tool_name, False, duration, error_msg)
            raise ToolExecutionError(tool_name, error_msg)

    @mcp.tool()
    async def validate_selector_parts(parts: List[Dict[str, str]]) -> Dict[str, Any]:
        """
        Check selector parts against the ordering and uniqueness rules.

        Args:
            parts: List of {"kind": ..., "value": ...} objects

        Returns:
            Validation result with complexity analysis
        """
        start_time = time.time()
        tool_name = "validate_selector_parts"

        try:
            log_tool_execution(tool_name, {"part_count": len(parts)})

            result = validator.validate_parts(parts)
            analysis = validator.analyze_selector_complexity(parts)

            response = {
                "valid": result.valid,
                "error": result.error,
                "selector": result.selector,
                "type": result.selector_type,
                "specificity": result.specificity,
                "recommendations": analysis["recommendations"],
            }

            duration = time.time() - start_time
            log_tool_completion(tool_name, True, duration)

            return response

        except Exception as e:
            duration = time.time() - start_time
            error_msg = f"Selector validation failed: {str(e)}"
            log_tool_completion(tool_name, False, duration, error_msg)
            logger.error(error_msg)
            raise ToolExecutionError(tool_name, error_msg)
