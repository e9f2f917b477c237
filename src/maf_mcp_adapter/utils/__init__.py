"""
Utilities Module

Logging and error types shared by the MCP adapter.
"""

from .logger import (
    setup_logging,
    get_logger,
    log_tool_call,
    log_tool_discovery,
)

from .errors import (
    AdapterError,
    ConfigError,
    ListToolsError,
    ToolError,
    InvalidToolInputError,
    ToolCallError,
    ToolTimeoutError,
    EmptyToolResultError,
    format_error_for_user,
    format_error_for_log,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "log_tool_call",
    "log_tool_discovery",
    # Errors
    "AdapterError",
    "ConfigError",
    "ListToolsError",
    "ToolError",
    "InvalidToolInputError",
    "ToolCallError",
    "ToolTimeoutError",
    "EmptyToolResultError",
    "format_error_for_user",
    "format_error_for_log",
]
