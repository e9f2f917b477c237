"""
Error Handling Utilities

Structured errors raised by the MCP adapter.

Every error carries a technical message (str(error)) and a
user-friendly message. Wrapped failures keep the original
exception as __cause__.
"""

from typing import Optional
import traceback


class AdapterError(Exception):
    """Base exception for adapter errors."""

    def __init__(self, message: str, user_message: Optional[str] = None):
        """
        Initialize adapter error.

        Args:
            message: Technical error message for logging
            user_message: User-friendly message to display
        """
        super().__init__(message)
        self.user_message = user_message or "Sorry, something went wrong. Please try again."


class ConfigError(AdapterError):
    """Configuration error."""

    def __init__(self, config_name: str, message: str):
        self.config_name = config_name
        super().__init__(
            f"Configuration error for {config_name}: {message}",
            "There's a configuration issue. Please contact the administrator.",
        )


class ListToolsError(AdapterError):
    """Listing tools from the MCP server failed."""

    def __init__(self, message: str):
        super().__init__(
            f"ListTools error: {message}",
            "I couldn't load the available tools. Please try again.",
        )


class ToolError(AdapterError):
    """Error tied to a single MCP tool."""

    def __init__(self, tool_name: str, message: str, user_message: Optional[str] = None):
        self.tool_name = tool_name
        super().__init__(
            message,
            user_message or f"I couldn't complete the {tool_name} action. Please try again.",
        )


class InvalidToolInputError(ToolError):
    """Tool arguments are not a JSON object."""

    def __init__(self, tool_name: str, message: str):
        super().__init__(
            tool_name,
            f"invalid JSON input for MCP tool '{tool_name}': {message}",
            f"The arguments for {tool_name} must be a JSON object.",
        )


class ToolCallError(ToolError):
    """The remote tool call failed."""

    def __init__(self, tool_name: str, message: str):
        super().__init__(tool_name, f"CallTool MCP tool '{tool_name}' error: {message}")


class ToolTimeoutError(ToolCallError):
    """The remote tool call did not finish before its deadline."""

    def __init__(self, tool_name: str, timeout: Optional[float]):
        self.timeout = timeout
        super().__init__(tool_name, f"timed out after {timeout}s" if timeout else "timed out")


class EmptyToolResultError(ToolError):
    """The server replied without a content collection."""

    def __init__(self, tool_name: str):
        super().__init__(tool_name, f"MCP tool '{tool_name}' returned nil result")


def format_error_for_user(error: Exception) -> str:
    """
    Format an error for display to the user.

    Args:
        error: The exception

    Returns:
        User-friendly error message
    """
    if isinstance(error, AdapterError):
        return error.user_message

    return "Sorry, I encountered an unexpected error. Please try again."


def format_error_for_log(error: Exception) -> str:
    """
    Format an error for logging, including its cause chain.

    Args:
        error: The exception

    Returns:
        Detailed error message with traceback
    """
    parts = [f"{type(error).__name__}: {error}"]

    cause = error.__cause__
    while cause is not None:
        parts.append(f"caused by {type(cause).__name__}: {cause}")
        cause = cause.__cause__

    tb = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    return "\n".join(parts) + "\n" + tb
