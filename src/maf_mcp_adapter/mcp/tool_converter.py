"""
MCP Tool Converter

Wraps a single MCP tool definition in a handle that an agent can call
with a JSON string of arguments, and converts that handle to a MAF
@tool function.

Following Microsoft Agent Framework patterns:
- https://learn.microsoft.com/en-us/agent-framework/tutorials/agents/function-tools

A handle is immutable: it keeps the tool definition, a shared reference
to the session and its own timeout. Every invoke() opens its own
deadline, so concurrent calls never affect each other.
"""

import json
import time
import asyncio
from typing import Annotated, Any, Optional, Sequence

from pydantic import Field
from agent_framework import FunctionTool, tool
from mcp.types import CallToolResult, TextContent, Tool

from .config import deadline_seconds
from .protocols import ToolSession
from ..utils.errors import (
    EmptyToolResultError,
    InvalidToolInputError,
    ToolCallError,
    ToolTimeoutError,
)
from ..utils.logger import get_logger, log_tool_call

logger = get_logger(__name__)

SCHEMA_LABEL = "\n The input schema is: "


def format_tool_description(description: Optional[str], input_schema: Optional[dict]) -> str:
    """
    Flatten a tool's description and input schema into plain text.

    The schema is appended as JSON on its own line. If it cannot be
    serialized, only the description is returned.
    """
    text = description or ""
    if input_schema is None:
        return text

    try:
        schema = json.dumps(input_schema)
    except (TypeError, ValueError):
        return text

    return text + SCHEMA_LABEL + schema


def collect_text(content: Sequence[Any]) -> str:
    """Join the text items of a tool result, skipping every other kind."""
    return "\n".join(item.text for item in content if isinstance(item, TextContent))


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name}")


def parse_arguments(tool_name: str, arguments: str) -> dict[str, Any]:
    """
    Decode the JSON arguments string passed by the agent.

    Raises:
        InvalidToolInputError: not valid JSON, or not a JSON object
    """
    try:
        args = json.loads(arguments, parse_constant=_reject_constant)
    except (TypeError, ValueError) as e:
        raise InvalidToolInputError(tool_name, str(e)) from e

    if not isinstance(args, dict):
        raise InvalidToolInputError(
            tool_name,
            f"expected a JSON object, got {type(args).__name__}",
        )

    return args


class MCPToolHandle:
    """
    One discovered MCP tool, callable by an agent.

    Created by MCPAdapter.tools(); never mutated afterwards.
    """

    def __init__(self, mcp_tool: Tool, session: ToolSession, timeout: Optional[float]):
        self._tool = mcp_tool
        self._session = session
        self._timeout = timeout

    def __repr__(self) -> str:
        return f"MCPToolHandle(name={self.name!r}, timeout={self._timeout!r})"

    @property
    def name(self) -> str:
        return self._tool.name

    @property
    def description(self) -> str:
        return format_tool_description(self._tool.description, self.input_schema)

    @property
    def input_schema(self) -> Optional[dict[str, Any]]:
        """Raw JSON schema, for consumers that take structured schemas."""
        return self._tool.inputSchema

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    async def invoke(self, arguments: str) -> str:
        """
        Call the MCP tool with a JSON object string of arguments.

        Returns:
            The text content of the result, newline-joined

        Raises:
            InvalidToolInputError: arguments are not a JSON object
            ToolTimeoutError: the call did not finish in time
            ToolCallError: the call failed or the tool reported an error
            EmptyToolResultError: the result has no content collection
        """
        args = parse_arguments(self.name, arguments)

        start = time.perf_counter()
        result = await self._call(args)
        text = self._result_text(result)

        log_tool_call(
            logger,
            self.name,
            args,
            result=text,
            duration_ms=(time.perf_counter() - start) * 1000,
        )
        return text

    async def _call(self, args: dict[str, Any]) -> CallToolResult:
        deadline = deadline_seconds(self._timeout)

        try:
            async with asyncio.timeout(deadline):
                return await self._session.call_tool(self.name, args)
        except TimeoutError as e:
            raise ToolTimeoutError(self.name, deadline) from e
        except Exception as e:
            raise ToolCallError(self.name, str(e)) from e

    def _result_text(self, result: Optional[CallToolResult]) -> str:
        content = getattr(result, "content", None)
        if result is None or content is None:
            raise EmptyToolResultError(self.name)

        text = collect_text(content)
        if result.isError:
            raise ToolCallError(self.name, text or "tool reported an error")

        return text

    def as_maf_tool(self) -> FunctionTool:
        """
        Create a MAF @tool function that forwards to invoke().

        The function takes one JSON string parameter, which keeps the
        tool usable whatever its input schema looks like.
        """
        handle = self

        @tool(name=self.name, description=self.description)
        async def mcp_tool_func(
            arguments: Annotated[str, Field(
                description="JSON object string of tool arguments, matching the input schema"
            )] = "{}",
        ) -> str:
            """Execute an MCP tool with the given arguments."""
            return await handle.invoke(arguments)

        return mcp_tool_func
