"""
Shared fixtures: an in-memory MCP session that records every call.
"""

import asyncio
from typing import Any, Optional

import pytest
from mcp.types import CallToolResult, ListToolsResult, TextContent, Tool

GREET_SCHEMA = {
    "type": "object",
    "properties": {"name": {"type": "string"}},
    "required": ["name"],
}


def make_tool(name: str, description: Optional[str] = None, input_schema: Optional[dict] = None) -> Tool:
    return Tool(
        name=name,
        description=description,
        inputSchema=input_schema if input_schema is not None else {"type": "object"},
    )


def text_result(*texts: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=t) for t in texts])


class FakeSession:
    """
    Stands in for mcp.ClientSession.

    result may be a value or a callable(name, arguments) returning one.
    delays maps a tool name to seconds to wait before answering.
    """

    def __init__(
        self,
        tools: Optional[list[Tool]] = None,
        result: Any = None,
        error: Optional[Exception] = None,
        list_error: Optional[Exception] = None,
        delays: Optional[dict[str, float]] = None,
        list_delay: float = 0.0,
    ):
        self.tools = tools or []
        self.result = result if result is not None else text_result()
        self.error = error
        self.list_error = list_error
        self.delays = delays or {}
        self.list_delay = list_delay
        self.calls: list[tuple[str, Any]] = []
        self.list_calls = 0

    async def list_tools(self) -> ListToolsResult:
        self.list_calls += 1
        if self.list_delay:
            await asyncio.sleep(self.list_delay)
        if self.list_error:
            raise self.list_error
        return ListToolsResult(tools=self.tools)

    async def call_tool(self, name: str, arguments: Optional[dict] = None) -> Any:
        self.calls.append((name, arguments))
        delay = self.delays.get(name, 0.0)
        if delay:
            await asyncio.sleep(delay)
        if self.error:
            raise self.error
        if callable(self.result):
            return self.result(name, arguments)
        return self.result


@pytest.fixture
def greet_tool() -> Tool:
    return make_tool("greet", "Say hi to someone by name.", GREET_SCHEMA)


@pytest.fixture
def session(greet_tool) -> FakeSession:
    return FakeSession(
        tools=[greet_tool, make_tool("echo", "Echo the input back.")],
        result=lambda name, args: text_result(f"Hi {args.get('name')}"),
    )
