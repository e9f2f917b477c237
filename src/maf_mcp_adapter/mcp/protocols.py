"""
Contracts on both sides of the adapter.

ToolSession is what the adapter consumes (mcp.ClientSession fits it).
AgentTool is what every handle exposes to an agent framework.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from mcp.types import CallToolResult, ListToolsResult


class ToolSession(Protocol):
    """An open connection to an MCP server."""

    async def list_tools(self) -> ListToolsResult:
        ...

    async def call_tool(
        self,
        name: str,
        arguments: Optional[dict[str, Any]] = None,
    ) -> CallToolResult:
        ...


@runtime_checkable
class AgentTool(Protocol):
    """A named tool invoked with a JSON string of arguments."""

    @property
    def name(self) -> str:
        ...

    @property
    def description(self) -> str:
        ...

    async def invoke(self, arguments: str) -> str:
        ...
