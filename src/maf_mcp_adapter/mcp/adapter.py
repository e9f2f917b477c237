"""
MCP Adapter

Bridges an open MCP client session and Microsoft Agent Framework:
lists the tools the server offers and wraps each one in an
MCPToolHandle.

EXAMPLE:
--------
```python
async with connect_server(server_config) as session:
    adapter = MCPAdapter(session, tool_timeout=30)
    agent = client.as_agent(
        name="Assistant",
        instructions="...",
        tools=await adapter.maf_tools(),
    )
```

The adapter never opens or closes the session; it only keeps a
reference to it and the configured timeout.
"""

import asyncio
from typing import Optional

from agent_framework import FunctionTool

from .config import AdapterConfig, DEFAULT_TOOL_TIMEOUT, deadline_seconds
from .protocols import ToolSession
from .tool_converter import MCPToolHandle
from ..utils.errors import ListToolsError
from ..utils.logger import get_logger, log_tool_discovery

logger = get_logger(__name__)


class MCPAdapter:
    """
    Turns the tool catalog of an MCP session into agent tools.

    - tools(): one MCPToolHandle per MCP tool, in server order
    - maf_tools(): the same handles converted to MAF tools
    """

    def __init__(self, session: ToolSession, tool_timeout: Optional[float] = DEFAULT_TOOL_TIMEOUT):
        """
        Args:
            session: An initialized MCP client session
            tool_timeout: Seconds allowed for each listing and tool call.
                None or a value <= 0 disables the deadline.
        """
        self._session = session
        self._timeout = tool_timeout

    @classmethod
    def from_config(cls, session: ToolSession, config: AdapterConfig) -> "MCPAdapter":
        return cls(session, tool_timeout=config.tool_timeout)

    @property
    def tool_timeout(self) -> Optional[float]:
        return self._timeout

    async def tools(self) -> list[MCPToolHandle]:
        """
        List the server's tools and wrap each one.

        Returns:
            Handles in the order the server listed them

        Raises:
            ListToolsError: the listing failed or timed out; no partial list
        """
        deadline = deadline_seconds(self._timeout)

        try:
            async with asyncio.timeout(deadline):
                response = await self._session.list_tools()
        except TimeoutError as e:
            raise ListToolsError(f"timed out after {deadline}s") from e
        except Exception as e:
            raise ListToolsError(str(e)) from e

        handles = [
            MCPToolHandle(mcp_tool, self._session, self._timeout)
            for mcp_tool in response.tools
        ]

        log_tool_discovery(logger, [handle.name for handle in handles])
        return handles

    async def maf_tools(self) -> list[FunctionTool]:
        """List the server's tools as MAF tools ready for an agent."""
        return [handle.as_maf_tool() for handle in await self.tools()]
