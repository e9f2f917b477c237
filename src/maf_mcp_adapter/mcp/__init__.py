"""
MCP (Model Context Protocol) Module

Exposes the tools of an MCP server as Microsoft Agent Framework tools.

This module:
1. Spawns an MCP server process and opens a client session (optional)
2. Discovers available tools from the session
3. Wraps each MCP tool in a handle taking a JSON string of arguments
4. Converts handles to MAF @tool functions for an agent

Usage:
------
```python
from maf_mcp_adapter.mcp import MCPAdapter, connect_server, load_mcp_config

config = load_mcp_config()

async with connect_server(config.servers[0]) as session:
    adapter = MCPAdapter(session, tool_timeout=30)
    agent = client.as_agent(
        name="Assistant",
        instructions="...",
        tools=await adapter.maf_tools(),
    )
    result = await agent.run("...")
```
"""

from .adapter import MCPAdapter

from .tool_converter import (
    MCPToolHandle,
    format_tool_description,
    collect_text,
    parse_arguments,
)

from .protocols import (
    ToolSession,
    AgentTool,
)

from .client import connect_server

from .config import (
    load_adapter_config,
    load_mcp_config,
    validate_mcp_config,
    deadline_seconds,
    AdapterConfig,
    MCPConfig,
    MCPServerConfig,
    DEFAULT_TOOL_TIMEOUT,
)

__all__ = [
    # Adapter
    "MCPAdapter",
    # Tool converter
    "MCPToolHandle",
    "format_tool_description",
    "collect_text",
    "parse_arguments",
    # Contracts
    "ToolSession",
    "AgentTool",
    # Client
    "connect_server",
    # Config
    "load_adapter_config",
    "load_mcp_config",
    "validate_mcp_config",
    "deadline_seconds",
    "AdapterConfig",
    "MCPConfig",
    "MCPServerConfig",
    "DEFAULT_TOOL_TIMEOUT",
]
