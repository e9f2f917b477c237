"""
MAF MCP Adapter

Use the tools of any Model Context Protocol server from a
Microsoft Agent Framework agent.
"""

from .mcp import (
    MCPAdapter,
    MCPToolHandle,
    connect_server,
    load_adapter_config,
    load_mcp_config,
    AdapterConfig,
    MCPServerConfig,
)

__version__ = "0.1.0"

__all__ = [
    "MCPAdapter",
    "MCPToolHandle",
    "connect_server",
    "load_adapter_config",
    "load_mcp_config",
    "AdapterConfig",
    "MCPServerConfig",
]
