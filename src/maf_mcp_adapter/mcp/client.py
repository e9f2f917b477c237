"""
MCP Server Connection

Spawns a configured MCP server as a child process and opens a client
session over stdio (stdin/stdout JSON-RPC, handled by the MCP SDK).

The session is only valid inside the context manager; handles built
from it must not be used after it exits.
"""

import os
from contextlib import asynccontextmanager
from typing import AsyncIterator

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client

from .config import MCPServerConfig
from ..utils.logger import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def connect_server(config: MCPServerConfig) -> AsyncIterator[ClientSession]:
    """
    Connect to a single MCP server over stdio.

    Usage:
        async with connect_server(config) as session:
            adapter = MCPAdapter(session)
            ...
    """
    logger.info(f"Connecting to MCP server {config.name}...")

    params = StdioServerParameters(
        command=config.command,
        args=config.args,
        env={**os.environ, **config.env},
    )

    async with stdio_client(params) as (read_stream, write_stream):
        async with ClientSession(read_stream, write_stream) as session:
            init = await session.initialize()
            logger.info(
                f"Connected to MCP server {config.name}",
                extra={"extra_fields": {
                    "server": init.serverInfo.name,
                    "protocol": init.protocolVersion,
                }},
            )
            yield session

    logger.info(f"Disconnected from MCP server {config.name}")
