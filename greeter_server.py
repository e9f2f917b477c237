"""
Greeter MCP Server

A minimal MCP server with one tool, served over stdio.
Used by greeter_agent.py and the integration tests.

Run: python greeter_server.py
"""

from mcp.server.fastmcp import FastMCP

server = FastMCP("greeter")


@server.tool()
def greet(name: str) -> str:
    """Say hi to someone by name."""
    return f"Hi {name}"


if __name__ == "__main__":
    server.run()
