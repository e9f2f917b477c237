"""
MCP Configuration

Loads adapter and server settings from:
1. mcp-config.json file (if exists)
2. Environment variables (fallback)

Environment:
    MCP_TOOL_TIMEOUT    seconds per listing / tool call (default 30)
    MCP_SERVER_NAME     server name when configured from env (default "default")
    MCP_SERVER_COMMAND  executable that starts the server over stdio
    MCP_SERVER_ARGS     its arguments, shell-quoted
"""

import os
import json
import shlex
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv

from ..utils.errors import ConfigError
from ..utils.logger import get_logger

load_dotenv()

logger = get_logger(__name__)

DEFAULT_TOOL_TIMEOUT = 30.0
DEFAULT_CONFIG_FILE = "mcp-config.json"


@dataclass(frozen=True)
class AdapterConfig:
    """Settings for MCPAdapter."""
    tool_timeout: Optional[float] = DEFAULT_TOOL_TIMEOUT


@dataclass
class MCPServerConfig:
    """Configuration for a single MCP server."""
    name: str
    command: str
    args: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)


@dataclass
class MCPConfig:
    """Configuration for all MCP servers."""
    servers: list[MCPServerConfig] = field(default_factory=list)

    def get_server(self, name: str) -> Optional[MCPServerConfig]:
        for server in self.servers:
            if server.name == name:
                return server
        return None


def deadline_seconds(timeout: Optional[float]) -> Optional[float]:
    """Map a configured timeout to an asyncio deadline; None means unbounded."""
    if timeout is None or timeout <= 0:
        return None
    return timeout


def load_adapter_config() -> AdapterConfig:
    """
    Load adapter settings from the environment.

    Raises:
        ConfigError: MCP_TOOL_TIMEOUT is not a number
    """
    raw = os.getenv("MCP_TOOL_TIMEOUT")
    if raw is None or not raw.strip():
        return AdapterConfig()

    try:
        timeout = float(raw)
    except ValueError as e:
        raise ConfigError("MCP_TOOL_TIMEOUT", f"expected seconds, got {raw!r}") from e

    return AdapterConfig(tool_timeout=timeout)


def _substitute_env(env: dict) -> dict[str, str]:
    # "$NAME" values are read from the environment
    resolved = {}
    for key, value in env.items():
        if isinstance(value, str) and value.startswith("$"):
            resolved[key] = os.getenv(value[1:], "")
        else:
            resolved[key] = str(value)
    return resolved


def _server_args(path: str, server_data: dict) -> list[str]:
    args = server_data.get("args", [])
    if not isinstance(args, list):
        raise ConfigError(path, f"server {server_data.get('name')!r}: args must be a list")
    return [str(arg) for arg in args]


def load_mcp_config(config_path: Optional[str] = None) -> MCPConfig:
    """
    Load MCP server configuration.

    Priority:
    1. mcp-config.json (config_path, or the current directory)
    2. MCP_SERVER_COMMAND / MCP_SERVER_ARGS / MCP_SERVER_NAME

    Returns:
        MCPConfig with list of configured servers

    Raises:
        ConfigError: the config file exists but is malformed
    """
    path = config_path or os.path.join(os.getcwd(), DEFAULT_CONFIG_FILE)

    if os.path.exists(path):
        try:
            with open(path, "r") as f:
                data = json.load(f)

            servers = [
                MCPServerConfig(
                    name=server_data["name"],
                    command=server_data["command"],
                    args=_server_args(path, server_data),
                    env=_substitute_env(server_data.get("env", {})),
                )
                for server_data in data.get("servers", [])
            ]
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            raise ConfigError(path, str(e)) from e

        logger.info(f"Loaded MCP config from {path} ({len(servers)} servers)")
        return MCPConfig(servers=servers)

    command = os.getenv("MCP_SERVER_COMMAND")
    if not command:
        logger.info("No MCP server configured (missing MCP_SERVER_COMMAND)")
        return MCPConfig()

    try:
        args = shlex.split(os.getenv("MCP_SERVER_ARGS", ""))
    except ValueError as e:
        raise ConfigError("MCP_SERVER_ARGS", str(e)) from e

    server = MCPServerConfig(
        name=os.getenv("MCP_SERVER_NAME", "default"),
        command=command,
        args=args,
    )
    logger.info(f"MCP server {server.name} configured from environment")
    return MCPConfig(servers=[server])


def validate_mcp_config(config: MCPConfig) -> list[str]:
    """
    Validate MCP configuration.

    Returns:
        List of error messages (empty if valid)
    """
    errors = []
    seen = set()

    for server in config.servers:
        if not server.name:
            errors.append("Server missing name")
        elif server.name in seen:
            errors.append(f"Server {server.name}: duplicate name")
        seen.add(server.name)

        if not server.command:
            errors.append(f"Server {server.name}: missing command")

    return errors
