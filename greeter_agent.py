"""
Greeter Agent: MCP tools inside a MAF agent

1. Connects to the configured MCP server (greeter_server.py if none)
2. Lists its tools through MCPAdapter
3. Calls the greet tool directly to check the integration
4. Runs an agent that must use the greet tool

Environment (.env):
    OPENAI_API_KEY, OPENAI_API_BASE_URL, OPENAI_MODEL
    GREETER_NAME        name passed to greet (default "leon")
    MCP_TOOL_TIMEOUT    seconds per tool call (default 30)
"""

import os
import sys
import json
import asyncio

from dotenv import load_dotenv

load_dotenv()

from agent_framework.openai import OpenAIChatClient

from maf_mcp_adapter.mcp import (
    MCPAdapter,
    MCPServerConfig,
    connect_server,
    load_adapter_config,
    load_mcp_config,
    validate_mcp_config,
)
from maf_mcp_adapter.utils import (
    AdapterError,
    format_error_for_log,
    get_logger,
    setup_logging,
)

logger = get_logger("greeter_agent")


def greeter_server_config() -> MCPServerConfig:
    """Configured server, or the bundled greeter server."""
    config = load_mcp_config()

    errors = validate_mcp_config(config)
    if errors:
        raise SystemExit("Invalid MCP config: " + "; ".join(errors))

    if config.servers:
        return config.servers[0]

    return MCPServerConfig(
        name="greeter",
        command=sys.executable,
        args=[os.path.join(os.path.dirname(os.path.abspath(__file__)), "greeter_server.py")],
    )


def create_client() -> OpenAIChatClient:
    return OpenAIChatClient(
        model_id=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
        api_key=os.getenv("OPENAI_API_KEY"),
        base_url=os.getenv("OPENAI_API_BASE_URL") or None,
    )


async def main():
    setup_logging()

    adapter_config = load_adapter_config()
    server_config = greeter_server_config()

    name = os.getenv("GREETER_NAME") or "leon"
    payload = json.dumps({"name": name})

    async with connect_server(server_config) as session:
        adapter = MCPAdapter.from_config(session, adapter_config)
        handles = await adapter.tools()

        for handle in handles:
            print(f"discovered tool: {handle.name} - {handle.description}")

        # Verify the integration by calling greet directly
        greet = next((h for h in handles if h.name == "greet"), None)
        if greet is None:
            logger.warning("greet tool not found; skip direct call verification")
        else:
            try:
                print(f"greet tool output: {await greet.invoke(payload)}")
            except AdapterError as e:
                logger.error(format_error_for_log(e))

        agent = create_client().as_agent(
            name="GreeterAgent",
            instructions="You are a helpful assistant. Use your tools when asked to.",
            tools=[handle.as_maf_tool() for handle in handles],
        )

        # An explicit instruction makes the tool call reliable
        prompt = (
            f"Must call tool greet with arguments {payload}. "
            "Reply with only the tool output."
        )
        result = await agent.run(prompt)

        print("=" * 50)
        print(f"agent result: {result.text}")
        print("=" * 50)


if __name__ == "__main__":
    asyncio.run(main())
