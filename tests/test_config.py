"""
Configuration loading from the environment and mcp-config.json.
"""

import json

import pytest

from maf_mcp_adapter.mcp import (
    MCPConfig,
    MCPServerConfig,
    deadline_seconds,
    load_adapter_config,
    load_mcp_config,
    validate_mcp_config,
)
from maf_mcp_adapter.utils import ConfigError

ENV_VARS = ("MCP_TOOL_TIMEOUT", "MCP_SERVER_COMMAND", "MCP_SERVER_ARGS", "MCP_SERVER_NAME")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestAdapterConfig:
    def test_default_timeout(self):
        assert load_adapter_config().tool_timeout == 30.0

    def test_timeout_from_env(self, monkeypatch):
        monkeypatch.setenv("MCP_TOOL_TIMEOUT", "2.5")

        assert load_adapter_config().tool_timeout == 2.5

    def test_invalid_timeout(self, monkeypatch):
        monkeypatch.setenv("MCP_TOOL_TIMEOUT", "soon")

        with pytest.raises(ConfigError, match="MCP_TOOL_TIMEOUT"):
            load_adapter_config()

    @pytest.mark.parametrize("timeout,expected", [(30, 30), (0.5, 0.5), (0, None), (-3, None), (None, None)])
    def test_deadline_seconds(self, timeout, expected):
        assert deadline_seconds(timeout) == expected


class TestServerConfig:
    def test_nothing_configured(self):
        assert load_mcp_config().servers == []

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MCP_SERVER_COMMAND", "python")
        monkeypatch.setenv("MCP_SERVER_ARGS", "greeter_server.py --label 'two words'")
        monkeypatch.setenv("MCP_SERVER_NAME", "greeter")

        config = load_mcp_config()

        assert config.servers == [
            MCPServerConfig(
                name="greeter",
                command="python",
                args=["greeter_server.py", "--label", "two words"],
            )
        ]

    def test_from_file_with_env_substitution(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GREETER_TOKEN", "secret")
        (tmp_path / "mcp-config.json").write_text(json.dumps({
            "servers": [{
                "name": "greeter",
                "command": "python",
                "args": ["greeter_server.py"],
                "env": {"TOKEN": "$GREETER_TOKEN", "MODE": "test"},
            }],
        }))

        config = load_mcp_config()

        assert config.get_server("greeter") == MCPServerConfig(
            name="greeter",
            command="python",
            args=["greeter_server.py"],
            env={"TOKEN": "secret", "MODE": "test"},
        )
        assert config.get_server("missing") is None

    def test_file_takes_priority(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MCP_SERVER_COMMAND", "node")
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"servers": [{"name": "a", "command": "python"}]}))

        config = load_mcp_config(str(path))

        assert [s.command for s in config.servers] == ["python"]

    def test_malformed_file(self, tmp_path):
        (tmp_path / "mcp-config.json").write_text("{not json")

        with pytest.raises(ConfigError):
            load_mcp_config()

    def test_server_missing_command(self, tmp_path):
        (tmp_path / "mcp-config.json").write_text(json.dumps({"servers": [{"name": "a"}]}))

        with pytest.raises(ConfigError) as exc_info:
            load_mcp_config()

        assert isinstance(exc_info.value.__cause__, KeyError)

    @pytest.mark.parametrize("args", ["greeter_server.py", {"script": "greeter_server.py"}, 3])
    def test_args_must_be_a_list(self, tmp_path, args):
        (tmp_path / "mcp-config.json").write_text(json.dumps({
            "servers": [{"name": "greeter", "command": "python", "args": args}],
        }))

        with pytest.raises(ConfigError, match="args must be a list"):
            load_mcp_config()


class TestValidate:
    def test_valid(self):
        config = MCPConfig(servers=[MCPServerConfig(name="a", command="python")])

        assert validate_mcp_config(config) == []

    def test_problems(self):
        config = MCPConfig(servers=[
            MCPServerConfig(name="", command="python"),
            MCPServerConfig(name="a", command=""),
            MCPServerConfig(name="a", command="python"),
        ])

        assert validate_mcp_config(config) == [
            "Server missing name",
            "Server a: missing command",
            "Server a: duplicate name",
        ]
