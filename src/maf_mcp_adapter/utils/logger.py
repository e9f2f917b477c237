"""
Logging Utilities

Provides structured logging for the MCP adapter.

- Structured JSON logging for production (JSON_LOGGING=true)
- Console logging for development
- Per-module loggers
"""

import os
import sys
import json
import logging
from datetime import datetime, timezone
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

# Log level from environment
LOG_LEVEL = os.getenv("LOG_LEVEL", "info").upper()

# Whether to use JSON format
JSON_LOGGING = os.getenv("JSON_LOGGING", "false").lower() == "true"

THIRD_PARTY_LOGGERS = ("mcp", "httpx", "httpcore", "openai", "agent_framework")


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class ConsoleFormatter(logging.Formatter):
    """Console formatter with colors and structure."""

    COLORS = {
        "DEBUG": "\033[36m",    # Cyan
        "INFO": "\033[32m",     # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",    # Red
        "CRITICAL": "\033[35m", # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        reset = self.RESET if color else ""

        timestamp = datetime.now().strftime("%H:%M:%S")

        msg = f"{color}[{timestamp}] [{record.levelname:7}]{reset} [{record.name}] {record.getMessage()}"

        if hasattr(record, "extra_fields") and record.extra_fields:
            extras = " ".join(f"{k}={v}" for k, v in record.extra_fields.items())
            msg += f" ({extras})"

        if record.exc_info:
            msg += "\n" + self.formatException(record.exc_info)

        return msg


def setup_logging(level: Optional[str] = None, json_logging: Optional[bool] = None) -> None:
    """
    Set up logging for the application.

    Args:
        level: Log level (debug, info, warning, error). Uses LOG_LEVEL env if not provided.
        json_logging: Force JSON output. Uses JSON_LOGGING env if not provided.
    """
    log_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    use_json = JSON_LOGGING if json_logging is None else json_logging

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stdout is reserved for the stdio transport
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(JSONFormatter() if use_json else ConsoleFormatter())

    root_logger.addHandler(handler)

    for name in THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_tool_call(
    logger: logging.Logger,
    tool_name: str,
    args: dict,
    result: Optional[str] = None,
    duration_ms: Optional[float] = None,
) -> None:
    """
    Log a tool call with structured data.

    Args:
        logger: Logger instance
        tool_name: Name of the tool called
        args: Tool arguments
        result: Tool result
        duration_ms: Execution time in milliseconds
    """
    extra_fields = {
        "tool": tool_name,
        "args": json.dumps(args) if args else "{}",
    }

    if duration_ms is not None:
        extra_fields["duration_ms"] = round(duration_ms, 2)

    if result is not None:
        extra_fields["result_length"] = len(result)
    logger.info(f"Tool {tool_name} executed", extra={"extra_fields": extra_fields})


def log_tool_discovery(logger: logging.Logger, tool_names: list[str]) -> None:
    """
    Log the outcome of a tool listing.

    The first few names go into the summary line; every name is
    logged at debug level.
    """
    extra_fields = {"tool_count": len(tool_names)}
    if tool_names:
        shown = ",".join(tool_names[:5])
        if len(tool_names) > 5:
            shown += f",+{len(tool_names) - 5} more"
        extra_fields["tools"] = shown

    logger.info(f"Discovered {len(tool_names)} MCP tools", extra={"extra_fields": extra_fields})

    for name in tool_names:
        logger.debug(f"  - {name}")
