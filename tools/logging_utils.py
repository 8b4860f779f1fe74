# =============================================================================
# tools/logging_utils.py  —  STDERR Logging for the MCP Server
# =============================================================================
# We log to STDERR because the MCP server talks to its host over STDOUT
# (stdin/stdout is the MCP transport).  A single log line on stdout would
# corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - YELLOW for intermediate status (the upstream URL being fetched)
#     - GREEN for the response summary
# =============================================================================

import logging
import sys
from typing import Any

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (summary)
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

logger = logging.getLogger("ebird_mcp")


def configure_logging(level: str = "INFO") -> None:
    """Send all log records to stderr in the server's format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def log_request(tool_name: str, **params: Any) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def summarize_payload(payload: Any) -> str:
    """Describe a JSON payload in a few words (type and size), never its content."""
    if isinstance(payload, list):
        return f"list of {len(payload)} item(s)"
    if isinstance(payload, dict):
        return f"object with {len(payload)} key(s)"
    return type(payload).__name__


def log_response(tool_name: str, payload: Any) -> Any:
    """Log a one-line summary of the tool response in GREEN, then return it."""
    logger.info(f"{_GREEN}  ← {tool_name} response: {summarize_payload(payload)}{_RESET}")
    return payload
