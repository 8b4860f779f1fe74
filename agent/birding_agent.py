# =============================================================================
# agent/birding_agent.py  —  Google ADK Agent wired to the eBird MCP server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates an example MCP HOST: a Google ADK agent that starts the eBird
#   tool server (tools/mcp_server.py) as a subprocess over stdio, discovers
#   its tools, and uses an LLM (via LiteLlm) to decide which to call.
#
# HOW IT WORKS (simplified):
#
#   ┌────────────────────────────┐   stdio (MCP)   ┌──────────────────────┐
#   │  ADK Agent                 │ ──────────────▶ │  FastMCP server      │
#   │  prompt + LLM (LiteLlm)    │ ◀────────────── │  tools/mcp_server.py │
#   └────────────────────────────┘                 └──────────┬───────────┘
#                                                             │ HTTPS GET
#                                                             ▼
#                                                  ┌──────────────────────┐
#                                                  │  api.ebird.org/v2    │
#                                                  └──────────────────────┘
#
# ENVIRONMENT FOR THE SUBPROCESS:
#   The MCP stdio client does NOT pass the parent's full environment to the
#   server it spawns.  EBIRD_API_KEY (and the other EBIRD_* settings) are
#   forwarded explicitly, otherwise the server would exit at startup.
# =============================================================================

import os
from typing import Mapping, Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_birding_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"

# Variables the server process needs; PATH/HOME keep `uv` itself working.
FORWARDED_ENV_VARS = (
    "EBIRD_API_KEY",
    "EBIRD_BASE_URL",
    "EBIRD_HTTP_TIMEOUT",
    "LOG_LEVEL",
    "PATH",
    "HOME",
)


def server_environment(environ: Optional[Mapping[str, str]] = None) -> dict[str, str]:
    """Pick the variables to hand to the MCP server subprocess."""
    env = os.environ if environ is None else environ
    return {name: env[name] for name in FORWARDED_ENV_VARS if name in env}


def create_agent() -> Agent:
    """Create and configure the eBird birding assistant agent.

    Returns:
        A configured Google ADK Agent whose only tools are the eBird MCP tools.
    """
    # Run the server as a module from the project root so `core` and `tools`
    # resolve the same way they do for `python -m tools.mcp_server`.
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            env=server_environment(),
            cwd=project_root,
        ),
    )

    return Agent(
        name="ebird_birding_assistant",
        model=LiteLlm(model=os.environ.get("BIRDING_AGENT_MODEL", DEFAULT_MODEL)),
        instruction=get_birding_prompt(),
        tools=[mcp_tools],
    )
