# =============================================================================
# agent/icon_agent.py  —  Google ADK Agent wired to the Hugeicons MCP server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates a Google ADK agent that helps a developer pick Hugeicons icons and
#   wire them into their UI framework.  The agent has no icon knowledge of
#   its own; everything comes from the MCP tools in tools/mcp_server.py.
#
#   ┌──────────────────────────┐   stdio (MCP)   ┌──────────────────────┐
#   │  ADK Agent               │ ──────────────▶ │  FastMCP Server      │
#   │  LiteLlm model + prompt  │ ◀────────────── │  (tools/mcp_server)  │
#   └──────────────────────────┘                 └──────────────────────┘
#                                                          │
#                                                          ▼
#                                                ┌──────────────────────┐
#                                                │  core/ (search, API) │
#                                                └──────────────────────┘
#
# MODEL:
#   LiteLlm lets ADK drive non-Gemini models.  The model string comes from
#   HUGEICONS_AGENT_MODEL (default "openrouter/openai/gpt-4o"); LiteLlm reads
#   the matching API key (e.g., OPENROUTER_API_KEY) from the environment.
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_icon_assistant_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def create_agent() -> Agent:
    """Create the icon assistant agent.

    The MCP server is started as a subprocess with "uv run" so it uses the
    project's virtual environment, and from the project root so that
    `python -m tools.mcp_server` can import core/.

    Returns:
        A configured Google ADK Agent instance.
    """
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            cwd=project_root,
        ),
    )

    model = os.environ.get("HUGEICONS_AGENT_MODEL", DEFAULT_MODEL)

    return Agent(
        name="hugeicons_assistant",                 # Used in logs and traces
        model=LiteLlm(model=model),
        instruction=get_icon_assistant_prompt(),
        tools=[mcp_tools],
    )
