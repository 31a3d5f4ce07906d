# =============================================================================
# main.py  —  Interactive demo of the Hugeicons MCP server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/icon_agent.py)
#   2. ADK spawns the MCP server (tools/mcp_server.py) over stdio
#   3. You ask for icons ("I need a bell icon for my React app")
#   4. The agent calls search_icons / get_platform_usage / glyph tools
#   5. The final answer is printed
#
# The MCP server itself does not need this file: any MCP client can run
# `python -m tools.mcp_server` directly.
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Load environment variables from .env (API keys, HUGEICONS_* settings)
# BEFORE creating the agent, because LiteLlm reads its key at init.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.icon_agent import create_agent

APP_NAME = "hugeicons_assistant"
USER_ID = "demo_user"


async def run_agent():
    """Run the icon assistant in a terminal loop."""
    print("=" * 70)
    print("  HUGEICONS ASSISTANT")
    print("  Powered by Google ADK + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id=USER_ID,
    )

    print("✅ Agent initialized and ready!\n")
    print("💬 Describe the icon you need (type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        # Keep the last text part: earlier ones are the agent thinking
        # out loud between tool calls.
        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
