# =============================================================================
# main.py  —  Interactive Console for the eBird Birding Assistant
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/birding_agent.py), which spawns
#      the eBird MCP server over stdio
#   2. Sets up an in-memory session
#   3. Reads questions from the console and streams the agent's events,
#      printing each tool call (with its arguments), each tool result,
#      and any model error as it happens
#   4. Displays the final answer
#
# REQUIREMENTS:
#   EBIRD_API_KEY plus the LLM provider key LiteLlm needs
#   (OPENROUTER_API_KEY for the default model), in the environment or .env.
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Must run BEFORE the agent is created: LiteLlm reads provider keys and
# create_agent() forwards EBIRD_* variables to the server subprocess.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.birding_agent import create_agent

APP_NAME = "ebird_assistant"
USER_ID = "birder"

# Long tool arguments (species lists, free text) are cut to this many chars.
MAX_ARG_CHARS = 40


def describe_tool_call(function_call) -> str:
    """One console line for a tool call, arguments included.

    e.g. "🔧 Calling tool: get_recent_observations(region_code='US-NY', back=7)"
    """
    args = []
    for key, value in (function_call.args or {}).items():
        text = repr(value)
        if len(text) > MAX_ARG_CHARS:
            text = text[:MAX_ARG_CHARS - 3] + "..."
        args.append(f"{key}={text}")
    return f"🔧 Calling tool: {function_call.name}({', '.join(args)})"


def describe_tool_response(function_response) -> str:
    """One console line for what a tool sent back.

    MCP tool results arrive as {"content": [{"type": "text", ...}], "isError": ...}.
    Failed calls show the error text; successful ones just confirm the return.
    """
    response = function_response.response or {}
    if response.get("isError"):
        texts = [
            item.get("text", "")
            for item in response.get("content") or []
            if isinstance(item, dict)
        ]
        detail = " ".join(t for t in texts if t) or "unknown error"
        return f"❌ {function_response.name} failed: {detail}"
    return f"📥 {function_response.name} returned data"


def describe_event_error(event):
    """Return a console line for an ADK error event, or None if it has none."""
    code = getattr(event, "error_code", None)
    message = getattr(event, "error_message", None)
    if not code and not message:
        return None
    return f"⚠️  Model error ({code or 'unknown'}): {message or 'no details'}"


async def run_agent():
    """Run the birding assistant interactively until the user quits."""
    print("=" * 70)
    print("  EBIRD BIRDING ASSISTANT")
    print("  Powered by Google ADK + FastMCP + eBird API 2.0")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask about recent sightings, rarities, hotspots, or taxonomy.")
    print("   (Type 'quit' to exit)\n")
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

        user_message = types.Content(role="user", parts=[types.Part(text=user_input)])

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        final_response = ""
        errors = []
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            error = describe_event_error(event)
            if error:
                errors.append(error)
                print(f"  {error}")
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
                    if getattr(part, "function_call", None):
                        print(f"  {describe_tool_call(part.function_call)}")
                    if getattr(part, "function_response", None):
                        print(f"  {describe_tool_response(part.function_response)}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        elif errors:
            print(f"\n{errors[-1]}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
