# =============================================================================
# agent/__init__.py
# =============================================================================
# An example MCP host for the eBird tool server.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer is a CLIENT of tools/mcp_server.py.  It spawns the
#   server over stdio, lets the LLM pick tools, and turns eBird JSON into
#   answers.  It contains no request-building or HTTP code of its own.
#
#   Requires the optional "agent" extra (google-adk, litellm).
# =============================================================================
