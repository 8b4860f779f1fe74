# =============================================================================
# core/__init__.py
# =============================================================================
# Framework-free logic for talking to the eBird API 2.0.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any other
#   orchestration framework.  The only third-party import is httpx, in
#   client.py.  Settings, request builders, and errors can all be tested
#   with no MCP host and no network.
# =============================================================================
