# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP tool layer for the eBird API 2.0.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP hosts and core/.  It:
#     1. Declares each tool's typed, constrained parameters (params.py)
#     2. Registers the tools on a FastMCP server (mcp_server.py)
#     3. Serializes eBird's JSON response as pretty-printed text
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build URLs or talk HTTP (that's core/client.py)
#   - They do NOT rename arguments (that's core/endpoints.py)
#   - They do NOT catch upstream errors; FastMCP reports them to the host
# =============================================================================
