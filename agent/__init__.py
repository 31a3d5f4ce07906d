# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains a Google ADK demo agent that uses the Hugeicons MCP
# server.  It is a client of tools/mcp_server.py, nothing more: the agent
# decides WHICH tool to call, the server and core/ do the work.
# =============================================================================
