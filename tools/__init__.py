# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP server that exposes core/ as MCP tools.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between MCP clients and core/.  It:
#     1. Imports plain functions from core/
#     2. Wraps them in FastMCP tool and resource decorators
#     3. Converts dataclasses to dicts for JSON
#     4. Maps domain errors to MCP errors
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT rank icons or talk HTTP themselves (that's core/)
#   - They do NOT know which client is calling them
#
# TOOL CONTRACT QUALITY:
#   Each tool has a descriptive name, a docstring the LLM reads to decide
#   WHEN to call it, typed parameters, and a documented return format.
# =============================================================================
