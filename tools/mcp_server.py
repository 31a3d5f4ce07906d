# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines every MCP tool and resource the Hugeicons server exposes.  Each
#   tool is a thin wrapper around a core/ function: it validates arguments,
#   calls core/, converts dataclasses to dicts and logs the exchange.
#
# HOW IT WORKS (the flow):
#   1. An agent decides it needs an icon (e.g., "a bell for notifications")
#   2. It calls a tool by name via MCP (e.g., "search_icons")
#   3. FastMCP routes the call to the decorated function below
#   4. The function calls core/ logic, formats the result, and returns it
#   5. The agent receives a clean JSON response
#
# TOOLS:
#   list_icons               → the whole catalog
#   search_icons             → ranked fuzzy search (core/search.py)
#   get_platform_usage       → install + usage docs for one UI platform
#   get_icon_glyphs          → font glyphs of an icon in every style
#   get_icon_glyph_by_style  → font glyph of an icon in one style
#
# RESOURCES:
#   hugeicons://docs/platforms/{platform}   → markdown usage guide
#   hugeicons://icons/index                 → the catalog as JSON
#
# ERROR CONVENTION:
#   - Bad arguments (blank query, unknown platform) come back as an
#     {"error": ..., "hint": ...} dict, so the agent can fix its call.
#   - Upstream failures (catalog down, glyph API errors) raise ToolError,
#     which FastMCP turns into an MCP error result.
#
# RUNNING THIS SERVER:
#     a) Standalone:      python -m tools.mcp_server   (or `hugeicons-mcp`)
#     b) From the agent:  agent/icon_agent.py spawns it over stdio
# =============================================================================

import json
import logging
import sys

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ResourceError, ToolError
from dataclasses import asdict

# --- Import core logic ---
# The tools layer depends on core/ and nothing else.
from core.catalog import IconCatalog
from core.errors import CatalogUnavailableError, GlyphLookupError, GlyphNotFoundError
from core.glyphs import IconStyle, get_all_glyphs, get_glyph_by_style
from core.models import IconSummary
from core.platform_usage import get_platform_usage as lookup_platform_usage
from core.platform_usage import list_platforms, usage_to_markdown
from core.search import search_icons_batch

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to its client over STDOUT.
# A stray log line on stdout would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for response JSON
#     - YELLOW for intermediate status/progress messages
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

# Long catalog dumps are cut in the log, never in the response.
_MAX_LOGGED_RESPONSE_CHARS = 2000

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    body = json.dumps(result, separators=(",", ":"))
    if len(body) > _MAX_LOGGED_RESPONSE_CHARS:
        body = body[:_MAX_LOGGED_RESPONSE_CHARS] + f"... ({len(body)} chars)"
    logging.info(f"{_GREEN}  ← {tool_name} response: {body}{_RESET}")
    return result


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
# The name "hugeicons-mcp" becomes the server identity in MCP.
mcp = FastMCP("hugeicons-mcp")

# One catalog snapshot shared by every tool and resource (see core/catalog.py
# for the TTL).  Tests call catalog.clear() to start from a cold cache.
catalog = IconCatalog()


def _load_icons(tool_name: str):
    try:
        icons = catalog.get_icons()
    except CatalogUnavailableError as e:
        _log_status(f"Catalog unavailable: {e}")
        raise ToolError(f"{tool_name} failed: {e}") from e
    _log_status(f"Catalog holds {len(icons)} icons")
    return icons


def _summaries(icons) -> list[dict]:
    return [asdict(IconSummary.from_record(icon)) for icon in icons]


# =============================================================================
# TOOL 1: list_icons
# =============================================================================
@mcp.tool()
def list_icons() -> dict:
    """Get a list of all available Hugeicons icons.

    WHEN TO CALL THIS: Rarely.  The catalog holds thousands of icons; prefer
    search_icons when you know roughly what you are looking for.

    Returns:
        A dict with:
          - total: Number of icons in the catalog
          - icons: Every icon as {name, tags, category, featured, version}
    """
    _log_request("list_icons")
    icons = _load_icons("list_icons")
    return _log_response("list_icons", {
        "total": len(icons),
        "icons": _summaries(icons),
    })


# =============================================================================
# TOOL 2: search_icons
# =============================================================================
# The heavy lifting is in core/search.py.  This wrapper only validates the
# query, applies the result limit (Context Budget Discipline), and reports
# how many icons matched in total so the agent knows if it should refine.
# =============================================================================
@mcp.tool()
def search_icons(query: str, limit: int = 50) -> dict:
    """Search for icons by name or tags.

    Use commas to search for multiple icons at once
    (e.g. "home, notification, settings").  Within one search every word must
    match, so "chart up" finds "chart-up" but not every chart icon.

    Args:
        query: Search query, e.g. "bell", "arrow right", "home-01".
               Separate multiple searches with commas.
        limit: Maximum number of icons to return (default 50).

    Returns:
        A dict with:
          - query: The query that was run
          - total: Number of matching icons before the limit was applied
          - icons: Best matches first, each {name, tags, category, featured, version}
    """
    _log_request("search_icons", query=query, limit=limit)

    if not isinstance(query, str) or not query.strip():
        return _log_response("search_icons", {
            "error": "Search query must be a non-empty string.",
            "hint": "Pass a word or phrase such as 'home' or 'chart up'.",
        })
    if limit < 1:
        return _log_response("search_icons", {
            "error": f"limit must be at least 1, got {limit}.",
            "hint": "Omit limit to get the default of 50 results.",
        })

    query = query.strip()
    icons = _load_icons("search_icons")
    results = search_icons_batch(icons, query)
    _log_status(f"{len(results)} icons matched '{query}'")

    return _log_response("search_icons", {
        "query": query,
        "total": len(results),
        "icons": [asdict(summary) for summary in results[:limit]],
    })


# =============================================================================
# TOOL 3: get_platform_usage
# =============================================================================
@mcp.tool()
def get_platform_usage(platform: str) -> dict:
    """Get platform-specific usage instructions for Hugeicons.

    WHEN TO CALL THIS: After picking an icon, when the user needs to know how
    to install the icon packages and render the icon in their framework.

    Args:
        platform: One of "react", "vue", "angular", "svelte",
                  "react-native", "flutter".

    Returns:
        A dict with:
          - platform: The platform key
          - install_command: Command (or pubspec line) that installs the package
          - packages: Icon style packages to install alongside it
          - basic_usage: A copy-pasteable snippet
          - props: Component props, each {name, type, description, default}

        Returns an error message if the platform is not supported.
    """
    _log_request("get_platform_usage", platform=platform)

    usage = lookup_platform_usage(platform)
    if usage is None:
        available = list_platforms()
        _log_status(f"Platform not found. Available: {available}")
        return _log_response("get_platform_usage", {
            "error": f"Platform '{platform}' is not supported.",
            "available_platforms": available,
            "hint": "Try one of the available platforms listed above.",
        })

    return _log_response("get_platform_usage", asdict(usage))


# =============================================================================
# TOOL 4: get_icon_glyphs
# =============================================================================
@mcp.tool()
def get_icon_glyphs(icon_name: str) -> dict:
    """Get all glyphs (unicode characters) for an icon across every style.

    WHEN TO CALL THIS: When the user renders icons with the Hugeicons icon
    FONT (plain HTML/CSS) rather than framework components.

    Args:
        icon_name: The exact icon name, e.g. "home-01", "notification-02".
                   Use search_icons first if you only know roughly.

    Returns:
        A dict with:
          - icon_name: The icon looked up
          - glyphs: One entry per style, each
            {icon_name, style, unicode, unicode_decimal, id, created_at, updated_at}
    """
    _log_request("get_icon_glyphs", icon_name=icon_name)

    if not icon_name or not icon_name.strip():
        return _log_response("get_icon_glyphs", {
            "error": "Icon name must be a non-empty string.",
            "hint": "Use search_icons to find the exact icon name.",
        })

    icon_name = icon_name.strip()
    try:
        glyphs = get_all_glyphs(icon_name)
    except GlyphNotFoundError as e:
        raise ToolError(f"{e}. Use search_icons to find the exact icon name.") from e
    except GlyphLookupError as e:
        raise ToolError(f"Failed to get icon glyphs: {e}") from e
    _log_status(f"Found {len(glyphs)} glyphs")

    return _log_response("get_icon_glyphs", {
        "icon_name": icon_name,
        "glyphs": [asdict(glyph) for glyph in glyphs],
    })


# =============================================================================
# TOOL 5: get_icon_glyph_by_style
# =============================================================================
# `style` is typed as a Literal, so FastMCP publishes the allowed values as an
# enum in the tool schema and rejects anything else before we get here.
# =============================================================================
@mcp.tool()
def get_icon_glyph_by_style(icon_name: str, style: IconStyle) -> dict:
    """Get the glyph (unicode character) for an icon in one particular style.

    Args:
        icon_name: The exact icon name, e.g. "home-01".
        style: The icon style, e.g. "stroke-rounded" or "duotone-rounded".

    Returns:
        A dict with:
          - icon_name, style: What was looked up
          - primary: The glyph {unicode, unicode_decimal, ...}
          - secondary: Second-layer glyph for duotone/twotone styles, else null
    """
    _log_request("get_icon_glyph_by_style", icon_name=icon_name, style=style)

    if not icon_name or not icon_name.strip():
        return _log_response("get_icon_glyph_by_style", {
            "error": "Icon name must be a non-empty string.",
            "hint": "Use search_icons to find the exact icon name.",
        })

    icon_name = icon_name.strip()
    try:
        pair = get_glyph_by_style(icon_name, style)
    except ValueError as e:
        return _log_response("get_icon_glyph_by_style", {"error": str(e)})
    except GlyphNotFoundError as e:
        raise ToolError(str(e)) from e
    except GlyphLookupError as e:
        raise ToolError(f"Failed to get icon glyph by style: {e}") from e

    result = {"icon_name": icon_name, "style": style}
    result.update(asdict(pair))
    return _log_response("get_icon_glyph_by_style", result)


# =============================================================================
# RESOURCES
# =============================================================================
@mcp.resource(
    "hugeicons://docs/platforms/{platform}",
    name="Platform Usage Guide",
    description="Markdown implementation guide for Hugeicons on one platform "
                "(react, vue, angular, svelte, react-native, flutter)",
    mime_type="text/markdown",
)
def platform_docs(platform: str) -> str:
    usage = lookup_platform_usage(platform)
    if usage is None:
        raise ResourceError(f"Platform documentation not found for: {platform}")
    return usage_to_markdown(usage)


@mcp.resource(
    "hugeicons://icons/index",
    name="Icons Index",
    description="Complete index of all Hugeicons",
    mime_type="application/json",
)
def icons_index() -> str:
    try:
        icons = catalog.get_icons()
    except CatalogUnavailableError as e:
        raise ResourceError(str(e)) from e
    return json.dumps(_summaries(icons), indent=2)


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    """Start the server on stdio (the transport MCP clients spawn us with)."""
    load_dotenv()
    logging.info("hugeicons MCP server running on stdio")
    mcp.run()


if __name__ == "__main__":
    main()
