# =============================================================================
# core/errors.py  —  Domain exceptions
# =============================================================================
#
# core/ never raises MCP errors directly; it raises these, and the tool layer
# (tools/mcp_server.py) decides how each one reaches the agent.
# =============================================================================


class HugeiconsError(Exception):
    """Base class for every error raised by core/."""


class CatalogUnavailableError(HugeiconsError):
    """The icon catalog could not be fetched or decoded."""


class GlyphLookupError(HugeiconsError):
    """The glyph API failed or answered with success=false."""


class GlyphNotFoundError(GlyphLookupError):
    """The glyph API has no such icon (or no such icon/style pair)."""
