# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the Hugeicons server: the
# ranked fuzzy search, the catalog and glyph clients, and the platform docs.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any orchestration
#   framework.  Every module here is plain Python (plus rapidfuzz for the
#   edit-distance math and cachetools for the catalog snapshot), so it can be
#   imported and tested without a server.
# =============================================================================
