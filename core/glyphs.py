# =============================================================================
# core/glyphs.py  —  Icon font glyph lookup
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Answers "which unicode character draws icon X in style Y?" for people
#   using the Hugeicons icon FONT instead of SVG components.
#
# DATA SOURCE TOGGLE (shared with core/catalog.py):
#   HUGEICONS_OFFLINE=true   → deterministic mock glyphs for the mock catalog
#   HUGEICONS_OFFLINE=false  → Hugeicons REST API at HUGEICONS_API_BASE
#
# API SHAPES:
#   GET {base}/icon/{name}/glyphs
#       → {"success": true, "message": null, "data": {"glyphs": [...]}}
#   GET {base}/icon/{name}/glyph?style=stroke-rounded
#       → {"success": true, "message": null,
#          "data": {"primary": {...}, "secondary": {...} | null}}
#
# ERRORS:
#   404                         → GlyphNotFoundError
#   anything else going wrong   → GlyphLookupError (with upstream message)
#   blank name / bad style      → ValueError (caller bug, not an API problem)
# =============================================================================

import json
import logging
import os
import urllib.error
import urllib.parse
import urllib.request
from typing import Literal, Optional, get_args

from core.catalog import fetch_catalog_mock, http_timeout, is_offline
from core.errors import GlyphLookupError, GlyphNotFoundError
from core.models import Glyph, GlyphPair

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.hugeicons.com/v1"

IconStyle = Literal[
    "bulk-rounded",
    "duotone-rounded",
    "solid-rounded",
    "solid-sharp",
    "solid-standard",
    "stroke-rounded",
    "stroke-sharp",
    "stroke-standard",
    "twotone-rounded",
]
ICON_STYLES: tuple[str, ...] = get_args(IconStyle)

# Two-layer styles: the API returns a secondary glyph for these.
_LAYERED_STYLES = {"duotone-rounded", "twotone-rounded"}

# Mock glyphs live in the Unicode Private Use Area, like the real font.
_MOCK_BASE_CODEPOINT = 0xE000
_MOCK_SECONDARY_OFFSET = 0x1000


def _api_base() -> str:
    return os.environ.get("HUGEICONS_API_BASE", DEFAULT_API_BASE).rstrip("/")


def _require_icon_name(icon_name: str) -> str:
    if not icon_name or not icon_name.strip():
        raise ValueError("Icon name is required")
    return icon_name.strip()


def _require_style(style: str) -> str:
    if not style or not style.strip():
        raise ValueError("Style is required")
    style = style.strip()
    if style not in ICON_STYLES:
        raise ValueError(
            f"Invalid style '{style}'. Supported styles are: {', '.join(ICON_STYLES)}"
        )
    return style


def _get_json(url: str, not_found_message: str, failure_prefix: str) -> dict:
    """GET a JSON envelope and return its `data` member."""
    logger.debug("GET %s", url)
    request = urllib.request.Request(url, headers={"Accept": "application/json"})
    try:
        with urllib.request.urlopen(request, timeout=http_timeout()) as response:
            payload = json.loads(response.read().decode())
    except urllib.error.HTTPError as e:
        if e.code == 404:
            raise GlyphNotFoundError(not_found_message) from e
        raise GlyphLookupError(f"{failure_prefix}: HTTP {e.code}") from e
    except (urllib.error.URLError, OSError) as e:
        raise GlyphLookupError(f"{failure_prefix}: {e}") from e
    except ValueError as e:
        raise GlyphLookupError(f"{failure_prefix}: invalid JSON response") from e

    if not isinstance(payload, dict) or not payload.get("success"):
        message = payload.get("message") if isinstance(payload, dict) else None
        raise GlyphLookupError(message or failure_prefix)
    return payload.get("data") or {}


# =============================================================================
# MOCK PROVIDER
# =============================================================================
def _mock_glyph(icon_name: str, style: str, secondary: bool = False) -> Glyph:
    names = [icon.name for icon in fetch_catalog_mock()]
    if icon_name not in names:
        raise GlyphNotFoundError(f"Icon '{icon_name}' not found")

    codepoint = (_MOCK_BASE_CODEPOINT
                 + names.index(icon_name) * len(ICON_STYLES)
                 + ICON_STYLES.index(style))
    if secondary:
        codepoint += _MOCK_SECONDARY_OFFSET
    return Glyph(
        icon_name=icon_name,
        style=style,
        unicode=f"{codepoint:x}",
        unicode_decimal=codepoint,
        id=f"mock-{icon_name}-{style}{'-secondary' if secondary else ''}",
    )


# =============================================================================
# PUBLIC API
# =============================================================================
def get_all_glyphs(icon_name: str) -> list[Glyph]:
    """Get the glyph of an icon in every available style.

    Args:
        icon_name: Icon name, e.g. "home-01".

    Returns:
        One Glyph per style the icon ships in.

    Raises:
        ValueError: blank icon name.
        GlyphNotFoundError: the API does not know the icon.
        GlyphLookupError: any other API failure.
    """
    icon_name = _require_icon_name(icon_name)

    if is_offline():
        return [_mock_glyph(icon_name, style) for style in ICON_STYLES]

    url = f"{_api_base()}/icon/{urllib.parse.quote(icon_name, safe='')}/glyphs"
    data = _get_json(
        url,
        not_found_message=f"Icon '{icon_name}' not found",
        failure_prefix="Failed to fetch glyphs",
    )
    return [Glyph.from_dict(item) for item in data.get("glyphs") or []]


def get_glyph_by_style(icon_name: str, style: str) -> GlyphPair:
    """Get the glyph of an icon in one style.

    Duotone and twotone styles come back with a secondary glyph for the
    second layer; other styles have secondary=None.

    Raises:
        ValueError: blank icon name, blank or unknown style.
        GlyphNotFoundError: no such icon/style pair.
        GlyphLookupError: any other API failure.
    """
    icon_name = _require_icon_name(icon_name)
    style = _require_style(style)

    if is_offline():
        secondary: Optional[Glyph] = None
        if style in _LAYERED_STYLES:
            secondary = _mock_glyph(icon_name, style, secondary=True)
        return GlyphPair(primary=_mock_glyph(icon_name, style), secondary=secondary)

    query = urllib.parse.urlencode({"style": style})
    url = f"{_api_base()}/icon/{urllib.parse.quote(icon_name, safe='')}/glyph?{query}"
    data = _get_json(
        url,
        not_found_message=f"Icon '{icon_name}' with style '{style}' not found",
        failure_prefix="Failed to fetch glyph",
    )

    primary = data.get("primary")
    if not isinstance(primary, dict):
        raise GlyphLookupError("Failed to fetch glyph: response has no primary glyph")
    secondary_payload = data.get("secondary")
    return GlyphPair(
        primary=Glyph.from_dict(primary),
        secondary=Glyph.from_dict(secondary_payload) if secondary_payload else None,
    )
