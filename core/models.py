# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the icon server)
# =============================================================================
#
# These dataclasses define the shape of every piece of information that flows
# between the catalog, the search engine, the glyph API and the MCP tools.
# The tool layer turns them into dicts with dataclasses.asdict(), so every
# field here ends up in a tool response.
#
# DESIGN PRINCIPLE — "No Phantom Fields":
#   If a field exists in a result model, the agent *will* read it.
#   That's why IconSummary has no `id`: the upstream identifier means
#   nothing to a caller picking an icon by name.
# =============================================================================

from dataclasses import dataclass, field
from typing import Optional, Union


# Tags arrive either as "bell, alert" or as ["bell", "alert"] depending on the
# endpoint, so both shapes are accepted everywhere.
Tags = Union[str, list[str]]


# -----------------------------------------------------------------------------
# IconRecord — one entry in the Hugeicons catalog
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class IconRecord:
    """A catalog entry as delivered by the icons API."""

    name: str                          # "chart-up", unique within a snapshot
    tags: Tags = ""                    # "chart, graph, growth"
    category: str = ""                 # "business"
    featured: bool = False             # Informational only
    version: str = ""                  # Release the icon first shipped in
    id: Optional[str] = None           # Upstream id, never returned by search

    @classmethod
    def from_dict(cls, payload: dict) -> "IconRecord":
        """Build a record from an upstream JSON object.

        Missing or null fields degrade to empty values.  A payload without a
        usable name is rejected, since the name is the icon's identity.
        """
        name = payload.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Icon payload has no name: {payload!r}")

        tags = payload.get("tags") or ""
        if isinstance(tags, (list, tuple)):
            tags = [str(tag) for tag in tags]
        elif not isinstance(tags, str):
            tags = str(tags)

        raw_id = payload.get("id")
        return cls(
            name=name,
            tags=tags,
            category=payload.get("category") or "",
            featured=bool(payload.get("featured", False)),
            version=str(payload.get("version") or ""),
            id=str(raw_id) if raw_id is not None else None,
        )


# -----------------------------------------------------------------------------
# IconSummary — what search_icons returns for each hit
# -----------------------------------------------------------------------------
@dataclass
class IconSummary:
    """Public projection of an IconRecord (no upstream id)."""

    name: str
    tags: Tags
    category: str
    featured: bool
    version: str

    @classmethod
    def from_record(cls, icon: IconRecord) -> "IconSummary":
        return cls(
            name=icon.name,
            tags=icon.tags,
            category=icon.category,
            featured=icon.featured,
            version=icon.version,
        )


# -----------------------------------------------------------------------------
# SearchableIcon — the flattened, lowercase text view used for matching
# -----------------------------------------------------------------------------
# Built once per search call and thrown away afterwards.  Never persisted,
# never returned to the agent.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class SearchableIcon:
    """Lowercase text fields of one icon, ready for fuzzy matching."""

    name: str                          # "chart-up"
    tags: str                          # "chart graph growth"
    category: str                      # "business"
    all_text: str                      # Every variant of the above, space-joined
    icon: IconRecord = field(compare=False, repr=False)


# -----------------------------------------------------------------------------
# Glyph — one font glyph of an icon in one style
# -----------------------------------------------------------------------------
@dataclass
class Glyph:
    """A unicode code point assigned to an icon in a given style."""

    icon_name: str                     # "home-01"
    style: str                         # "stroke-rounded"
    unicode: str                       # "e001" (hex, no prefix)
    unicode_decimal: int               # 57345
    id: str = ""
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, payload: dict) -> "Glyph":
        return cls(
            icon_name=payload.get("icon_name", ""),
            style=payload.get("style", ""),
            unicode=payload.get("unicode", ""),
            unicode_decimal=int(payload.get("unicode_decimal") or 0),
            id=str(payload.get("id") or ""),
            created_at=payload.get("created_at") or "",
            updated_at=payload.get("updated_at") or "",
        )


@dataclass
class GlyphPair:
    """Glyph lookup result for a single style.

    Duotone and twotone styles are drawn with two layers, so they carry a
    secondary glyph.  Every other style has secondary=None.
    """

    primary: Glyph
    secondary: Optional[Glyph] = None


# -----------------------------------------------------------------------------
# PlatformUsage — static "how do I use this in framework X" documentation
# -----------------------------------------------------------------------------
@dataclass
class PropSpec:
    """One component prop in a platform's usage table."""

    name: str
    type: str
    description: str
    default: Optional[str] = None


@dataclass
class PlatformUsage:
    """Installation and usage instructions for one UI platform."""

    platform: str                      # "react"
    install_command: str               # "npm install @hugeicons/react"
    packages: list[str] = field(default_factory=list)
    basic_usage: str = ""              # Copy-pasteable snippet
    props: list[PropSpec] = field(default_factory=list)
