# =============================================================================
# core/search.py  —  Ranked fuzzy icon search
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns (catalog, "chart up") into an ordered list of icons, best first.
#
# THE PIPELINE:
#
#   "Chart up"
#      │  tokenize_query()
#      ▼
#   ["chart", "up", "chart-up"]          ← adjacent pairs are re-joined
#      │
#      │  for each term:
#      │    match_term()        → which icons match this term, and how well
#      │    intersect           → drop candidates that missed this term
#      │    _exact_multiplier() → reward exact words / substrings in the name
#      │    accumulate          → score += base + base * multiplier
#      ▼
#   sort ascending (lower = better) → IconSummary list
#
# AND SEMANTICS:
#   Every icon starts as a candidate.  A candidate that misses even ONE term
#   is gone for good, so "home settings" only returns icons that match both
#   words.  Long queries therefore narrow results quickly.
#
# PURITY:
#   Everything here is a function of its arguments.  No module-level caches:
#   the catalog snapshot is cached by core/catalog.py, not here.
# =============================================================================

import re
import sys
from typing import Iterable, Optional, Sequence

from core.fuzzy import DEFAULT_OPTIONS, MatchOptions, score_field
from core.models import IconRecord, IconSummary, SearchableIcon, Tags


# Relative importance of each searchable field.  A name hit outweighs a tag
# hit, which outweighs a category hit, which outweighs the catch-all text.
FIELD_WEIGHTS: dict[str, float] = {
    "name": 2.0,
    "tags": 1.5,
    "category": 0.8,
    "all_text": 0.5,
}

# Score multipliers applied after a term matched, strongest first.
EXACT_WORD_MULTIPLIER = 0.1
NAME_SUBSTRING_MULTIPLIER = 0.3
TAG_SUBSTRING_MULTIPLIER = 0.5
FUZZY_ONLY_MULTIPLIER = 1.0

# A perfect field score of 0 would make every weight look the same.
_EPSILON = sys.float_info.epsilon

_WORD_SPLIT = re.compile(r"[\s-]")


# -----------------------------------------------------------------------------
# Searchable-text projection
# -----------------------------------------------------------------------------
def _tag_tokens(tags: Optional[Tags]) -> list[str]:
    if not tags:
        return []
    if isinstance(tags, str):
        tags = tags.split(",")
    return [tag.strip() for tag in tags if tag and tag.strip()]


def build_searchable_icon(icon: IconRecord) -> SearchableIcon:
    """Flatten one icon into lowercase text fields for matching.

    all_text holds every spelling of the name an agent might type:
    "chart-up", "chart up", "chartup", "chart", "up", plus the tags, the
    category and every word inside multi-word tags.
    """
    name = icon.name
    tags = _tag_tokens(icon.tags)
    category = icon.category or ""

    parts = [
        name,
        name.replace("-", " "),
        name.replace("-", ""),
    ]
    if "-" in name:
        parts.extend(name.split("-"))
    parts.extend(tags)
    parts.append(category)
    for tag in tags:
        parts.extend(_WORD_SPLIT.split(tag))

    return SearchableIcon(
        name=name.lower(),
        tags=" ".join(tags).lower(),
        category=category.lower(),
        all_text=" ".join(part for part in parts if part).lower(),
        icon=icon,
    )


# -----------------------------------------------------------------------------
# Query tokenizer
# -----------------------------------------------------------------------------
def tokenize_query(query: str) -> list[str]:
    """Split a raw query into search terms.

    Hyphens count as spaces, and every adjacent pair of words is also tried
    joined with a hyphen, so "chart up" finds "chart-up".

    Returns:
        Deduplicated terms in first-seen order; [] for a blank query.
    """
    if not query:
        return []

    words = query.lower().replace("-", " ").split()
    terms = list(words)
    for first, second in zip(words, words[1:]):
        terms.append(f"{first}-{second}")
    return list(dict.fromkeys(terms))


# -----------------------------------------------------------------------------
# Per-term fuzzy matcher
# -----------------------------------------------------------------------------
def _normalized_weights(weights: dict[str, float]) -> dict[str, float]:
    total = sum(weights.values())
    return {field: weight / total for field, weight in weights.items()}


def match_term(term: str, candidates: Iterable[SearchableIcon],
               options: MatchOptions = DEFAULT_OPTIONS,
               weights: Optional[dict[str, float]] = None) -> dict[str, float]:
    """Find every candidate that fuzzily matches a single term.

    Each field is scored on its own; the field score is then raised to the
    field's normalized weight, so the same raw score counts as better on a
    heavier field.  A candidate keeps its best (lowest) weighted field score.

    Returns:
        {normalized name: base score}, 0.0 = perfect, 1.0 = worst.
    """
    normalized = _normalized_weights(weights or FIELD_WEIGHTS)
    matches: dict[str, float] = {}

    for candidate in candidates:
        best = None
        for field, weight in normalized.items():
            raw = score_field(term, getattr(candidate, field), options)
            if raw is None:
                continue
            weighted = max(raw, _EPSILON) ** weight
            if best is None or weighted < best:
                best = weighted
        if best is None:
            continue
        previous = matches.get(candidate.name)
        if previous is None or best < previous:
            matches[candidate.name] = best

    return matches


# -----------------------------------------------------------------------------
# Ranking
# -----------------------------------------------------------------------------
def _exact_multiplier(candidate: SearchableIcon, term: str) -> float:
    """How much to boost a matched term, checked strongest first."""
    name = candidate.name
    name_without_hyphens = name.replace("-", "")

    if (term in _WORD_SPLIT.split(name)
            or name == term
            or name_without_hyphens == term):
        return EXACT_WORD_MULTIPLIER
    if term in name or term in name_without_hyphens:
        return NAME_SUBSTRING_MULTIPLIER
    if term in candidate.tags:
        return TAG_SUBSTRING_MULTIPLIER
    return FUZZY_ONLY_MULTIPLIER


def search_icons(icons: Sequence[IconRecord], query: str,
                 options: MatchOptions = DEFAULT_OPTIONS) -> list[IconSummary]:
    """Rank catalog icons against a free-text query.

    Args:
        icons: The catalog snapshot, in catalog order.
        query: Raw query text, e.g. "chart up" or "home-01".
        options: Field matching knobs (defaults to the strict icon profile).

    Returns:
        Matching icons as IconSummary, best match first.  Ties keep catalog
        order.  An empty catalog or a blank query returns [].
    """
    if not query or not icons:
        return []

    terms = tokenize_query(query)
    if not terms:
        return []

    searchable = [build_searchable_icon(icon) for icon in icons]
    results: list[tuple[SearchableIcon, float]] = [(item, 0.0) for item in searchable]

    for term in terms:
        term_scores = match_term(term, searchable, options)

        rescored = []
        for candidate, score in results:
            base = term_scores.get(candidate.name)
            if base is None:
                continue
            multiplier = _exact_multiplier(candidate, term)
            # Both the raw score and its boosted copy accumulate.
            rescored.append((candidate, score + (base + base * multiplier)))
        results = rescored

        if not results:
            break

    results.sort(key=lambda pair: pair[1])
    return [IconSummary.from_record(candidate.icon) for candidate, _ in results]


def search_icons_batch(icons: Sequence[IconRecord], query: str,
                       options: MatchOptions = DEFAULT_OPTIONS) -> list[IconSummary]:
    """Run several comma-separated searches at once.

    "home, notification" ranks "home" and "notification" separately and
    concatenates the two result lists, dropping icons already listed.
    """
    if "," not in query:
        return search_icons(icons, query, options)

    seen = set()
    merged = []
    for part in query.split(","):
        if not part.strip():
            continue
        for summary in search_icons(icons, part.strip(), options):
            if summary.name in seen:
                continue
            seen.add(summary.name)
            merged.append(summary)
    return merged
