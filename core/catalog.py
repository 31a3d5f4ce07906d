# =============================================================================
# core/catalog.py  —  Icon Catalog Provider
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Supplies the list of IconRecords that search, listing and the icons-index
#   resource work on — either from the LIVE Hugeicons API or from a small
#   MOCK catalog bundled below.
#
# DATA SOURCE TOGGLE:
#   HUGEICONS_OFFLINE=true   → mock catalog (deterministic, no network)
#   HUGEICONS_OFFLINE=false  → GET HUGEICONS_CATALOG_URL (default)
#
#   Both providers return the same list[IconRecord], so the search engine
#   never knows which one was used.
#
# CACHING:
#   The full catalog is a few thousand records and changes rarely, so one
#   snapshot is kept in a cachetools TTLCache for HUGEICONS_CACHE_TTL
#   seconds (default one hour, 0 = keep forever).  The cache lives HERE,
#   not in core/search.py: the ranking engine stays a pure function of
#   (catalog, query).
#
# FAILURES:
#   Unlike the glyph helpers, a catalog failure is not papered over with an
#   empty list.  "No icons matched" and "the catalog is down" mean different
#   things to the agent, so fetch errors surface as CatalogUnavailableError.
# =============================================================================

import json
import logging
import os
import threading
import time
import urllib.error
import urllib.request
from typing import Optional

from cachetools import TTLCache

from core.errors import CatalogUnavailableError
from core.models import IconRecord

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_URL = "https://hugeicons.com/api/icons"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_CACHE_TTL_SECONDS = 3600.0


def is_offline() -> bool:
    """True when HUGEICONS_OFFLINE asks for the bundled mock data."""
    return os.environ.get("HUGEICONS_OFFLINE", "false").lower() == "true"


def http_timeout() -> float:
    """HTTP timeout shared by the catalog and glyph clients."""
    raw = os.environ.get("HUGEICONS_HTTP_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid HUGEICONS_HTTP_TIMEOUT=%r", raw)
        return DEFAULT_TIMEOUT_SECONDS


def _cache_ttl() -> float:
    raw = os.environ.get("HUGEICONS_CACHE_TTL")
    if not raw:
        return DEFAULT_CACHE_TTL_SECONDS
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid HUGEICONS_CACHE_TTL=%r", raw)
        return DEFAULT_CACHE_TTL_SECONDS


# =============================================================================
# LIVE PROVIDER: Hugeicons catalog endpoint
# =============================================================================
def fetch_catalog_live(url: Optional[str] = None,
                       timeout: Optional[float] = None) -> list[IconRecord]:
    """Download the full icon catalog.

    The endpoint answers {"icons": [{name, tags, category, ...}, ...]}.
    Records without a name are skipped (and logged) rather than failing the
    whole catalog.

    Raises:
        CatalogUnavailableError: network failure, non-2xx status, invalid
            JSON, or a payload without an "icons" list.
    """
    url = url or os.environ.get("HUGEICONS_CATALOG_URL", DEFAULT_CATALOG_URL)
    timeout = timeout if timeout is not None else http_timeout()

    request = urllib.request.Request(url, headers={"Accept": "application/json"})
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            data = json.loads(response.read().decode())
    except urllib.error.HTTPError as e:
        raise CatalogUnavailableError(
            f"Failed to load icons data: HTTP {e.code} from {url}"
        ) from e
    except (urllib.error.URLError, OSError) as e:
        raise CatalogUnavailableError(f"Failed to load icons data: {e}") from e
    except ValueError as e:
        raise CatalogUnavailableError(
            f"Failed to load icons data: invalid JSON from {url}"
        ) from e

    raw_icons = data.get("icons") if isinstance(data, dict) else None
    if not isinstance(raw_icons, list):
        raise CatalogUnavailableError(
            f"Failed to load icons data: no 'icons' list in response from {url}"
        )

    icons = []
    for payload in raw_icons:
        if not isinstance(payload, dict):
            logger.warning("Skipping non-object catalog entry: %r", payload)
            continue
        try:
            icons.append(IconRecord.from_dict(payload))
        except ValueError as e:
            logger.warning("Skipping catalog entry: %s", e)
    return icons


# =============================================================================
# MOCK PROVIDER: a small, hand-picked catalog
# =============================================================================
# The entries are chosen so the interesting search behaviors are all
# reachable offline: numbered variants (home-01 / home-02), compound names
# (chart-up), near-misses (homework), multi-word tags, and list-shaped tags.
# =============================================================================
_MOCK_CATALOG: list[dict] = [
    {"id": "1", "name": "home-01", "tags": "house, home page, main",
     "category": "navigation", "featured": True, "version": "1.0.0"},
    {"id": "2", "name": "home-02", "tags": "house, building",
     "category": "navigation", "featured": False, "version": "1.0.0"},
    {"id": "3", "name": "homework", "tags": "school, study, assignment",
     "category": "education", "featured": False, "version": "1.1.0"},
    {"id": "4", "name": "notification-03", "tags": "bell, alert",
     "category": "communication", "featured": True, "version": "1.0.0"},
    {"id": "5", "name": "notification-off-01", "tags": "bell, mute, silent",
     "category": "communication", "featured": False, "version": "1.2.0"},
    {"id": "6", "name": "chart-up", "tags": "graph, growth, increase",
     "category": "business", "featured": True, "version": "1.0.0"},
    {"id": "7", "name": "chart-down", "tags": "graph, decline, decrease",
     "category": "business", "featured": False, "version": "1.0.0"},
    {"id": "8", "name": "settings-01", "tags": "gear, preferences, cog",
     "category": "interface", "featured": True, "version": "1.0.0"},
    {"id": "9", "name": "search-01", "tags": "magnifier, find, look up",
     "category": "interface", "featured": True, "version": "1.0.0"},
    {"id": "10", "name": "user-circle", "tags": ["avatar", "profile", "account"],
     "category": "users", "featured": False, "version": "1.3.0"},
    {"id": "11", "name": "calendar-03", "tags": "date, schedule, event",
     "category": "time", "featured": False, "version": "1.0.0"},
    {"id": "12", "name": "mail-01", "tags": "email, envelope, message",
     "category": "communication", "featured": True, "version": "1.0.0"},
    {"id": "13", "name": "shopping-cart-01", "tags": "cart, basket, e-commerce",
     "category": "commerce", "featured": False, "version": "1.1.0"},
    {"id": "14", "name": "arrow-right-01", "tags": "next, forward, direction",
     "category": "arrows", "featured": False, "version": "1.0.0"},
]


def fetch_catalog_mock() -> list[IconRecord]:
    """Return the bundled sample catalog."""
    return [IconRecord.from_dict(payload) for payload in _MOCK_CATALOG]


# =============================================================================
# PUBLIC API: IconCatalog (cached dispatcher)
# =============================================================================
_SNAPSHOT_KEY = "icons"


class IconCatalog:
    """Cached access to the icon catalog.

    get_icons() dispatches to the mock or live provider on first use and
    then serves the same snapshot from a single-entry TTLCache until the TTL
    runs out.  A failed refresh raises; a stale snapshot is never served
    silently.
    """

    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self._lock = threading.Lock()
        # Built on first use so a TTL from a .env file loaded after import
        # still applies.
        self._cache: Optional[TTLCache] = None

    def _snapshot_cache(self) -> TTLCache:
        if self._cache is None:
            ttl = _cache_ttl()
            if ttl <= 0:
                ttl = float("inf")
            self._cache = TTLCache(maxsize=1, ttl=ttl, timer=self._clock)
        return self._cache

    def get_icons(self) -> list[IconRecord]:
        """Return the catalog snapshot, fetching it if needed.

        Raises:
            CatalogUnavailableError: the live catalog could not be loaded.
        """
        with self._lock:
            cache = self._snapshot_cache()
            icons = cache.get(_SNAPSHOT_KEY)
            if icons is not None:
                return icons

            offline = is_offline()
            icons = fetch_catalog_mock() if offline else fetch_catalog_live()
            logger.info("Loaded %d icons (%s catalog)", len(icons),
                        "mock" if offline else "live")

            cache[_SNAPSHOT_KEY] = icons
            return icons

    def clear(self) -> None:
        """Forget the cached snapshot; the next get_icons() refetches."""
        with self._lock:
            if self._cache is not None:
                self._cache.clear()
