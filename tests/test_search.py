"""
Tests for ranked fuzzy icon search (core/search.py).
"""

from dataclasses import asdict
from unittest.mock import patch

import pytest

from core.catalog import fetch_catalog_mock
from core.models import IconRecord, IconSummary
from core.search import (
    EXACT_WORD_MULTIPLIER,
    FUZZY_ONLY_MULTIPLIER,
    NAME_SUBSTRING_MULTIPLIER,
    TAG_SUBSTRING_MULTIPLIER,
    _exact_multiplier,
    build_searchable_icon,
    match_term,
    search_icons,
    search_icons_batch,
    tokenize_query,
)


def _names(results):
    return [result.name for result in results]


@pytest.fixture
def home_catalog():
    return [
        IconRecord(name="home-01", tags="house", category="navigation"),
        IconRecord(name="homework", tags="school", category="education"),
    ]


class TestTokenizeQuery:
    """Test query tokenization."""

    def test_single_word(self):
        """A single word yields exactly one term."""
        assert tokenize_query("bell") == ["bell"]

    def test_lowercases(self):
        """Terms are lowercase."""
        assert tokenize_query("Bell") == ["bell"]

    def test_adjacent_pairs_are_joined(self):
        """"chart up" also searches "chart-up"."""
        assert tokenize_query("chart up") == ["chart", "up", "chart-up"]

    def test_hyphens_split_words(self):
        """Hyphenated queries are split, then re-joined as a compound."""
        assert tokenize_query("home-01") == ["home", "01", "home-01"]

    def test_three_words(self):
        """Only adjacent pairs are joined."""
        assert tokenize_query("a b c") == ["a", "b", "c", "a-b", "b-c"]

    def test_extra_whitespace(self):
        """Runs of whitespace produce no empty terms."""
        assert tokenize_query("  arrow \t  right ") == ["arrow", "right", "arrow-right"]

    def test_duplicates_removed(self):
        """Repeated words appear once, in first-seen order."""
        assert tokenize_query("home home") == ["home", "home-home"]

    @pytest.mark.parametrize("query", ["", "   ", "\t\n", "-", " - - "])
    def test_blank_queries(self, query):
        """Blank queries have no terms."""
        assert tokenize_query(query) == []


class TestBuildSearchableIcon:
    """Test the searchable-text projection."""

    def test_hyphenated_name(self):
        """Every spelling of a hyphenated name ends up in all_text."""
        icon = IconRecord(name="chart-up", tags="Graph, Growth ", category="Business")

        searchable = build_searchable_icon(icon)

        assert searchable.name == "chart-up"
        assert searchable.tags == "graph growth"
        assert searchable.category == "business"
        assert searchable.all_text == (
            "chart-up chart up chartup chart up graph growth business graph growth"
        )

    def test_plain_name_without_tags(self):
        """No tags and no category degrade to empty fields."""
        searchable = build_searchable_icon(IconRecord(name="Bell"))

        assert searchable.name == "bell"
        assert searchable.tags == ""
        assert searchable.category == ""
        assert searchable.all_text == "bell bell bell"

    def test_list_tags(self):
        """Tags given as a list are handled like comma-separated tags."""
        icon = IconRecord(name="home-01", tags=["Home Page", " main", ""])

        searchable = build_searchable_icon(icon)

        assert searchable.tags == "home page main"
        assert "page" in searchable.all_text.split()

    def test_multi_word_tags_are_split(self):
        """Words inside multi-word or hyphenated tags are searchable on their own."""
        icon = IconRecord(name="cart", tags="e-commerce, look up")

        words = build_searchable_icon(icon).all_text.split()

        assert "commerce" in words
        assert "look" in words

    def test_none_fields(self):
        """None tags and category never raise."""
        icon = IconRecord(name="bell", tags=None, category=None)

        searchable = build_searchable_icon(icon)

        assert searchable.tags == ""
        assert searchable.category == ""

    def test_keeps_source_record(self):
        """The projection points back to its icon."""
        icon = IconRecord(name="bell", id="42")

        assert build_searchable_icon(icon).icon is icon


class TestMatchTerm:
    """Test the per-term weighted matcher."""

    def test_only_matching_candidates(self, home_catalog):
        """Candidates that miss the term are absent."""
        candidates = [build_searchable_icon(icon) for icon in home_catalog]

        matches = match_term("01", candidates)

        assert list(matches) == ["home-01"]

    def test_perfect_name_match_is_near_zero(self):
        """An exact name hit has a base score close to 0."""
        candidates = [build_searchable_icon(IconRecord(name="home-01"))]

        assert match_term("home", candidates)["home-01"] < 1e-5

    def test_name_beats_catch_all_text(self):
        """The same exact hit weighs more in the name than in all_text."""
        by_name = build_searchable_icon(IconRecord(name="bell"))
        by_text = build_searchable_icon(
            IconRecord(name="alarm", tags="ringing bell", category="alerts")
        )

        matches = match_term("bell", [by_name, by_text])

        assert matches["bell"] < matches["alarm"]

    def test_scores_in_range(self):
        """Scores stay on the 0..1 scale."""
        candidates = [build_searchable_icon(icon) for icon in fetch_catalog_mock()]

        for score in match_term("home", candidates).values():
            assert 0.0 <= score <= 1.0


class TestExactMultiplier:
    """Test the exact-match boost table."""

    def test_exact_word(self):
        """A whole word of the name gets the strongest boost."""
        searchable = build_searchable_icon(IconRecord(name="chart-up"))

        assert _exact_multiplier(searchable, "chart") == EXACT_WORD_MULTIPLIER

    def test_full_name(self):
        """The full name counts as an exact word."""
        searchable = build_searchable_icon(IconRecord(name="chart-up"))

        assert _exact_multiplier(searchable, "chart-up") == EXACT_WORD_MULTIPLIER

    def test_name_without_hyphens(self):
        """"home01" is an exact match for "home-01"."""
        searchable = build_searchable_icon(IconRecord(name="home-01"))

        assert _exact_multiplier(searchable, "home01") == EXACT_WORD_MULTIPLIER

    def test_name_substring(self):
        """Part of a word in the name gets the medium boost."""
        searchable = build_searchable_icon(IconRecord(name="notification-03"))

        assert _exact_multiplier(searchable, "notif") == NAME_SUBSTRING_MULTIPLIER

    def test_tag_substring(self):
        """A term found only in the tags gets the weak boost."""
        searchable = build_searchable_icon(IconRecord(name="bell-01", tags="alarm, ring"))

        assert _exact_multiplier(searchable, "alarm") == TAG_SUBSTRING_MULTIPLIER

    def test_fuzzy_only(self):
        """Typo matches get no boost."""
        searchable = build_searchable_icon(IconRecord(name="bell-01", tags="alarm"))

        assert _exact_multiplier(searchable, "alrm") == FUZZY_ONLY_MULTIPLIER


class TestSearchIcons:
    """Test the full ranking pipeline."""

    def test_exact_full_name_ranks_first(self, home_catalog):
        """"home-01" beats any fuzzy-only match for its own name."""
        names = _names(search_icons(home_catalog, "home-01"))

        assert names[0] == "home-01"
        if "homework" in names:
            assert names.index("homework") > names.index("home-01")

    def test_compound_term(self):
        """"chart up" finds "chart-up"."""
        catalog = [
            IconRecord(name="chart-up", tags="graph, growth", category="business"),
            IconRecord(name="chart-down", tags="graph, decline", category="business"),
        ]

        assert _names(search_icons(catalog, "chart up")) == ["chart-up"]

    def test_hyphen_insensitive(self):
        """"home01" finds "home-01"."""
        catalog = [IconRecord(name="home-01", tags="house", category="navigation")]

        assert _names(search_icons(catalog, "home01")) == ["home-01"]

    def test_every_term_must_match(self):
        """A candidate missing one term is dropped."""
        catalog = [
            IconRecord(name="home-01", tags="house", category="navigation"),
            IconRecord(name="settings-01", tags="gear", category="interface"),
        ]

        assert search_icons(catalog, "home settings") == []

    def test_notification_scenario(self):
        """A name substring match returns the public fields without id."""
        catalog = [
            IconRecord(
                name="notification-03",
                tags="bell,alert",
                category="communication",
                featured=True,
                version="1.0",
                id="abc",
            )
        ]

        results = search_icons(catalog, "notification")

        assert results == [
            IconSummary(
                name="notification-03",
                tags="bell,alert",
                category="communication",
                featured=True,
                version="1.0",
            )
        ]
        assert "id" not in asdict(results[0])

    def test_exact_word_beats_substring(self):
        """"home-01" outranks "homepage" for "home" despite catalog order."""
        catalog = [IconRecord(name="homepage"), IconRecord(name="home-01")]

        assert _names(search_icons(catalog, "home")) == ["home-01", "homepage"]

    def test_ties_keep_catalog_order(self):
        """Equally good matches stay in catalog order."""
        catalog = [IconRecord(name="home-02"), IconRecord(name="home-01")]

        assert _names(search_icons(catalog, "home")) == ["home-02", "home-01"]

    def test_tags_are_returned_as_given(self):
        """List-shaped tags come back unchanged."""
        catalog = [IconRecord(name="user-circle", tags=["avatar", "profile"])]

        assert search_icons(catalog, "avatar")[0].tags == ["avatar", "profile"]

    @pytest.mark.parametrize("query", ["", "   ", "\t"])
    def test_blank_query(self, query):
        """Blank queries return nothing."""
        assert search_icons(fetch_catalog_mock(), query) == []

    def test_empty_catalog(self):
        """An empty catalog returns nothing."""
        assert search_icons([], "home") == []

    @pytest.mark.parametrize("query", ["home", "chart up", "bell", "zzz", "arrow-right-01"])
    def test_never_more_results_than_icons(self, query):
        """Output length never exceeds catalog length."""
        catalog = fetch_catalog_mock()

        assert len(search_icons(catalog, query)) <= len(catalog)

    def test_idempotent(self):
        """Same catalog and query give the same ordered output."""
        catalog = fetch_catalog_mock()

        assert search_icons(catalog, "home") == search_icons(catalog, "home")

    def test_no_match(self):
        """A query nothing resembles returns nothing."""
        assert search_icons(fetch_catalog_mock(), "zzzzqqq") == []


class TestSearchIconsBatch:
    """Test comma-separated multi-search."""

    def test_without_commas_is_plain_search(self):
        """A single search behaves exactly like search_icons."""
        catalog = fetch_catalog_mock()

        assert search_icons_batch(catalog, "home") == search_icons(catalog, "home")

    def test_segments_are_concatenated(self):
        """Each segment is ranked on its own, in query order."""
        names = _names(search_icons_batch(fetch_catalog_mock(), "home, chart up"))

        assert names == ["home-01", "home-02", "homework", "chart-up"]

    def test_duplicates_removed(self):
        """An icon found by two segments is listed once."""
        names = _names(search_icons_batch(fetch_catalog_mock(), "home-01, home"))

        assert names == ["home-01", "home-02", "homework"]

    def test_blank_segments_ignored(self):
        """Empty segments between commas are skipped."""
        names = _names(search_icons_batch(fetch_catalog_mock(), " , chart up,,"))

        assert names == ["chart-up"]


class TestScoreAccumulation:
    """Test how base scores and multipliers combine into the ranking."""

    def test_boosted_copy_is_added_to_base(self):
        """Each term adds base + base * multiplier, not base * multiplier alone.

        "ring" is an exact word hit (0.1 * 1.1 = 0.11) and "bell" a fuzzy-only
        hit (0.05 * 2.0 = 0.10), so "bell" ranks first.  Multiplying without
        the base would put "ring" first (0.01 vs 0.05).
        """
        catalog = [IconRecord(name="ring"), IconRecord(name="bell")]

        with patch("core.search.match_term", return_value={"ring": 0.1, "bell": 0.05}):
            names = _names(search_icons(catalog, "ring"))

        assert names == ["bell", "ring"]

    def test_scores_sum_across_terms(self):
        """A candidate's total is the sum over every term of the query."""
        catalog = [IconRecord(name="bell"), IconRecord(name="ring")]
        per_term = {
            # fuzzy-only for both icons: each term adds base * 2
            "xx": {"ring": 0.01, "bell": 0.05},
            "yy": {"ring": 0.04, "bell": 0.02},
            "xx-yy": {"ring": 0.0, "bell": 0.0},
        }

        with patch("core.search.match_term",
                   side_effect=lambda term, *args, **kwargs: per_term[term]):
            names = _names(search_icons(catalog, "xx yy"))

        # ring: 0.02 + 0.08 = 0.10, bell: 0.10 + 0.04 = 0.14
        assert names == ["ring", "bell"]
