"""Tests for the tutorial entry registry.

Covers: slug lookup, published filtering, category grouping, the mode
tag predicates, and registry construction checks.
"""

from __future__ import annotations

import pytest

from toolkata.catalog.entries import (
    COMING_SOON,
    ENTRY_CATEGORIES,
    PUBLISHED,
    TOOL_ENTRIES,
    SingleToolEntry,
    Tool,
    ToolPairing,
    build_registry,
    get_entries_by_category,
    get_entry,
    get_published_entries,
    is_pairing,
    is_tutorial,
    is_valid_entry_slug,
)
from toolkata.catalog.validation import CatalogIntegrityError


def _pairing(slug="a-b", **overrides):
    fields = dict(
        slug=slug,
        from_tool=Tool("b", "B tool"),
        to_tool=Tool("a", "A tool"),
        category="Other",
        steps=3,
        estimated_time="~5 min",
        status=PUBLISHED,
    )
    fields.update(overrides)
    return ToolPairing(**fields)


def _tutorial(slug="solo", **overrides):
    fields = dict(
        slug=slug,
        tool=Tool("solo", "Solo tool"),
        category="Other",
        steps=2,
        estimated_time="~5 min",
        status=PUBLISHED,
    )
    fields.update(overrides)
    return SingleToolEntry(**fields)


# ============================================================================
# Lookup
# ============================================================================


class TestGetEntry:
    def test_every_registered_slug_resolves_to_itself(self):
        for entry in TOOL_ENTRIES:
            found = get_entry(entry.slug)
            assert found is entry
            assert found.slug == entry.slug

    def test_jj_git(self):
        entry = get_entry("jj-git")
        assert entry is not None
        assert entry.category == "Version Control"
        assert entry.steps == 12
        assert entry.status == "published"
        assert entry.from_tool.name == "git"
        assert entry.to_tool.name == "jj"

    def test_unknown_slug_is_none(self):
        assert get_entry("does-not-exist") is None
        assert is_valid_entry_slug("does-not-exist") is False

    def test_lookup_is_exact(self):
        assert get_entry("JJ-GIT") is None
        assert get_entry("jj") is None
        assert get_entry("") is None

    def test_single_tool_entry_found(self):
        entry = get_entry("tmux")
        assert entry is not None
        assert is_tutorial(entry)
        assert entry.tool.name == "tmux"
        assert entry.tool_url == "https://github.com/tmux/tmux"

    @pytest.mark.parametrize("slug", ["zio-cats", "jj-git", "effect-zio", "tmux", "nope", "", "Tmux"])
    def test_is_valid_matches_lookup(self, slug):
        assert is_valid_entry_slug(slug) == (get_entry(slug) is not None)


# ============================================================================
# Filtering and grouping
# ============================================================================


class TestPublishedEntries:
    def test_is_ordered_subsequence_of_registry(self):
        published = get_published_entries()
        expected = [e for e in TOOL_ENTRIES if e.status == PUBLISHED]
        assert published == expected

    def test_registry_order_not_alphabetical(self):
        slugs = [e.slug for e in get_published_entries()]
        assert slugs == ["zio-cats", "jj-git", "effect-zio", "tmux"]

    def test_returns_fresh_list(self):
        first = get_published_entries()
        first.clear()
        assert len(get_published_entries()) == 4


class TestEntriesByCategory:
    def test_partitions_registry(self):
        grouped = get_entries_by_category()
        flattened = [e for members in grouped.values() for e in members]
        assert len(flattened) == len(TOOL_ENTRIES)
        assert set(e.slug for e in flattened) == set(e.slug for e in TOOL_ENTRIES)
        for cat, members in grouped.items():
            assert all(e.category == cat for e in members)

    def test_first_seen_group_order(self):
        grouped = get_entries_by_category()
        assert list(grouped) == ["Frameworks & Libraries", "Version Control", "Other"]

    def test_groups_keep_registry_order(self):
        grouped = get_entries_by_category()
        assert [e.slug for e in grouped["Frameworks & Libraries"]] == ["zio-cats", "effect-zio"]

    def test_all_categories_from_closed_set(self):
        for entry in TOOL_ENTRIES:
            assert entry.category in ENTRY_CATEGORIES


# ============================================================================
# Variant tag
# ============================================================================


class TestModeTag:
    def test_predicates_follow_mode(self):
        for entry in TOOL_ENTRIES:
            assert is_pairing(entry) != is_tutorial(entry)
            assert is_pairing(entry) == (entry.mode == "pairing")

    def test_mode_is_not_a_constructor_argument(self):
        with pytest.raises(TypeError):
            ToolPairing(
                slug="x",
                from_tool=Tool("a", "a"),
                to_tool=Tool("b", "b"),
                category="Other",
                steps=1,
                estimated_time="1 min",
                status=PUBLISHED,
                mode="tutorial",
            )

    def test_entries_are_frozen(self):
        entry = get_entry("jj-git")
        with pytest.raises(AttributeError):
            entry.slug = "other"

    def test_to_dict_uses_from_to_keys(self):
        data = get_entry("zio-cats").to_dict()
        assert data["from"]["name"] == "Cats Effect"
        assert data["to"]["name"] == "ZIO"
        assert data["mode"] == "pairing"
        assert data["tags"] == ["scala", "zio", "cats-effect", "functional"]

    def test_single_tool_to_dict(self):
        data = get_entry("tmux").to_dict()
        assert data["tool"] == {
            "name": "tmux",
            "description": "Terminal multiplexer",
            "color": "#1bbf4e",
            "icon": "terminal",
        }
        assert "from" not in data


# ============================================================================
# Registry construction checks
# ============================================================================


class TestBuildRegistry:
    def test_accepts_mixed_variants(self):
        entries = build_registry([_pairing(), _tutorial(status=COMING_SOON)])
        assert isinstance(entries, tuple)
        assert len(entries) == 2

    def test_duplicate_slug_across_variants(self):
        with pytest.raises(CatalogIntegrityError, match="duplicate slug 'same'"):
            build_registry([_pairing("same"), _tutorial("same")])

    def test_unknown_status(self):
        with pytest.raises(CatalogIntegrityError, match="unknown status"):
            build_registry([_pairing(status="draft")])

    def test_unknown_category(self):
        with pytest.raises(CatalogIntegrityError, match="unknown category"):
            build_registry([_tutorial(category="Editors")])

    def test_unknown_language(self):
        with pytest.raises(CatalogIntegrityError, match="unknown language"):
            build_registry([_pairing(language="cobol")])

    def test_non_positive_steps(self):
        with pytest.raises(CatalogIntegrityError, match="steps"):
            build_registry([_pairing(steps=0)])

    def test_error_lists_problems(self):
        with pytest.raises(CatalogIntegrityError) as info:
            build_registry([_pairing(status="draft", category="Nope")])
        assert len(info.value.problems) == 2


@pytest.mark.parametrize(
    "func",
    [get_entry, get_published_entries, get_entries_by_category, is_valid_entry_slug, is_pairing, is_tutorial],
    ids=lambda f: f.__name__,
)
def test_public_entry_functions_documented(func):
    assert func.__doc__ and func.__doc__.strip()
