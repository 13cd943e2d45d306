"""Tests for the reference-table query layer.

Covers: category listing in display order, category filtering,
case-insensitive multi-field search for both row shapes, grouping,
and RowTable construction checks.
"""

from __future__ import annotations

import pytest

from toolkata.catalog.rows import (
    CHEATSHEET,
    GLOSSARY,
    CheatSheetRow,
    GlossaryRow,
    RowTable,
    categories_present,
    filter_by_category,
    group_by_category,
    search_entries,
)
from toolkata.catalog.validation import CatalogIntegrityError

ORDER = ("FIRST", "SECOND", "THIRD")

GLOSSARY_ROWS = (
    GlossaryRow("b-1", "SECOND", "old push", "new push", "Pushes are Atomic"),
    GlossaryRow("a-1", "FIRST", "old init", "new init"),
    GlossaryRow("b-2", "SECOND", "old pull", "new fetch"),
    GlossaryRow("a-2", "FIRST", "old status", "new st", ""),
)

CHEAT_ROWS = (
    CheatSheetRow("x-1", "FIRST", "tool start", "Start the Server"),
    CheatSheetRow("x-2", "FIRST", "tool stop", "Stop it", "Graceful shutdown"),
    CheatSheetRow("x-3", "THIRD", "tool reload", "Reload config"),
)


def _table(rows=GLOSSARY_ROWS, kind=GLOSSARY, categories=ORDER, order=ORDER):
    return RowTable("demo", kind, rows, categories=categories, category_order=order)


# ============================================================================
# get_categories / categories_present
# ============================================================================


class TestCategories:
    def test_display_order_not_declaration_order(self):
        assert _table().get_categories() == ["FIRST", "SECOND"]

    def test_absent_categories_omitted(self):
        assert "THIRD" not in _table().get_categories()
        assert categories_present(CHEAT_ROWS, ORDER) == ["FIRST", "THIRD"]

    def test_empty_rows(self):
        assert categories_present((), ORDER) == []


# ============================================================================
# filter_by_category
# ============================================================================


class TestFilterByCategory:
    def test_keeps_table_order(self):
        assert [r.id for r in filter_by_category(GLOSSARY_ROWS, "SECOND")] == ["b-1", "b-2"]

    def test_only_matching_category(self):
        for row in filter_by_category(GLOSSARY_ROWS, "FIRST"):
            assert row.category == "FIRST"

    def test_unknown_category_is_empty(self):
        assert filter_by_category(GLOSSARY_ROWS, "NOPE") == []

    def test_declared_but_unused_category_is_empty(self):
        assert _table().filter_by_category("THIRD") == []

    def test_case_sensitive_category(self):
        assert filter_by_category(GLOSSARY_ROWS, "first") == []

    def test_shares_row_identity(self):
        rows = filter_by_category(GLOSSARY_ROWS, "FIRST")
        assert rows[0] is GLOSSARY_ROWS[1]


# ============================================================================
# search_entries
# ============================================================================


class TestSearchEntries:
    def test_empty_query_is_identity(self):
        assert search_entries(GLOSSARY_ROWS, "") is GLOSSARY_ROWS
        assert search_entries(CHEAT_ROWS, "") is CHEAT_ROWS

    def test_matches_source_field(self):
        assert [r.id for r in search_entries(GLOSSARY_ROWS, "old pull")] == ["b-2"]

    def test_matches_target_field(self):
        assert [r.id for r in search_entries(GLOSSARY_ROWS, "fetch")] == ["b-2"]

    def test_matches_note_field(self):
        assert [r.id for r in search_entries(GLOSSARY_ROWS, "atomic")] == ["b-1"]

    def test_fields_are_ored(self):
        # every row matches through its target field alone
        assert len(search_entries(GLOSSARY_ROWS, "new")) == 4

    def test_substring_not_token(self):
        assert [r.id for r in search_entries(GLOSSARY_ROWS, "tatu")] == ["a-2"]

    def test_category_label_not_searched(self):
        assert search_entries(GLOSSARY_ROWS, "SECOND") == []

    @pytest.mark.parametrize("query", ["push", "PUSH", "PuSh", "server", "Graceful", "reload"])
    def test_case_insensitive(self, query):
        for rows in (GLOSSARY_ROWS, CHEAT_ROWS):
            assert search_entries(rows, query) == search_entries(rows, query.upper())
            assert search_entries(rows, query) == search_entries(rows, query.lower())

    def test_cheatsheet_description(self):
        assert [r.id for r in search_entries(CHEAT_ROWS, "server")] == ["x-1"]

    def test_cheatsheet_optional_note(self):
        assert [r.id for r in search_entries(CHEAT_ROWS, "graceful")] == ["x-2"]

    def test_cheatsheet_missing_note_does_not_match(self):
        assert CheatSheetRow("n", "FIRST", "a", "b").search_fields() == ("a", "b")

    def test_no_match_is_empty(self):
        assert search_entries(GLOSSARY_ROWS, "zzzzzzz") == []

    def test_preserves_order(self):
        ids = [r.id for r in search_entries(GLOSSARY_ROWS, "old")]
        assert ids == ["b-1", "a-1", "b-2", "a-2"]

    def test_unicode_casefold(self):
        rows = (GlossaryRow("u-1", "FIRST", "STRASSE", "straße"),)
        assert search_entries(rows, "strasse") == list(rows)
        assert search_entries(rows, "STRASSE") == search_entries(rows, "strasse")


# ============================================================================
# group_by_category
# ============================================================================


def test_group_by_category_first_seen_order():
    grouped = group_by_category(GLOSSARY_ROWS)
    assert list(grouped) == ["SECOND", "FIRST"]
    assert [r.id for r in grouped["FIRST"]] == ["a-1", "a-2"]


# ============================================================================
# RowTable construction
# ============================================================================


class TestRowTable:
    def test_basic_accessors(self):
        table = _table()
        assert len(table) == 4
        assert list(table) == list(GLOSSARY_ROWS)
        assert table.rows == GLOSSARY_ROWS
        assert table.get_row("a-2").to_command == "new st"
        assert table.get_row("missing") is None
        assert table.search("") is table.rows

    def test_accepts_list_and_freezes(self):
        rows = list(CHEAT_ROWS)
        table = _table(rows=rows, kind=CHEATSHEET)
        rows.clear()
        assert len(table) == 3
        assert isinstance(table.rows, tuple)

    def test_unknown_row_category(self):
        rows = GLOSSARY_ROWS + (GlossaryRow("c-1", "FOURTH", "x", "y"),)
        with pytest.raises(CatalogIntegrityError, match="unknown category 'FOURTH'"):
            _table(rows=rows)

    def test_duplicate_id(self):
        rows = GLOSSARY_ROWS + (GlossaryRow("a-1", "FIRST", "x", "y"),)
        with pytest.raises(CatalogIntegrityError, match="duplicate row id 'a-1'"):
            _table(rows=rows)

    def test_order_missing_category(self):
        with pytest.raises(CatalogIntegrityError, match="'THIRD' has no display position"):
            _table(order=("FIRST", "SECOND"))

    def test_order_unknown_category(self):
        with pytest.raises(CatalogIntegrityError, match="unknown category 'EXTRA'"):
            _table(order=ORDER + ("EXTRA",))

    def test_order_duplicate(self):
        with pytest.raises(CatalogIntegrityError, match="listed twice"):
            _table(order=("FIRST", "SECOND", "THIRD", "FIRST"))

    def test_wrong_row_shape(self):
        with pytest.raises(CatalogIntegrityError, match="expected GlossaryRow"):
            _table(rows=CHEAT_ROWS, kind=GLOSSARY)

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown table kind"):
            _table(kind="manual")

    def test_integrity_error_is_value_error(self):
        assert issubclass(CatalogIntegrityError, ValueError)
