"""Reference-table rows and the query layer shared by every table.

Two row shapes exist: glossary rows map a source command/API to a target
one, cheat-sheet rows document a single tool's command.  Both carry an
``id`` and a ``category`` and expose their searchable text through
``search_fields()``, so the query functions below never branch on shape.

All functions are pure: they return new lists and never reorder or
mutate their input.  ``search_entries`` with an empty query hands back
the input object itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Sequence, Union

from toolkata.catalog.validation import ensure_valid, find_order_problems, find_row_problems

log = logging.getLogger(__name__)

GLOSSARY = "glossary"
CHEATSHEET = "cheatsheet"


@dataclass(frozen=True)
class GlossaryRow:
    """One command/API mapping in a two-tool glossary."""

    id: str
    category: str
    from_command: str
    to_command: str
    note: str = ""

    def search_fields(self) -> tuple[str, ...]:
        return (self.from_command, self.to_command, self.note)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "category": self.category,
            "from": self.from_command,
            "to": self.to_command,
            "note": self.note,
        }


@dataclass(frozen=True)
class CheatSheetRow:
    """One command in a single-tool cheat sheet."""

    id: str
    category: str
    command: str
    description: str
    note: str | None = None

    def search_fields(self) -> tuple[str, ...]:
        if self.note:
            return (self.command, self.description, self.note)
        return (self.command, self.description)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "category": self.category,
            "command": self.command,
            "description": self.description,
            "note": self.note,
        }


Row = Union[GlossaryRow, CheatSheetRow]

_ROW_TYPES = {
    GLOSSARY: GlossaryRow,
    CHEATSHEET: CheatSheetRow,
}


# ---------------------------------------------------------------------------
# Query functions
# ---------------------------------------------------------------------------


def categories_present(rows: Iterable[Row], category_order: Sequence[str]) -> list[str]:
    """Return the categories used by *rows*, in *category_order*."""
    used = {row.category for row in rows}
    return [cat for cat in category_order if cat in used]


def filter_by_category(rows: Sequence[Row], category: str) -> list[Row]:
    """Return rows in *category*, preserving table order."""
    return [row for row in rows if row.category == category]


def search_entries(rows: Sequence[Row], query: str) -> Sequence[Row]:
    """Case-insensitive substring search across every text field of a row.

    A row matches when any one of its fields contains *query*.  An empty
    query returns *rows* unchanged.
    """
    if not query:
        return rows
    needle = query.casefold()
    return [row for row in rows if any(needle in field.casefold() for field in row.search_fields())]


def group_by_category(rows: Iterable[Row]) -> dict[str, list[Row]]:
    """Group rows by category, groups in first-seen order."""
    grouped: dict[str, list[Row]] = {}
    for row in rows:
        grouped.setdefault(row.category, []).append(row)
    return grouped


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------


class RowTable:
    """An immutable, validated reference table for one pairing or tool.

    *categories* is the table's closed category enumeration and
    *category_order* its display order; the order must be a permutation
    of the enumeration.  Construction raises ``CatalogIntegrityError``
    on any schema defect.
    """

    __slots__ = ("slug", "kind", "_rows", "_categories", "_category_order", "_by_id")

    def __init__(
        self,
        slug: str,
        kind: str,
        rows: Iterable[Row],
        *,
        categories: Iterable[str],
        category_order: Sequence[str],
    ):
        if kind not in _ROW_TYPES:
            raise ValueError(f"Unknown table kind {kind!r}, expected one of {sorted(_ROW_TYPES)}")
        rows = tuple(rows)
        categories = frozenset(categories)
        category_order = tuple(category_order)

        what = f"{kind} table {slug!r}"
        ensure_valid(find_order_problems(categories, category_order), what)
        ensure_valid(find_row_problems(rows, categories, _ROW_TYPES[kind]), what)

        self.slug = slug
        self.kind = kind
        self._rows = rows
        self._categories = categories
        self._category_order = category_order
        self._by_id = MappingProxyType({row.id: row for row in rows})
        log.debug("Loaded %s %s with %d rows", kind, slug, len(rows))

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self):
        return iter(self._rows)

    def __repr__(self) -> str:
        return f"RowTable({self.slug!r}, {self.kind!r}, rows={len(self._rows)})"

    @property
    def rows(self) -> tuple[Row, ...]:
        return self._rows

    @property
    def categories(self) -> frozenset[str]:
        return self._categories

    @property
    def category_order(self) -> tuple[str, ...]:
        return self._category_order

    def get_row(self, row_id: str) -> Row | None:
        return self._by_id.get(row_id)

    def get_categories(self) -> list[str]:
        return categories_present(self._rows, self._category_order)

    def filter_by_category(self, category: str) -> list[Row]:
        return filter_by_category(self._rows, category)

    def search(self, query: str) -> Sequence[Row]:
        return search_entries(self._rows, query)

    def group_by_category(self) -> dict[str, list[Row]]:
        return group_by_category(self._rows)
