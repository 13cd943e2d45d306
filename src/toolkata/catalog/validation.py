"""Integrity checks for the literal catalog tables.

Every check comes in two flavours: a ``find_*_problems`` function that
returns a list of human-readable problem strings, and the construction
path (``RowTable``, the entry registry) which feeds those problems to
:func:`ensure_valid` and fails fast.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable

log = logging.getLogger(__name__)


class CatalogIntegrityError(ValueError):
    """Raised when a literal table violates its declared schema."""

    def __init__(self, what: str, problems: list[str]):
        self.what = what
        self.problems = list(problems)
        detail = "; ".join(self.problems[:5])
        if len(self.problems) > 5:
            detail += f" (+{len(self.problems) - 5} more)"
        super().__init__(f"{what}: {detail}")


def ensure_valid(problems: list[str], what: str) -> None:
    """Raise :class:`CatalogIntegrityError` if *problems* is non-empty."""
    if problems:
        raise CatalogIntegrityError(what, problems)


def find_duplicates(values: Iterable[str]) -> list[str]:
    """Return values that occur more than once, in first-seen order."""
    counts = Counter(values)
    return [v for v, n in counts.items() if n > 1]


def find_order_problems(categories: Iterable[str], order: Iterable[str]) -> list[str]:
    """Check that *order* is a permutation of the *categories* enum."""
    enum = set(categories)
    order = list(order)
    problems = []
    for dup in find_duplicates(order):
        problems.append(f"category {dup!r} listed twice in display order")
    for missing in sorted(enum - set(order)):
        problems.append(f"category {missing!r} has no display position")
    for extra in [c for c in order if c not in enum]:
        problems.append(f"display order names unknown category {extra!r}")
    return problems


def find_row_problems(rows, categories: Iterable[str], row_type: type) -> list[str]:
    """Check row shape, category membership and id uniqueness."""
    enum = set(categories)
    problems = []
    for i, row in enumerate(rows):
        if not isinstance(row, row_type):
            problems.append(f"row {i} is {type(row).__name__}, expected {row_type.__name__}")
            continue
        if not row.id:
            problems.append(f"row {i} has an empty id")
        if row.category not in enum:
            problems.append(f"row {row.id!r} has unknown category {row.category!r}")
    ids = [getattr(row, "id", None) for row in rows]
    for dup in find_duplicates(row_id for row_id in ids if row_id):
        problems.append(f"duplicate row id {dup!r}")
    return problems


def find_entry_problems(
    entries,
    *,
    modes: Iterable[str],
    categories: Iterable[str],
    statuses: Iterable[str],
    languages: Iterable[str],
) -> list[str]:
    """Check registry entries against the closed value sets."""
    modes, categories = set(modes), set(categories)
    statuses, languages = set(statuses), set(languages)
    problems = []
    for i, entry in enumerate(entries):
        label = getattr(entry, "slug", None) or f"entry {i}"
        if getattr(entry, "mode", None) not in modes:
            problems.append(f"{label}: unknown mode {getattr(entry, 'mode', None)!r}")
            continue
        if not entry.slug:
            problems.append(f"{label}: empty slug")
        if entry.category not in categories:
            problems.append(f"{label}: unknown category {entry.category!r}")
        if entry.status not in statuses:
            problems.append(f"{label}: unknown status {entry.status!r}")
        if entry.language is not None and entry.language not in languages:
            problems.append(f"{label}: unknown language {entry.language!r}")
        if not isinstance(entry.steps, int) or isinstance(entry.steps, bool) or entry.steps < 1:
            problems.append(f"{label}: steps must be a positive integer, got {entry.steps!r}")
    for dup in find_duplicates(getattr(e, "slug", "") for e in entries):
        problems.append(f"duplicate slug {dup!r}")
    return problems


def validate_catalog() -> dict:
    """Build a validation report over the whole catalog.

    Importing the registry and the tables already runs the fail-fast
    checks, so any :class:`CatalogIntegrityError` propagates from here.
    Consistency between registry and tables is reported as warnings.
    """
    from toolkata.catalog.entries import PUBLISHED, TOOL_ENTRIES, get_entry, is_pairing
    from toolkata.catalog.rows import CHEATSHEET, GLOSSARY
    from toolkata.glossary import TABLES

    warnings = []
    for slug, table in TABLES.items():
        entry = get_entry(slug)
        if entry is None:
            warnings.append(f"table {slug!r} has no registry entry")
            continue
        expected = GLOSSARY if is_pairing(entry) else CHEATSHEET
        if table.kind != expected:
            warnings.append(f"table {slug!r} is a {table.kind} but the entry is a {entry.mode}")
    for entry in TOOL_ENTRIES:
        if entry.status == PUBLISHED and entry.slug not in TABLES:
            warnings.append(f"published entry {entry.slug!r} has no reference table")

    for w in warnings:
        log.warning("%s", w)

    return {
        "entries": len(TOOL_ENTRIES),
        "tables": {slug: len(table) for slug, table in TABLES.items()},
        "rows": sum(len(table) for table in TABLES.values()),
        "warnings": warnings,
    }
