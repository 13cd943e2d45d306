"""Reference tables, one per pairing or single tool, keyed by entry slug."""

from __future__ import annotations

from types import MappingProxyType

from toolkata.catalog.entries import TOOL_ENTRIES
from toolkata.catalog.rows import RowTable
from toolkata.glossary import effect_zio, jj_git, tmux, zio_cats

TABLES = MappingProxyType({
    table.slug: table
    for table in (zio_cats.TABLE, jj_git.TABLE, effect_zio.TABLE, tmux.TABLE)
})


def get_table(slug: str) -> RowTable | None:
    """Return the reference table for an entry slug, or None."""
    return TABLES.get(slug)


def table_slugs() -> list[str]:
    """Slugs that have a table, registry entries first in registry order."""
    ordered = [entry.slug for entry in TOOL_ENTRIES if entry.slug in TABLES]
    return ordered + [slug for slug in TABLES if slug not in ordered]
