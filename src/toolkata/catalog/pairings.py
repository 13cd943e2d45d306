"""Pairing-only views of the entry registry, kept for older callers.

Deprecated: new code should use :mod:`toolkata.catalog.entries` and
narrow with ``is_pairing``.  Everything here is the registry-wide result
filtered to pairings, so the two can never disagree.
"""

from __future__ import annotations

from toolkata.catalog.entries import (
    TOOL_ENTRIES,
    ToolPairing,
    get_entries_by_category,
    get_entry,
    get_published_entries,
    is_pairing,
)

TOOL_PAIRINGS: tuple[ToolPairing, ...] = tuple(entry for entry in TOOL_ENTRIES if is_pairing(entry))


def get_pairing(slug: str) -> ToolPairing | None:
    """Return the pairing for *slug*; None for unknown or single-tool slugs."""
    entry = get_entry(slug)
    if entry is not None and is_pairing(entry):
        return entry
    return None


def get_published_pairings() -> list[ToolPairing]:
    """Return published pairings in registry order."""
    return [entry for entry in get_published_entries() if is_pairing(entry)]


def get_pairings_by_category() -> dict[str, list[ToolPairing]]:
    """Category groups restricted to pairings; groups left empty are dropped."""
    grouped = {}
    for category, entries in get_entries_by_category().items():
        pairings = [entry for entry in entries if is_pairing(entry)]
        if pairings:
            grouped[category] = pairings
    return grouped


def is_valid_pairing_slug(slug: str) -> bool:
    """True if *slug* names a pairing."""
    return get_pairing(slug) is not None
