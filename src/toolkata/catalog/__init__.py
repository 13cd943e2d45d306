"""Tutorial registry and the reference-table query layer."""

from toolkata.catalog.entries import (
    ENTRY_CATEGORIES,
    TOOL_ENTRIES,
    SingleToolEntry,
    Tool,
    ToolPairing,
    get_entries_by_category,
    get_entry,
    get_published_entries,
    is_pairing,
    is_tutorial,
    is_valid_entry_slug,
)
from toolkata.catalog.rows import (
    CheatSheetRow,
    GlossaryRow,
    RowTable,
    filter_by_category,
    group_by_category,
    search_entries,
)
from toolkata.catalog.validation import CatalogIntegrityError

__all__ = [
    "ENTRY_CATEGORIES",
    "TOOL_ENTRIES",
    "CatalogIntegrityError",
    "CheatSheetRow",
    "GlossaryRow",
    "RowTable",
    "SingleToolEntry",
    "Tool",
    "ToolPairing",
    "filter_by_category",
    "get_entries_by_category",
    "get_entry",
    "get_published_entries",
    "group_by_category",
    "is_pairing",
    "is_tutorial",
    "is_valid_entry_slug",
    "search_entries",
]
