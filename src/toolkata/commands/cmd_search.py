"""Search a reference table (case-insensitive substring match)."""

from __future__ import annotations

import click

from toolkata.catalog.rows import CHEATSHEET, GLOSSARY, filter_by_category, search_entries
from toolkata.exit_codes import TableNotFoundError
from toolkata.glossary import get_table
from toolkata.output.formatter import format_table, json_envelope, to_json


def _row_cells(kind: str, row) -> list[str]:
    if kind == GLOSSARY:
        return [row.id, row.category, row.from_command, row.to_command, row.note]
    return [row.id, row.category, row.command, row.description, row.note or ""]


_HEADERS = {
    GLOSSARY: ["id", "category", "from", "to", "note"],
    CHEATSHEET: ["id", "category", "command", "description", "note"],
}


@click.command()
@click.argument("slug")
@click.argument("query", required=False, default="")
@click.option("--category", "-c", default=None, help="Restrict to one category (e.g. BASICS)")
@click.pass_context
def search(ctx, slug, query, category):
    """Search SLUG's reference table for QUERY.

    Every text field of a row is matched case-insensitively; an empty
    QUERY lists the whole table (or the whole --category).
    """
    json_mode = ctx.obj.get("json") if ctx.obj else False
    cfg = ctx.obj.get("config", {}) if ctx.obj else {}
    limit = cfg.get("search_limit", 0)

    table = get_table(slug)
    if table is None:
        raise TableNotFoundError(slug)

    rows = table.rows
    if category:
        rows = filter_by_category(rows, category.upper())
    matches = list(search_entries(rows, query))
    shown = matches[:limit] if limit else matches

    if json_mode:
        click.echo(
            to_json(
                json_envelope(
                    "search",
                    summary={
                        "slug": slug,
                        "query": query,
                        "category": category.upper() if category else None,
                        "matches": len(matches),
                        "truncated": len(shown) < len(matches),
                    },
                    rows=[row.to_dict() for row in shown],
                )
            )
        )
        return

    if not matches:
        click.echo(f"No rows matching {query!r} in {slug}")
        return
    click.echo(format_table(_HEADERS[table.kind], [_row_cells(table.kind, row) for row in matches], budget=limit))
    click.echo(f"{len(matches)} match{'es' if len(matches) != 1 else ''}")
