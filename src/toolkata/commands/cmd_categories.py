"""List the categories of a reference table in display order."""

from __future__ import annotations

import click

from toolkata.exit_codes import TableNotFoundError
from toolkata.glossary import get_table
from toolkata.output.formatter import format_table, json_envelope, to_json


@click.command()
@click.argument("slug")
@click.pass_context
def categories(ctx, slug):
    """Show categories and row counts for SLUG's reference table."""
    json_mode = ctx.obj.get("json") if ctx.obj else False

    table = get_table(slug)
    if table is None:
        raise TableNotFoundError(slug)
    counts = [(cat, len(table.filter_by_category(cat))) for cat in table.get_categories()]

    if json_mode:
        click.echo(
            to_json(
                json_envelope(
                    "categories",
                    summary={"slug": slug, "kind": table.kind, "categories": len(counts), "rows": len(table)},
                    categories=[{"name": cat, "rows": n} for cat, n in counts],
                )
            )
        )
        return

    click.echo(format_table(["category", "rows"], [[cat, str(n)] for cat, n in counts]))
