"""Show one tutorial entry and a summary of its reference table."""

from __future__ import annotations

import click

from toolkata.catalog.entries import get_entry, is_pairing
from toolkata.exit_codes import EntryNotFoundError
from toolkata.glossary import get_table
from toolkata.output.formatter import json_envelope, section, to_json


def _tool_line(label: str, tool) -> str:
    return f"  {label:6s} {tool.name} ({tool.description})"


@click.command()
@click.argument("slug")
@click.pass_context
def show(ctx, slug):
    """Show entry details for SLUG."""
    json_mode = ctx.obj.get("json") if ctx.obj else False

    entry = get_entry(slug)
    if entry is None:
        raise EntryNotFoundError(slug)
    table = get_table(slug)

    table_info = None
    if table is not None:
        table_info = {
            "kind": table.kind,
            "rows": len(table),
            "categories": table.get_categories(),
        }

    if json_mode:
        click.echo(
            to_json(
                json_envelope(
                    "show",
                    summary={"slug": entry.slug, "mode": entry.mode, "status": entry.status},
                    entry=entry.to_dict(),
                    table=table_info,
                )
            )
        )
        return

    lines = []
    if is_pairing(entry):
        lines.append(_tool_line("from", entry.from_tool))
        lines.append(_tool_line("to", entry.to_tool))
        url = entry.to_url
    else:
        lines.append(_tool_line("tool", entry.tool))
        url = entry.tool_url
    lines.append(f"  category {entry.category}")
    lines.append(f"  steps    {entry.steps} ({entry.estimated_time})")
    lines.append(f"  status   {entry.status}")
    if entry.language:
        lines.append(f"  language {entry.language}")
    if entry.tags:
        lines.append(f"  tags     {', '.join(entry.tags)}")
    if url:
        lines.append(f"  url      {url}")
    click.echo(section(f"{entry.slug}: {entry.title}", lines))

    if table_info is None:
        click.echo("\nNo reference table.")
    else:
        click.echo(f"\n{table_info['kind']}: {table_info['rows']} rows in {', '.join(table_info['categories'])}")
