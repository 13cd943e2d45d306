"""List tutorial entries in the registry."""

from __future__ import annotations

import click

from toolkata.catalog.entries import (
    COMING_SOON,
    TOOL_ENTRIES,
    get_entries_by_category,
    get_published_entries,
    is_pairing,
)
from toolkata.catalog.pairings import TOOL_PAIRINGS, get_pairings_by_category, get_published_pairings
from toolkata.output.formatter import format_table, json_envelope, to_json

_HEADERS = ["slug", "kind", "title", "steps", "time", "status"]


def _entry_row(entry) -> list[str]:
    kind = "pairing" if is_pairing(entry) else "tutorial"
    return [entry.slug, kind, entry.title, str(entry.steps), entry.estimated_time, entry.status]


def select_entries(published: bool, pairings: bool, include_coming_soon: bool = True) -> list:
    """Registry entries matching the list filters, in registry order."""
    if pairings:
        entries = get_published_pairings() if published else list(TOOL_PAIRINGS)
    else:
        entries = get_published_entries() if published else list(TOOL_ENTRIES)
    if not include_coming_soon:
        entries = [e for e in entries if e.status != COMING_SOON]
    return entries


@click.command("list")
@click.option("--published", is_flag=True, help="Only published entries")
@click.option("--pairings", is_flag=True, help="Only two-tool comparisons")
@click.option("--by-category", is_flag=True, help="Group entries by category")
@click.pass_context
def list_cmd(ctx, published, pairings, by_category):
    """List tutorial entries (pairings and single-tool guides)."""
    json_mode = ctx.obj.get("json") if ctx.obj else False
    cfg = ctx.obj.get("config", {}) if ctx.obj else {}

    entries = select_entries(published, pairings, cfg.get("include_coming_soon", True))

    groups = None
    if by_category:
        wanted = {e.slug for e in entries}
        grouped = get_pairings_by_category() if pairings else get_entries_by_category()
        groups = {}
        for cat, members in grouped.items():
            kept = [e for e in members if e.slug in wanted]
            if kept:
                groups[cat] = kept

    if json_mode:
        if groups is not None:
            payload = {
                "categories": [
                    {"name": cat, "entries": [e.to_dict() for e in members]} for cat, members in groups.items()
                ]
            }
        else:
            payload = {"entries": [e.to_dict() for e in entries]}
        click.echo(to_json(json_envelope("list", summary={"entries": len(entries)}, **payload)))
        return

    if groups is None:
        click.echo(format_table(_HEADERS, [_entry_row(e) for e in entries]))
    else:
        for cat, members in groups.items():
            click.echo(f"{cat}:")
            click.echo(format_table(_HEADERS, [_entry_row(e) for e in members]))
            click.echo("")
    click.echo(f"{len(entries)} entries")
