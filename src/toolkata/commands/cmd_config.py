"""Show the effective toolkata configuration."""

from __future__ import annotations

import click

from toolkata.config import config_path, find_project_root
from toolkata.output.formatter import json_envelope, to_json


@click.command("config")
@click.pass_context
def config(ctx):
    """Print the effective configuration and where it was read from.

    Settings live in ``.toolkata/config.json``; ``TOOLKATA_LOG_LEVEL`` and
    ``TOOLKATA_SEARCH_LIMIT`` override the file.
    """
    json_mode = ctx.obj.get("json") if ctx.obj else False
    cfg = ctx.obj.get("config", {}) if ctx.obj else {}
    path = config_path(find_project_root())
    source = str(path) if path.exists() else None

    if json_mode:
        click.echo(to_json(json_envelope("config", summary={"source": source}, config=cfg)))
        return

    click.echo(f"source: {source or '(defaults)'}")
    for key in sorted(cfg):
        click.echo(f"  {key} = {cfg[key]!r}")
