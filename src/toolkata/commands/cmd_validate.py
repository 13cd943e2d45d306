"""Run the catalog integrity checks."""

from __future__ import annotations

import click

from toolkata.catalog.validation import CatalogIntegrityError
from toolkata.exit_codes import InvalidCatalogError
from toolkata.output.formatter import json_envelope, section, to_json


@click.command()
@click.pass_context
def validate(ctx):
    """Check every literal table and the registry for integrity defects.

    Schema defects (unknown category, duplicate id or slug, incomplete
    category order) fail with exit code 4.  Registry/table mismatches
    are reported as warnings.
    """
    json_mode = ctx.obj.get("json") if ctx.obj else False
    try:
        from toolkata.catalog.validation import validate_catalog

        report = validate_catalog()
    except CatalogIntegrityError as exc:
        raise InvalidCatalogError(str(exc)) from exc

    verdict = "ok" if not report["warnings"] else "ok with warnings"

    if json_mode:
        click.echo(
            to_json(
                json_envelope(
                    "validate",
                    summary={
                        "verdict": verdict,
                        "entries": report["entries"],
                        "rows": report["rows"],
                        "warnings": len(report["warnings"]),
                    },
                    tables=report["tables"],
                    warnings=report["warnings"],
                )
            )
        )
        return

    lines = [f"  {slug:12s} {n} rows" for slug, n in report["tables"].items()]
    click.echo(section(f"VERDICT: {verdict} ({report['entries']} entries, {report['rows']} rows)", lines))
    for w in report["warnings"]:
        click.echo(f"  WARNING: {w}")
