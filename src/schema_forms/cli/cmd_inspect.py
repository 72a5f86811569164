"""Inspect command: show the components a layout builds."""

from pathlib import Path
from typing import Optional

import typer

from schema_forms.cli._app import app
from schema_forms.cli._common import init, load_registry, preview_value
from schema_forms.cli._console import output_json, output_table, print_err, print_ok
from schema_forms.runtime.collector import ValueCollector


@app.command("inspect", help="List the components built from a layout.")
def inspect_cmd(
    ctx: typer.Context,
    layout: Optional[Path] = typer.Argument(None, help="Layout JSON file (default: bundled layout)"),
    url: Optional[str] = typer.Option(None, "--url", help="Remote layout URL"),
):
    """Build the registry for a layout and print one row per component."""
    settings = init(ctx.obj)
    registry = load_registry(settings, layout, url)

    if not len(registry):
        print_err("Layout produced no components")
        raise SystemExit(1)

    collector = ValueCollector(collect_extended_types=settings.collect_extended_types)
    rows = [
        {
            "id": component.unique_id,
            "type": component.field_type.value,
            "collected": "yes" if collector.extract(component) is not None else "no",
            "value": preview_value(component),
        }
        for component in registry
    ]

    if output_json(rows, ctx=ctx):
        return
    output_table(rows, title="Components", columns=["id", "type", "collected", "value"])
    if not ctx.obj["quiet"]:
        print_ok(f"{len(rows)} components")
