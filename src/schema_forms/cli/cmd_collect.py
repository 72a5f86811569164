"""Collect command: fill a layout from the command line and submit it."""

from pathlib import Path
from typing import List, Optional

import typer

from schema_forms.cli._app import app
from schema_forms.cli._common import apply_value, init, load_registry
from schema_forms.cli._console import output_json, print_err, stdout_console
from schema_forms.runtime.collector import ValueCollector
from schema_forms.runtime.submission import SubmitAction


@app.command("collect", help="Set field values and print the submitted result list.")
def collect_cmd(
    ctx: typer.Context,
    layout: Optional[Path] = typer.Argument(None, help="Layout JSON file (default: bundled layout)"),
    url: Optional[str] = typer.Option(None, "--url", help="Remote layout URL"),
    values: List[str] = typer.Option([], "--set", "-s", help="Field value as ID=VALUE (repeatable)"),
):
    """Apply ``--set`` values to the widget models, then submit once."""
    settings = init(ctx.obj)
    registry = load_registry(settings, layout, url)

    for assignment in values:
        field_id, sep, raw = assignment.partition("=")
        if not sep:
            print_err(f"Expected ID=VALUE, got '{assignment}'")
            raise SystemExit(2)

        component = registry.get(field_id)
        if component is None:
            print_err(f"Unknown field id '{field_id}'")
            raise SystemExit(2)

        try:
            apply_value(component, raw)
        except ValueError as e:
            print_err(f"Invalid value for '{field_id}': {e}")
            raise SystemExit(2)

    collector = ValueCollector(collect_extended_types=settings.collect_extended_types)
    results = SubmitAction(registry, collector).submit()

    if output_json(results, ctx=ctx):
        return
    for value in results:
        stdout_console.print(value, markup=False, highlight=False, soft_wrap=True)
