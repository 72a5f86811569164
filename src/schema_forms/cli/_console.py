"""Rich console singleton and output helpers."""

import typer
from rich.console import Console
from rich.table import Table

# Status to stderr so it doesn't pollute piped JSON output
console = Console(stderr=True)

# Data output to stdout (pipeable to jq); resolves sys.stdout on each write
stdout_console = Console()


def print_ok(msg: str) -> None:
    """Print a success message to stderr."""
    console.print(f"[green]✓[/green] {msg}")


def print_err(msg: str) -> None:
    """Print an error message to stderr."""
    console.print(f"[red]✗[/red] {msg}")


def print_warn(msg: str) -> None:
    """Print a warning message to stderr."""
    console.print(f"[yellow]![/yellow] {msg}")


def output_json(data, *, ctx: typer.Context) -> bool:
    """Print data as JSON to stdout when --json is active.

    Returns:
        True if the data was printed.
    """
    if ctx.obj.get("json"):
        stdout_console.print_json(data=data)
        return True
    return False


def output_table(rows: list[dict], *, title: str = "", columns: list[str] | None = None) -> None:
    """Print rows as a Rich table on stdout."""
    if not rows:
        console.print("[dim]No rows[/dim]")
        return

    cols = columns or list(rows[0].keys())
    table = Table(title=title, show_lines=False)
    for col in cols:
        table.add_column(col)
    for row in rows:
        table.add_row(*[str(row.get(c, "")) for c in cols])
    stdout_console.print(table)
