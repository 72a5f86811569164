"""CLI package: Typer-based command-line interface.

Usage:
    python -m schema_forms.cli --help
    schema-forms inspect path/to/layout.json
"""

from schema_forms.cli._app import app

# Register command modules (side-effect imports)
import schema_forms.cli.cmd_inspect  # noqa: F401
import schema_forms.cli.cmd_collect  # noqa: F401
import schema_forms.cli.cmd_run  # noqa: F401

__all__ = ["app"]
