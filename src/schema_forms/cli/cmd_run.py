"""Run command: launch the Streamlit form page."""

import os
import subprocess
import sys
from pathlib import Path
from typing import Optional

import typer

from schema_forms.cli._app import app
from schema_forms.cli._common import init
from schema_forms.cli._console import print_err

APP_PATH = Path(__file__).resolve().parent.parent / "runtime" / "streamlit_app.py"


@app.command("run", help="Launch the Streamlit form page.")
def run_cmd(
    ctx: typer.Context,
    port: Optional[int] = typer.Option(None, "--port", help="Server port"),
):
    """Start ``streamlit run`` on the form page."""
    init(ctx.obj)

    env = dict(os.environ)
    if ctx.obj.get("config") is not None:
        env["SCHEMA_FORMS_CONFIG"] = str(Path(ctx.obj["config"]).resolve())

    cmd = [sys.executable, "-m", "streamlit", "run", str(APP_PATH)]
    if port is not None:
        cmd += ["--server.port", str(port)]

    try:
        result = subprocess.run(cmd, env=env, check=False)
    except OSError as e:
        print_err(f"Could not start Streamlit: {e}")
        raise SystemExit(1)
    raise SystemExit(result.returncode)
