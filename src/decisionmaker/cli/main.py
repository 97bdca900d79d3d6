# src/decisionmaker/cli/main.py
"""
This module is the main entry point for the decision maker CLI.

It aggregates the commands from the submodules (pods, intents) and adds
`serve` and `version`.
"""

import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.config import config
from . import intents, pods

# --- Setup Logger ---
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = typer.Typer(
    name="decisionmaker",
    help="Correlate node processes with pods and turn scheduling intents into per-process hints.",
    add_completion=False,
)


def version_callback(value: bool):
    if value:
        from .. import __version__

        typer.echo(f"decisionmaker version: {__version__}")
        raise typer.Exit()


@app.command()
def version():
    """
    Show the version of the decision maker.
    """
    from .. import __version__

    typer.echo(f"decisionmaker version: {__version__}")


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option("--host", help="Interface to bind.")] = None,
    port: Annotated[Optional[int], typer.Option("--port", help="Port to listen on.")] = None,
):
    """
    Run the HTTP API (intents, metrics, pod/PID queries and the Prometheus scrape endpoint).
    """
    import uvicorn

    from ..api.app import create_app

    uvicorn.run(create_app(use_lifespan=True), host=host or config.API_HOST, port=port or config.API_PORT)


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """
    Decision maker CLI main entry point.
    """
    pass


app.add_typer(pods.app, name="pods")
app.command(name="intents")(intents.resolve_intents)


if __name__ == "__main__":
    app()
