# src/decisionmaker/cli/pods.py
"""
Implements the `pods` command: one discovery scan of the local process table.
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..collectors.process_tree import ProcessTreeScanner
from ..core.config import config
from ..core.exceptions import DiscoveryError
from ..exporters.json_exporter import JSONExporter
from ..reporters.console_reporter import ConsoleReporter

logger = logging.getLogger(__name__)

app = typer.Typer(help="Show which processes belong to which pod on this node.", add_completion=False)


@app.callback(invoke_without_command=True)
def pods(
    ctx: typer.Context,
    proc_root: Annotated[
        Optional[str], typer.Option("--proc-root", help="Process table to scan (defaults to PROC_ROOT).")
    ] = None,
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Write the pod map as JSON to this file.")
    ] = None,
):
    """
    Scan the process table and print (or export) the pod UID to process mapping.
    """
    if ctx.invoked_subcommand is not None:
        return

    root = proc_root or config.PROC_ROOT
    try:
        pod_infos = ProcessTreeScanner(root).collect()
    except DiscoveryError as e:
        logger.error(f"Discovery failed: {e}")
        raise typer.Exit(code=1)

    if output is None:
        ConsoleReporter().report_pods(pod_infos)
        return

    try:
        written_path = asyncio.run(JSONExporter().export(pod_infos, str(output)))
    except OSError as e:
        logger.error(f"Failed to export pod map to {output}: {e}")
        raise typer.Exit(code=1)
    print(f"Pod map exported to: {written_path}", file=sys.stderr)
