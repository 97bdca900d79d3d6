# src/decisionmaker/cli/intents.py
"""
Implements the `intents` command: resolve a JSON file of intents once against
the local process table and print the resulting scheduling intents.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import TypeAdapter, ValidationError
from typing_extensions import Annotated

from ..core.config import config
from ..core.exceptions import DiscoveryError
from ..core.resolver import IntentResolver
from ..models.intents import Intent
from ..reporters.console_reporter import ConsoleReporter
from ..storage.intent_store import IntentStore

logger = logging.getLogger(__name__)

_intent_list = TypeAdapter(List[Intent])


def load_intents(path: Path) -> List[Intent]:
    """Accepts either a bare JSON list of intents or {"intents": [...]}."""
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = payload.get("intents", [])
    return _intent_list.validate_python(payload)


def resolve_intents(
    file: Annotated[Path, typer.Argument(help="JSON file with the intents to resolve.")],
    proc_root: Annotated[
        Optional[str], typer.Option("--proc-root", help="Process table to scan (defaults to PROC_ROOT).")
    ] = None,
):
    """
    Resolve intents and print one row per scheduling intent.
    """
    try:
        batch = load_intents(file)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Could not load intents from {file}: {e}")
        raise typer.Exit(code=1)

    store = IntentStore()
    resolver = IntentResolver(store, proc_root or config.PROC_ROOT)
    try:
        stored = resolver.resolve(batch)
    except DiscoveryError as e:
        logger.error(f"Discovery failed: {e}")
        raise typer.Exit(code=1)

    logger.info(f"{stored} scheduling intents resolved from {len(batch)} intents.")
    ConsoleReporter().report_intents(store.list_all())
