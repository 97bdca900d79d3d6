# src/decisionmaker/cli/__init__.py
"""
Decision maker CLI package.

Exposes the top-level Typer `app` for the console entrypoint and tests.
"""

from ..reporters.console_reporter import ConsoleReporter
from .main import app

__all__ = ["app", "ConsoleReporter"]
