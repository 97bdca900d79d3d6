# src/decisionmaker/reporters/console_reporter.py
"""
Renders discovery and resolution results as tables in the console.
"""

import logging
from typing import Dict, List

from rich.console import Console
from rich.table import Table

from ..models.intents import SchedulingIntent
from ..models.pods import PodInfo

logger = logging.getLogger(__name__)


class ConsoleReporter:
    """
    Renders decision maker data to the console using the 'rich' library.
    """

    def __init__(self):
        self.console = Console()

    def report_pods(self, pods: Dict[str, PodInfo]):
        """One row per process, grouped by pod UID."""
        if not pods:
            self.console.print("No pod processes found.", style="yellow")
            return

        table = Table(title="Pod Processes", header_style="bold magenta", show_lines=True)
        table.add_column("Pod UID", style="cyan")
        table.add_column("PID", style="green", justify="right")
        table.add_column("PPID", style="dim", justify="right")
        table.add_column("Command", style="yellow")
        table.add_column("Container ID", style="blue")

        for pod_uid in sorted(pods):
            for process in sorted(pods[pod_uid].processes, key=lambda p: p.pid):
                table.add_row(
                    pod_uid,
                    str(process.pid),
                    str(process.ppid),
                    process.command,
                    process.container_id[:12],
                )

        self.console.print(table)

    def report_intents(self, intents: List[SchedulingIntent]):
        if not intents:
            self.console.print("No scheduling intents resolved.", style="yellow")
            return

        table = Table(title="Scheduling Intents", header_style="bold magenta", show_lines=True)
        table.add_column("PID", style="green", justify="right")
        table.add_column("Priority", style="red")
        table.add_column("Execution Time (ns)", style="yellow", justify="right")
        table.add_column("Command Regex", style="cyan")
        table.add_column("Selectors", style="blue")

        for intent in sorted(intents, key=lambda i: i.pid):
            selectors = ", ".join(f"{s.key}={s.value}" for s in intent.selectors)
            table.add_row(
                str(intent.pid),
                "yes" if intent.priority else "no",
                str(intent.execution_time),
                intent.command_regex,
                selectors,
            )

        self.console.print(table)
