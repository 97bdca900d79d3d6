# src/decisionmaker/collectors/process_reader.py
"""
Reads the name and parent PID of a single process from the process table.
"""

import logging
import os

from ..models.pods import PodProcess

logger = logging.getLogger(__name__)

# Index of the parent PID in the whitespace-split stat record.
STAT_PPID_FIELD = 3


class ProcessInfoReader:
    """
    Best-effort reader for `<root>/<pid>/comm` and `<root>/<pid>/stat`.

    The process may exit between enumeration and read, so every failure
    leaves the corresponding field at its default instead of raising.
    """

    def __init__(self, proc_root: str):
        self.proc_root = proc_root

    def read(self, pid: int) -> PodProcess:
        process = PodProcess(pid=pid)

        command = self._read_text(os.path.join(self.proc_root, str(pid), "comm"))
        if command is not None:
            process.command = command.strip()

        stat = self._read_text(os.path.join(self.proc_root, str(pid), "stat"))
        if stat is not None:
            process.ppid = self._parse_ppid(stat)

        return process

    @staticmethod
    def _read_text(path: str):
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as fh:
                return fh.read()
        except OSError as e:
            logger.debug(f"Could not read {path}: {e}")
            return None

    @staticmethod
    def _parse_ppid(stat: str) -> int:
        fields = stat.split()
        if len(fields) <= STAT_PPID_FIELD:
            return 0
        try:
            return int(fields[STAT_PPID_FIELD])
        except ValueError:
            return 0
