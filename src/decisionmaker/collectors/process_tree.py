# src/decisionmaker/collectors/process_tree.py
"""
Discovers which host processes belong to which Kubernetes pod by walking the
process table and reading each process's cgroup descriptor.
"""

import logging
import os
from typing import Callable, Dict, Iterator, Optional

from ..core.exceptions import DiscoveryRootError
from ..core.telemetry import tracer
from ..models.pods import PodInfo
from .base_collector import BaseCollector
from .cgroup import is_pod_line, parse_cgroup_line
from .pod_correlator import PodCorrelator
from .process_reader import ProcessInfoReader

logger = logging.getLogger(__name__)


class ProcessTreeScanner(BaseCollector):
    """
    Scans `<proc_root>` and returns a mapping from pod UID to PodInfo.

    Every call rebuilds the mapping from live state. Only an unreadable root
    is an error; unreadable or unparseable per-process data skips that
    process and the scan continues.
    """

    def __init__(
        self,
        proc_root: str,
        reader: Optional[ProcessInfoReader] = None,
        correlator_factory: Callable[[], PodCorrelator] = PodCorrelator,
    ):
        self.proc_root = proc_root
        self.reader = reader or ProcessInfoReader(proc_root)
        self.correlator_factory = correlator_factory

    def collect(self) -> Dict[str, PodInfo]:
        with tracer.start_as_current_span("discover_pods") as span:
            span.set_attribute("decisionmaker.proc_root", self.proc_root)
            correlator = self.correlator_factory()
            scanned = 0
            for pid in self._iter_pids():
                scanned += 1
                self._scan_process(pid, correlator)

            pods = correlator.result()
            span.set_attribute("decisionmaker.pods", len(pods))
            logger.debug(f"Scanned {scanned} processes under {self.proc_root}, found {len(pods)} pods.")
            return pods

    def _iter_pids(self) -> Iterator[int]:
        try:
            entries = list(os.scandir(self.proc_root))
        except OSError as e:
            raise DiscoveryRootError(self.proc_root, e) from e

        for entry in entries:
            # Non-numeric entries (e.g. "acpi", "self") are not processes.
            # str.isdigit() also accepts non-ASCII digits such as "²".
            if not (entry.name.isascii() and entry.name.isdigit()):
                continue
            pid = int(entry.name)
            if pid <= 0:
                continue
            try:
                if not entry.is_dir():
                    continue
            except OSError:
                continue
            yield pid

    def _scan_process(self, pid: int, correlator: PodCorrelator) -> None:
        cgroup_path = os.path.join(self.proc_root, str(pid), "cgroup")
        try:
            with open(cgroup_path, "r", encoding="utf-8", errors="replace") as fh:
                for line in fh:
                    line = line.rstrip("\n")
                    logger.debug(f"cgroup line for pid {pid}: {line}")
                    if not is_pod_line(line):
                        continue
                    match = parse_cgroup_line(line)
                    if match is None:
                        continue
                    if not match.matched:
                        logger.warning(f"Failed to parse cgroup line for pid {pid}, line: {line}: pod UID not found")
                        break

                    process = self.reader.read(pid)
                    process.container_id = match.container_id
                    correlator.add(match.pod_uid, process)
        except OSError as e:
            logger.warning(f"Failed to read cgroup file for pid {pid}: {e}")
