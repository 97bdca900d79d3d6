# src/decisionmaker/core/resolver.py
"""
Resolves per-pod scheduling intents into per-process SchedulingIntent records.
"""

import logging
from typing import Callable, Dict, List, Optional

from ..collectors.process_tree import ProcessTreeScanner
from ..models.intents import Intent, LabelSelector, SchedulingIntent
from ..models.pods import PodInfo
from ..storage.intent_store import IntentStore, intent_key
from .telemetry import tracer

logger = logging.getLogger(__name__)

# Sandbox container process that holds the pod's shared namespaces.
PAUSE_COMMAND = "pause"

UINT64_MASK = (1 << 64) - 1


def to_unsigned(value: int) -> int:
    """Reinterpret a signed 64-bit value as unsigned."""
    return value & UINT64_MASK


def build_selectors(labels: Dict[str, str]) -> List[LabelSelector]:
    return [LabelSelector(key=key, value=value) for key, value in labels.items()]


class IntentResolver:
    """
    Maps intents onto the live processes of their target pods and writes the
    results into the intent store.

    An intent whose pod has no visible processes is skipped without error;
    such pods are expected while they start up.
    """

    def __init__(
        self,
        store: IntentStore,
        proc_root: str,
        scanner_factory: Callable[[str], ProcessTreeScanner] = ProcessTreeScanner,
    ):
        self.store = store
        self.proc_root = proc_root
        self.scanner_factory = scanner_factory

    def discover(self, proc_root: Optional[str] = None) -> Dict[str, PodInfo]:
        return self.scanner_factory(proc_root or self.proc_root).collect()

    def resolve(self, intents: List[Intent], proc_root: Optional[str] = None) -> int:
        """
        Run one discovery scan and store a SchedulingIntent for every non-pause
        process of each intent's pod. Returns the number of entries stored.

        Raises:
            DiscoveryRootError: If the process table root cannot be read.
        """
        with tracer.start_as_current_span("resolve_intents") as span:
            span.set_attribute("decisionmaker.intents", len(intents))
            pod_infos = self.discover(proc_root)

            stored = 0
            for intent in intents:
                pod_info = pod_infos.get(intent.pod_id)
                logger.info(
                    f"Processing intent for PodName: {intent.pod_name} PodID: {intent.pod_id} "
                    f"on NodeID: {intent.node_id}, Process: {pod_info}"
                )
                if pod_info is None or not pod_info.processes:
                    logger.debug(f"No live processes for pod {intent.pod_id}; skipping intent.")
                    continue
                stored += self._resolve_one(intent, pod_info)

            span.set_attribute("decisionmaker.stored", stored)
            logger.info(f"Resolved {len(intents)} intents into {stored} scheduling intents.")
            return stored

    def _resolve_one(self, intent: Intent, pod_info: PodInfo) -> int:
        selectors = build_selectors(intent.pod_labels)
        stored = 0
        for process in pod_info.processes:
            if process.command == PAUSE_COMMAND:
                continue
            scheduling_intent = SchedulingIntent(
                pid=process.pid,
                priority=intent.priority > 0,
                execution_time=to_unsigned(intent.execution_time),
                command_regex=intent.command_regex,
                selectors=selectors,
            )
            logger.debug(f"Created SchedulingIntent: {scheduling_intent} for Process PID: {process.pid}")
            self.store.store(intent_key(intent.pod_id, process.pid), [scheduling_intent])
            stored += 1
        return stored
