# src/decisionmaker/core/service.py
"""
The decision maker service: the single object behind every external
operation (intent ingestion and listing, telemetry ingestion, reads and
scrapes, pod/process queries).
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from ..exporters.prometheus_exporter import SchedulerMetricsCollector, build_registry, render_latest
from ..models.intents import Intent, SchedulingIntent
from ..models.metrics import MetricSet
from ..models.pods import PodInfo
from ..storage.intent_store import IntentStore
from .metric_store import MetricSnapshotStore
from .resolver import IntentResolver

logger = logging.getLogger(__name__)


class DecisionService:
    """
    Owns the intent store, the metric snapshot store and the Prometheus
    registry the scrape endpoint renders. All methods are safe to call from
    concurrent request handlers.
    """

    def __init__(
        self,
        proc_root: str,
        machine_id: str,
        intent_store: Optional[IntentStore] = None,
        metric_store: Optional[MetricSnapshotStore] = None,
        resolver: Optional[IntentResolver] = None,
    ):
        self.proc_root = proc_root
        self.machine_id = machine_id
        self.intent_store = intent_store or IntentStore()
        self.metric_store = metric_store or MetricSnapshotStore()
        self.resolver = resolver or IntentResolver(self.intent_store, proc_root)
        self.metric_collector = SchedulerMetricsCollector(self.metric_store, machine_id)
        self.registry = build_registry(self.metric_collector)

    def process_intents(self, intents: List[Intent]) -> int:
        """
        Resolve a batch of intents against live host state.

        Raises:
            DiscoveryRootError: If the process table cannot be read; nothing
                from the batch is stored in that case.
        """
        return self.resolver.resolve(intents)

    def list_scheduling_intents(self) -> List[SchedulingIntent]:
        return self.intent_store.list_all()

    def get_pod_infos(self) -> Dict[str, PodInfo]:
        """Fresh discovery scan; never cached."""
        return self.resolver.discover()

    def update_metrics(self, metric_set: MetricSet) -> None:
        self.metric_store.update(metric_set)

    def get_metrics(self) -> Optional[MetricSet]:
        return self.metric_store.read()

    def get_metrics_with_timestamp(self) -> Tuple[Optional[MetricSet], Optional[datetime]]:
        """The current snapshot together with the time it was received."""
        return self.metric_store.read_with_timestamp()

    def render_metrics(self) -> bytes:
        return render_latest(self.registry)
