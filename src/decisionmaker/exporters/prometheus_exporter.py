# src/decisionmaker/exporters/prometheus_exporter.py
"""
Exposes the latest scheduler MetricSet in the Prometheus text format.

The collector is registered on a registry owned by the service rather than
on prometheus_client's process-wide default registry.
"""

import logging
from typing import Iterable, List, Tuple

from prometheus_client import CollectorRegistry, generate_latest
from prometheus_client.core import GaugeMetricFamily, Metric
from prometheus_client.registry import Collector

from ..core.metric_store import MetricSnapshotStore

logger = logging.getLogger(__name__)

MACHINE_ID_LABEL = "machine_id"

# (metric name, MetricSet field, help text)
SCHEDULER_GAUGES: List[Tuple[str, str, str]] = [
    ("user_sched_last_run_at", "usersched_last_run_at", "the timestamp of the last user scheduling run"),
    ("nr_queued", "nr_queued", "number of tasks queued in the userspace scheduler"),
    ("nr_scheduled", "nr_scheduled", "number of tasks scheduled by the userspace scheduler"),
    ("nr_running", "nr_running", "number of tasks currently running in the userspace scheduler"),
    ("nr_online_cpus", "nr_online_cpus", "number of online CPUs in the system"),
    ("nr_user_dispatches", "nr_user_dispatches", "number of user-space dispatches"),
    ("nr_kernel_dispatches", "nr_kernel_dispatches", "number of kernel-space dispatches"),
    ("nr_cancel_dispatches", "nr_cancel_dispatches", "number of canceled dispatches"),
    ("nr_bounce_dispatches", "nr_bounce_dispatches", "number of bounced dispatches"),
    ("nr_failed_dispatches", "nr_failed_dispatches", "number of failed dispatches"),
    ("nr_sched_congested", "nr_sched_congested", "number of times the scheduler was congested"),
]


class SchedulerMetricsCollector(Collector):
    """
    Custom collector that turns the current snapshot into one gauge per field,
    each labelled with the reporting machine. Emits nothing until the first
    snapshot arrives.
    """

    def __init__(self, store: MetricSnapshotStore, machine_id: str):
        self.store = store
        self.machine_id = machine_id

    def _family(self, name: str, documentation: str) -> GaugeMetricFamily:
        return GaugeMetricFamily(name, documentation, labels=[MACHINE_ID_LABEL])

    def describe(self) -> Iterable[Metric]:
        for name, _field, documentation in SCHEDULER_GAUGES:
            yield self._family(name, documentation)

    def collect(self) -> Iterable[Metric]:
        snapshot = self.store.read()
        if snapshot is None:
            return
        for name, field, documentation in SCHEDULER_GAUGES:
            family = self._family(name, documentation)
            family.add_metric([self.machine_id], float(getattr(snapshot, field)))
            yield family


def build_registry(collector: SchedulerMetricsCollector) -> CollectorRegistry:
    """Create a registry holding only the scheduler collector."""
    registry = CollectorRegistry(auto_describe=False)
    registry.register(collector)
    return registry


def render_latest(registry: CollectorRegistry) -> bytes:
    return generate_latest(registry)
