# src/decisionmaker/core/metric_store.py

import logging
import threading
from datetime import datetime, timezone
from typing import Optional, Tuple

from ..models.metrics import MetricSet

logger = logging.getLogger(__name__)


class MetricSnapshotStore:
    """
    Holds the latest scheduler MetricSet.

    The snapshot and its arrival time live in one tuple that is swapped and
    read under the same lock, so readers see either the previous or the new
    pair, never a mix.
    MetricSet is frozen, so a snapshot cannot change once published.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._current: Tuple[Optional[MetricSet], Optional[datetime]] = (None, None)

    def update(self, snapshot: MetricSet) -> None:
        entry = (snapshot, datetime.now(timezone.utc))
        with self._lock:
            self._current = entry
        logger.debug(f"Scheduler metrics updated: {snapshot}")

    def read(self) -> Optional[MetricSet]:
        """Return the current snapshot, or None if no update has arrived yet."""
        return self.read_with_timestamp()[0]

    def read_with_timestamp(self) -> Tuple[Optional[MetricSet], Optional[datetime]]:
        with self._lock:
            return self._current

    @property
    def last_updated(self) -> Optional[datetime]:
        return self.read_with_timestamp()[1]
