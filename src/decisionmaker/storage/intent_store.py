# src/decisionmaker/storage/intent_store.py
"""
In-memory store of resolved scheduling intents, keyed by "<pod_id>-<pid>".

Entries are only ever replaced, never deleted: an entry for a process that
has exited stays until the service restarts.
"""

import logging
from typing import Callable, List, Sequence, Tuple

from ..models.intents import SchedulingIntent
from .concurrent_map import ConcurrentMap

logger = logging.getLogger(__name__)


def intent_key(pod_id: str, pid: int) -> str:
    return f"{pod_id}-{pid}"


class IntentStore:
    """Concurrency-safe mapping from key to the list of intents for that key."""

    def __init__(self):
        self._map: ConcurrentMap[str, Tuple[SchedulingIntent, ...]] = ConcurrentMap()

    def store(self, key: str, value: Sequence[SchedulingIntent]) -> None:
        """Replace the whole list at `key`. No merge with the previous value."""
        # Tuples keep a caller's later list mutations from leaking into readers.
        self._map.store(key, tuple(value))

    def load(self, key: str) -> List[SchedulingIntent]:
        value = self._map.load(key)
        return list(value) if value is not None else []

    def range(self, visit: Callable[[str, List[SchedulingIntent]], bool]) -> None:
        self._map.range(lambda key, value: visit(key, list(value)))

    def list_all(self) -> List[SchedulingIntent]:
        """Flatten every stored list into one list. Order is not guaranteed."""
        intents: List[SchedulingIntent] = []

        def collect(_key: str, value: List[SchedulingIntent]) -> bool:
            intents.extend(value)
            return True

        self.range(collect)
        return intents

    def __len__(self) -> int:
        return len(self._map)
