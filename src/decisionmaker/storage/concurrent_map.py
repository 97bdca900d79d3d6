# src/decisionmaker/storage/concurrent_map.py
"""
A typed, thread-safe key/value map.
"""

import threading
from typing import Callable, Dict, Generic, List, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class ConcurrentMap(Generic[K, V]):
    """
    Mapping safe for concurrent readers and writers without caller-side locking.

    `store` replaces the value at a key atomically. `range` visits a snapshot
    taken under the lock, so each key is seen with either its old or its new
    value, and the visitor runs without holding the lock.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._data: Dict[K, V] = {}

    def store(self, key: K, value: V) -> None:
        with self._lock:
            self._data[key] = value

    def load(self, key: K) -> Optional[V]:
        with self._lock:
            return self._data.get(key)

    def range(self, visit: Callable[[K, V], bool]) -> None:
        """Call `visit(key, value)` for each entry until it returns False."""
        for key, value in self.snapshot():
            if not visit(key, value):
                break

    def snapshot(self) -> List[Tuple[K, V]]:
        with self._lock:
            return list(self._data.items())

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
