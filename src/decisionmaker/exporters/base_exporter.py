from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict

from ..models.pods import PodInfo


class BaseExporter(ABC):
    """Abstract base class for writing a discovered pod/process map to disk.

    Subclasses should provide a DEFAULT_FILENAME and implement `export`.
    """

    DEFAULT_FILENAME: str = "decisionmaker-pods"

    @abstractmethod
    async def export(self, pods: Dict[str, PodInfo], path: str | None = None) -> str:
        """Write the pod map and return the written path."""
        raise NotImplementedError()
