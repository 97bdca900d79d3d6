# src/decisionmaker/collectors/base_collector.py
"""
This module defines the abstract base class for host-state collectors.
Collectors read live host state on every call; nothing is cached between
calls.
"""

from abc import ABC, abstractmethod
from typing import Any


class BaseCollector(ABC):
    """
    Abstract Base Class for all host-state collectors.
    """

    @abstractmethod
    def collect(self) -> Any:
        """
        The main method for a collector. It should read its source (e.g. the
        process table), parse it, and return Pydantic models.
        """
        pass
