# src/decisionmaker/core/factory.py
"""
Factory functions to instantiate the process-wide DecisionService.
"""

import logging
from functools import lru_cache

from ..utils.machine_id import get_machine_id
from .config import config
from .service import DecisionService

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_service() -> DecisionService:
    """
    Build the DecisionService from config.
    Uses lru_cache to act as a singleton so every request shares its stores.
    """
    machine_id = get_machine_id(config.MACHINE_ID)
    logger.info(f"Creating decision service (proc_root={config.PROC_ROOT}, machine_id={machine_id}).")
    return DecisionService(proc_root=config.PROC_ROOT, machine_id=machine_id)
