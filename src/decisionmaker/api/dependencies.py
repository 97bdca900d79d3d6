# src/decisionmaker/api/dependencies.py
"""
FastAPI dependency injection functions.

Route handlers receive the DecisionService through Depends() so tests can
override it with a service pointed at a fixture process table.
"""

from ..core.service import DecisionService


async def get_decision_service() -> DecisionService:
    """Provides the DecisionService instance via the factory."""
    from ..core.factory import get_service

    return get_service()
