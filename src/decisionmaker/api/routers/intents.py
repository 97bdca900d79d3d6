# src/decisionmaker/api/routers/intents.py
"""
API routes for ingesting scheduling intents and listing the resolved ones.
"""

import asyncio

from fastapi import APIRouter, Depends

from ...core.service import DecisionService
from ...models.intents import IntentBatch
from ..dependencies import get_decision_service
from ..schemas import IntentsAcceptedResponse, SchedulingStrategiesResponse

router = APIRouter()


@router.post("/intents", response_model=IntentsAcceptedResponse)
async def handle_intents(
    batch: IntentBatch,
    service: DecisionService = Depends(get_decision_service),
):
    """Resolve a batch of intents against the processes currently on this node."""
    # Discovery walks the process table with blocking reads.
    stored = await asyncio.to_thread(service.process_intents, batch.intents)
    return IntentsAcceptedResponse(stored=stored)


@router.get("/scheduling/strategies", response_model=SchedulingStrategiesResponse)
async def list_intents(service: DecisionService = Depends(get_decision_service)):
    """List every stored scheduling intent. Order is not guaranteed."""
    return SchedulingStrategiesResponse(data=service.list_scheduling_intents())
