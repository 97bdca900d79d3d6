# src/decisionmaker/api/routers/pods.py
"""
API route exposing the live pod UID to process mapping of this node.
"""

import asyncio

from fastapi import APIRouter, Depends

from ...core.service import DecisionService
from ..dependencies import get_decision_service
from ..schemas import PodPidsResponse

router = APIRouter()


@router.get("/pods/pids", response_model=PodPidsResponse)
async def get_pod_pids(service: DecisionService = Depends(get_decision_service)):
    """Run a discovery scan and return every pod with its processes."""
    # A DiscoveryError becomes a 500 in the app-level handler.
    pod_infos = await asyncio.to_thread(service.get_pod_infos)
    return PodPidsResponse(pods=list(pod_infos.values()))
