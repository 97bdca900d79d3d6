# src/decisionmaker/api/routers/metrics.py
"""
API routes for scheduler telemetry: JSON ingestion/reads under /api/v1 and the
Prometheus scrape endpoint at the root.
"""

import logging

from fastapi import APIRouter, Depends, Response
from prometheus_client import CONTENT_TYPE_LATEST

from ...core.service import DecisionService
from ...models.metrics import MetricSet
from ..dependencies import get_decision_service
from ..schemas import MetricsResponse, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()
scrape_router = APIRouter()

NO_METRICS_MESSAGE = "No metrics data available yet. Waiting for scheduler to report metrics."


@router.post("/metrics", response_model=SuccessResponse)
async def update_metrics(
    metric_set: MetricSet,
    service: DecisionService = Depends(get_decision_service),
):
    """Replace the stored snapshot with the one reported by the scheduler."""
    service.update_metrics(metric_set)
    return SuccessResponse()


@router.get("/metrics", response_model=MetricsResponse)
async def get_metrics(service: DecisionService = Depends(get_decision_service)):
    """Return the latest snapshot, or a null payload before the first report."""
    snapshot, received_at = service.get_metrics_with_timestamp()
    if snapshot is None:
        return MetricsResponse(message=NO_METRICS_MESSAGE)
    return MetricsResponse(data=snapshot, metrics_timestamp=received_at.isoformat())


@scrape_router.get("/metrics", include_in_schema=False)
async def scrape(service: DecisionService = Depends(get_decision_service)):
    """Prometheus text exposition of the latest snapshot."""
    return Response(content=service.render_metrics(), media_type=CONTENT_TYPE_LATEST)
