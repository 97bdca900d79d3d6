# src/decisionmaker/api/schemas.py
"""
Pydantic response schemas for the API.
Keeps API-specific response shapes separate from internal domain models.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.intents import SchedulingIntent
from ..models.metrics import MetricSet
from ..models.pods import PodInfo


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str = Field(..., description="Health status of the API.")
    version: str = Field(..., description="Current application version.")
    timestamp: str = Field(default_factory=utc_timestamp)


class VersionResponse(BaseModel):
    """Response schema for the version endpoint."""

    version: str = Field(..., description="Current application version.")


class SuccessResponse(BaseModel):
    """Acknowledgement for write endpoints."""

    success: bool = True
    timestamp: str = Field(default_factory=utc_timestamp)


class IntentsAcceptedResponse(SuccessResponse):
    stored: int = Field(0, description="Number of scheduling intents stored from the batch.")


class SchedulingStrategiesResponse(BaseModel):
    """All scheduling intents currently held by the service."""

    success: bool = True
    data: List[SchedulingIntent] = Field(default_factory=list)
    timestamp: str = Field(default_factory=utc_timestamp)


class MetricsResponse(BaseModel):
    """Latest scheduler metrics; `data` is null until the scheduler reports."""

    success: bool = True
    message: Optional[str] = None
    data: Optional[MetricSet] = None
    metrics_timestamp: Optional[str] = Field(None, description="When the snapshot was received.")
    timestamp: str = Field(default_factory=utc_timestamp)


class PodPidsResponse(BaseModel):
    """Pod UID to process mapping from a fresh discovery scan."""

    success: bool = True
    message: str = "Pod-PID mappings retrieved successfully"
    pods: List[PodInfo] = Field(default_factory=list)
    timestamp: str = Field(default_factory=utc_timestamp)


class ErrorResponse(BaseModel):
    """Body returned when a request fails on the server side."""

    success: bool = False
    error: str = Field(..., description="What went wrong.")
    timestamp: str = Field(default_factory=utc_timestamp)
