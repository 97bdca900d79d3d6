# src/decisionmaker/api/routers/system.py
"""
API routes for health and version information.
"""

from fastapi import APIRouter

from ... import __version__
from ..schemas import HealthResponse, VersionResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint for readiness probes."""
    return HealthResponse(status="healthy", version=__version__)


@router.get("/version", response_model=VersionResponse)
async def version():
    """Return the current application version."""
    return VersionResponse(version=__version__)
