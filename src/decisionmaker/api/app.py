# src/decisionmaker/api/app.py
"""
FastAPI application factory for the decision maker API.

Uses the factory pattern so tests can create the app without lifespan
management and override the service dependency.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..core.config import config
from ..core.exceptions import DiscoveryError
from ..core.telemetry import initialize_telemetry
from .routers import intents, metrics, pods, system
from .schemas import ErrorResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown."""
    logger.info("Starting decision maker API...")
    initialize_telemetry()
    from ..core.factory import get_service

    service = get_service()
    logger.info(f"Decision service ready for machine {service.machine_id}, scanning {service.proc_root}.")
    yield
    logger.info("Shutting down decision maker API...")


async def discovery_error_handler(request: Request, exc: DiscoveryError) -> JSONResponse:
    """Turn a failed process-table scan into a 500 with an error body."""
    logger.error(f"Discovery failed while handling {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content=ErrorResponse(error=str(exc)).model_dump())


def create_app(use_lifespan: bool = False) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        use_lifespan: If True, attach the lifespan handler that initializes
                      tracing and the service eagerly. Set to False for testing.

    Returns:
        A configured FastAPI application instance.
    """
    app = FastAPI(
        title="Decision Maker API",
        description="Resolves pod scheduling intents into per-process hints and exposes scheduler metrics.",
        version=__version__,
        docs_url="/api/v1/docs",
        openapi_url="/api/v1/openapi.json",
        lifespan=lifespan if use_lifespan else None,
    )

    app.add_exception_handler(DiscoveryError, discovery_error_handler)

    app.include_router(system.router, prefix="/api/v1", tags=["System"])
    app.include_router(intents.router, prefix="/api/v1", tags=["Intents"])
    app.include_router(metrics.router, prefix="/api/v1", tags=["Metrics"])
    app.include_router(pods.router, prefix="/api/v1", tags=["Pods"])
    app.include_router(metrics.scrape_router)

    return app


def main():
    """Entry point for the decisionmaker-api console script."""
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    app = create_app(use_lifespan=True)
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
