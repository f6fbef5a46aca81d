"""
Showcase Backend - Health Check Route
=======================================

What:  Liveness greeting at `/` and a store-aware health check at `/health`.
Who:   Load balancers, uptime monitors, and anyone opening the API root in
       a browser.

Status levels:
    healthy:   the store answered a ping (HTTP 200)
    unhealthy: the store is unreachable or not connected (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Request, Response
from fastapi.responses import PlainTextResponse

from showcase import __version__
from showcase.exceptions import ShowcaseError
from showcase.schemas.artwork import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get("/", response_class=PlainTextResponse, summary="Greeting")
async def root() -> str:
    return "Hello World!"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Pings the document store and reports uptime.",
)
async def health_check(request: Request, response: Response) -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    store = getattr(request.app.state, "store", None)
    if store is None:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: store not initialized")
    else:
        try:
            await store.ping()
        except ShowcaseError as e:
            db_status = "disconnected"
            overall = "unhealthy"
            logger.warning("Health check: store unreachable: %s", e.message)

    if overall == "unhealthy":
        response.status_code = 503

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
