"""
EduLibrary Backend — Health Check Route
=========================================

What:  GET /health for container health checks and load balancer probes.
How:   Asks the configured store whether it is reachable and how many
       resources it holds.

Status levels:
    - healthy:   storage reachable (HTTP 200)
    - unhealthy: storage unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Request, Response

from edulibrary import __version__
from edulibrary.schemas.resource import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    responses={503: {"description": "Storage unreachable", "model": HealthResponse}},
)
async def health_check(request: Request, response: Response) -> HealthResponse:
    storage = request.app.state.storage
    storage_status = "available"
    overall = "healthy"
    resource_count = None

    if await storage.health_check():
        try:
            resource_count = await storage.count()
        except Exception as e:
            logger.warning("Health check: could not count resources: %s", str(e))
            storage_status = "unavailable"
            overall = "unhealthy"
    else:
        storage_status = "unavailable"
        overall = "unhealthy"

    if overall == "unhealthy":
        response.status_code = 503

    return HealthResponse(
        status=overall,
        version=__version__,
        storage_backend=storage.backend_name,
        storage=storage_status,
        resource_count=resource_count,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
