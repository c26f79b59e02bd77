"""
MemoPad Backend — Health Check Route
======================================

What:  Liveness endpoint for monitoring and load balancer probes.
How:   Reports version, number of memos in memory, and uptime of this app
       instance (create_app() stamps app.state.started_at).
       The store has no external dependencies, so a responding process is healthy.
Who:   Called by container health checks and monitoring systems.
"""

import time

from fastapi import APIRouter, Depends, Request

from memopad import __version__
from memopad.schemas.memo import HealthResponse
from memopad.services.memo_service import MemoService, get_memo_service

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    request: Request,
    service: MemoService = Depends(get_memo_service),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        memo_count=service.store.count(),
        uptime_seconds=round(time.time() - request.app.state.started_at, 2),
    )
