"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the weekday engine disagrees with a known date

Design Decisions:
    - Readiness runs a self-check (1 January 2000 was a Saturday) instead of a
      dependency ping: the engine has no external dependencies to ping
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from doomsday.core.date import Date
from doomsday.core.domain_types import Month, WeekDay, Year
from doomsday.core.weekday_finder import find_weekday

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

_KNOWN_DATE = Date(1, Month.JANUARY, Year(2000))
_KNOWN_WEEKDAY = WeekDay.SATURDAY


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "doomsday-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe — includes the engine self-check."""
    engine_ok = find_weekday(_KNOWN_DATE).result == _KNOWN_WEEKDAY
    if not engine_ok:
        logger.error("Engine self-check failed for 2000-01-01")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "engine_self_check_failed",
            },
        )
    return {"status": "ready", "checks": {"engine": "healthy"}}
