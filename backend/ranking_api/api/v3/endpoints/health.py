"""Health and readiness endpoints."""

import logging
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ranking_api.core.errors import get_request_id
from ranking_api.db.session import get_store
from ranking_api.ranking.store import RankingStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["ok"] = "ok"


class ReadinessCheck(BaseModel):
    """Individual readiness check result."""

    status: Literal["ok", "down"]
    message: str | None = None


class ReadinessResponse(BaseModel):
    """Readiness check response."""

    status: Literal["ok", "down"]
    checks: dict[str, ReadinessCheck]
    request_id: str


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Simple health check endpoint. Returns 200 if the API is running.",
)
async def health_check() -> HealthResponse:
    """Health check endpoint - just checks if the process is alive."""
    return HealthResponse(status="ok")


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    status_code=status.HTTP_200_OK,
    summary="Readiness check",
    description="Verifies that the ranking database answers queries. Returns 503 when it does not.",
    responses={503: {"model": ReadinessResponse}},
)
async def readiness_check(
    request: Request,
    store: Annotated[RankingStore, Depends(get_store)],
):
    """Readiness check endpoint - checks the ranking database."""
    checks: dict[str, ReadinessCheck] = {}

    try:
        await store.ping()
        checks["db"] = ReadinessCheck(status="ok")
    except Exception as e:
        logger.warning("Readiness check failed: %s", e)
        checks["db"] = ReadinessCheck(status="down", message=str(e))

    overall = "down" if any(c.status == "down" for c in checks.values()) else "ok"
    response = ReadinessResponse(
        status=overall,
        checks=checks,
        request_id=get_request_id(request),
    )
    if overall == "down":
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=response.model_dump(),
        )
    return response
