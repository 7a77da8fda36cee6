"""API v3 router - includes all v3 endpoints."""

from fastapi import APIRouter

from ranking_api.api.v3.endpoints import health, ranking

api_router = APIRouter()

api_router.include_router(health.router, prefix="", tags=["Health"])
api_router.include_router(ranking.router, prefix="", tags=["Ranking"])
