"""Health check endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel

from core.config import settings

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    message: str
    environment: str


@router.get("/", response_model=HealthResponse, summary="Basic health check")
@router.get("/api", response_model=HealthResponse, include_in_schema=False)
async def health_check() -> HealthResponse:
    """
    Basic health check for load balancers.

    Returns service status without checking dependencies. Fast and lightweight.
    """
    return HealthResponse(message="API is running", environment=settings.app_env)
