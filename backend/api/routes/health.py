"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from modules.users.repository import UserRepository
from shared.config import Settings, get_settings
from ..dependencies import get_user_repository

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    users: int


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=settings.app_version)


@router.get("/ready", response_model=ReadinessResponse)
def readiness_check(
    repository: UserRepository = Depends(get_user_repository),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports how many records the store currently holds.
    """
    return ReadinessResponse(status="ready", users=repository.count())
