"""Liveness endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel

from credforge.core.config.settings import settings

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    env: str
    version: str


@router.get("", response_model=HealthResponse)
async def health_check():
    """Report that the process is up. The core has no external dependencies to check."""
    return HealthResponse(status="ok", env=settings.APP_ENV, version=settings.VERSION)
