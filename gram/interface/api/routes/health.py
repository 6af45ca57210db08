"""Health check route."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from gram.config import Settings
from gram.util.observability import SERVICE_VERSION

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Liveness payload for the load balancer."""

    status: str
    environment: str
    version: str
    git_sha: str
    timestamp: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is up and which build it runs."""
    return HealthResponse(
        status="healthy",
        environment=settings.environment,
        version=SERVICE_VERSION,
        git_sha=settings.git_sha,
        timestamp=datetime.now(),
    )
