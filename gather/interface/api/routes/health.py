"""Health check routes."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from gather.config import Settings
from gather.domain.service import ProviderGateway
from gather.domain.value import AuthProvider

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Liveness report with build and provider information."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str
    environment: str
    providers: list[AuthProvider]  # Federated providers with a gateway


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings],
    gateways: FromDishka[dict[AuthProvider, ProviderGateway]],
) -> HealthResponse:
    """Report that the process serves requests.

    Does not touch the database or the providers.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version="0.1.0",
        git_sha=settings.git_sha,
        environment=settings.environment,
        providers=sorted(gateways, key=lambda provider: provider.value),
    )
