"""Health check API router."""

from fastapi import APIRouter, status

from newsdesk.api.dependencies import AdapterRegistryDep, SettingsDep
from newsdesk.models.api.news import HealthResponse

router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Service health",
    description=(
        "Report service status and which news sources have credentials. "
        "No upstream API is called."
    ),
)
async def health_check(
    registry: AdapterRegistryDep,
    config: SettingsDep,
) -> HealthResponse:
    sources = registry.configured_sources()
    return HealthResponse(
        status="healthy" if any(sources.values()) else "degraded",
        version=config.api_version,
        environment=config.environment,
        sources=sources,
    )
