"""API endpoint for health checks."""

from fastapi import APIRouter, Depends

from app.core.interfaces.services.status import IStatusReporter
from app.entrypoints.api.schemas.health import HealthStatusResponse
from app.setup.status import get_status_reporter

router = APIRouter(tags=["Metrics"])


@router.get(
    "",
    summary="API health check.",
    response_model=HealthStatusResponse,
)
async def health_check(
    reporter: IStatusReporter = Depends(get_status_reporter),
) -> HealthStatusResponse:
    """Returns the health status of the API."""

    health = reporter.health()
    return HealthStatusResponse(
        status=health.status, timestamp=health.timestamp, version=health.version
    )
