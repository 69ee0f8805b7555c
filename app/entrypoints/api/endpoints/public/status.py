"""Status endpoint reporting the runtime environment and uptime."""

from fastapi import APIRouter, Depends

from app.core.interfaces.services.status import IStatusReporter
from app.entrypoints.api.schemas.status import ApiStatusResponse
from app.setup.status import get_status_reporter

router = APIRouter(tags=["Status"])


@router.get("/status", response_model=ApiStatusResponse)
async def api_status(
    reporter: IStatusReporter = Depends(get_status_reporter),
) -> ApiStatusResponse:
    """Report the environment name and process uptime."""

    status = reporter.api_status()
    return ApiStatusResponse(
        message=status.message,
        environment=status.environment,
        uptime=status.uptime,
    )
