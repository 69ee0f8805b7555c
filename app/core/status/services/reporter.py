"""Concrete status reporter backed by process clocks and settings."""

import time
from datetime import datetime, timezone
from typing import Callable, Optional

import psutil

from app.core.interfaces.services.status import IStatusReporter
from app.core.status.models import ApiStatus, HealthStatus
from app.settings import Settings

HEALTHY = "healthy"
API_MESSAGE = "CI/CD Pipeline Demo API is running"


def process_started_at() -> float:
    """Return the monotonic clock reading at which this process was created."""
    elapsed = max(0.0, time.time() - psutil.Process().create_time())
    return time.monotonic() - elapsed


PROCESS_STARTED_AT = process_started_at()


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """Format a UTC instant as ISO-8601 with millisecond precision and a Z suffix."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ProcessStatusReporter(IStatusReporter):
    """Reporter describing the running process."""

    def __init__(
        self,
        settings: Settings,
        clock: Optional[Callable[[], float]] = None,
        started_at: Optional[float] = None,
    ) -> None:
        self._settings = settings
        self._clock = clock or time.monotonic
        self._started_at = PROCESS_STARTED_AT if started_at is None else started_at

    def health(self) -> HealthStatus:
        return HealthStatus(
            status=HEALTHY,
            timestamp=utc_timestamp(),
            version=self._settings.version,
        )

    def api_status(self) -> ApiStatus:
        uptime = max(0.0, self._clock() - self._started_at)
        return ApiStatus(
            message=API_MESSAGE,
            environment=self._settings.environment,
            uptime=uptime,
        )
