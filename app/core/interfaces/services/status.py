"""Status reporter interface definitions."""

from abc import ABC, abstractmethod

from app.core.status.models import ApiStatus, HealthStatus


class IStatusReporter(ABC):
    """Interface for status reporter implementations."""

    @abstractmethod
    def health(self) -> HealthStatus:
        """Return a liveness snapshot of the service."""
        raise NotImplementedError

    @abstractmethod
    def api_status(self) -> ApiStatus:
        """Return the runtime status of the API process."""
        raise NotImplementedError
