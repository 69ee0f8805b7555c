"""Status snapshots produced by the status reporter."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HealthStatus:
    status: str
    timestamp: str
    version: str


@dataclass(frozen=True)
class ApiStatus:
    message: str
    environment: str
    uptime: float
