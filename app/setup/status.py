"""This file contains the status reporter dependency."""

from fastapi import Request

from app.core.interfaces.services.status import IStatusReporter


def get_status_reporter(request: Request) -> IStatusReporter:
    """Provide the application's status reporter for dependency injection."""
    return request.app.state.status_reporter
