"""API setup module."""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI

from app.core.status.services.reporter import ProcessStatusReporter
from app.entrypoints.api.endpoints.metrics import health
from app.entrypoints.api.endpoints.public import status
from app.settings import Settings, load_settings
from app.setup.logging import configure_logging

logger = logging.getLogger(__name__)


class ApiServer(uvicorn.Server):
    """Uvicorn server announcing the port once the listener is bound."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("Server running on port %s", self.config.port)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Creates the FastAPI application without binding a socket."""
    settings = settings or load_settings()

    fastapi_app = FastAPI(
        title="CI/CD Pipeline Demo API",
        description="Reports service health and runtime status.",
        version=settings.version,
        openapi_url="/openapi.json",
    )
    fastapi_app.state.settings = settings
    fastapi_app.state.status_reporter = ProcessStatusReporter(settings)

    fastapi_app.include_router(health.router, prefix="/health")
    fastapi_app.include_router(status.router, prefix="/api")
    return fastapi_app


app = create_app()


def create_server(settings: Settings) -> ApiServer:
    """Builds the uvicorn server for the given settings without starting it."""

    config = uvicorn.Config(
        create_app(settings),
        host=settings.api_host,
        port=settings.api_port,
        loop="uvloop",
        log_level=settings.log_level.lower(),
    )
    return ApiServer(config)


def entry() -> None:
    """Starts the API and serves until the process is terminated."""

    settings = load_settings()
    configure_logging(settings.log_level)
    create_server(settings).run()


if __name__ == "__main__":
    entry()
