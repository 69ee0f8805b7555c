"""Shared fixtures for the API test suite."""

import pytest
from fastapi.testclient import TestClient

from app.entrypoints.api.setup import create_app
from app.settings import Settings

CONFIG_ENV_VARS = (
    "PORT",
    "API_PORT",
    "API_HOST",
    "NODE_ENV",
    "ENVIRONMENT",
    "APPLICATION_VERSION",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def settings() -> Settings:
    return Settings()


@pytest.fixture()
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))
