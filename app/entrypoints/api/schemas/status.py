"""Schemas for the API status endpoint."""

from pydantic import BaseModel, Field


class ApiStatusResponse(BaseModel):
    """The response model for the API status endpoint."""

    message: str
    environment: str = Field(examples=["development"])
    uptime: float = Field(ge=0, description="Seconds the process has been running.")
