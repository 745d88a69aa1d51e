"""Probe Schemas: health and greeting responses.

Design Decisions:
    - CustomGreetingMeta.greeting_type serializes as "type" (reserved word in Python)
"""

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Liveness probe payload."""
    status: str = Field(examples=["healthy"])
    timestamp: str = Field(examples=["2026-01-12T12:00:00+00:00"])
    version: str = Field(examples=["0.1.0"])
    service: str = Field(examples=["blog-backend"])


class GreetingMessage(BaseModel):
    message: str
    timestamp: str


class GreetingMeta(BaseModel):
    service: str
    language: str
    framework: str


class CustomGreetingMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    service: str
    greeting_type: str = Field(alias="type")


class GreetingResponse(BaseModel):
    """GET /api/v1/hello payload."""
    greeting: GreetingMessage
    meta: GreetingMeta


class CustomGreetingResponse(BaseModel):
    """GET /api/v1/hello/custom payload."""
    greeting: GreetingMessage
    meta: CustomGreetingMeta
