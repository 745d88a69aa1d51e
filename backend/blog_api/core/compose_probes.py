"""Probe Composition: builds health and greeting payloads. Pure, clock injected.

Invariants:
    - now is always passed in; nothing here reads the clock
    - A missing or blank name yields the generic greeting
"""

from datetime import datetime

from blog_api.core.project_content import format_timestamp
from blog_api.schemas.probes import (
    HealthResponse, GreetingMessage, GreetingMeta, CustomGreetingMeta,
    GreetingResponse, CustomGreetingResponse,
)

GREETING_LANGUAGE = "Python"
GREETING_FRAMEWORK = "FastAPI"


def compose_health(service: str, version: str, now: datetime) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=format_timestamp(now),
        version=version,
        service=service,
    )


def compose_greeting(service: str, now: datetime) -> GreetingResponse:
    return GreetingResponse(
        greeting=GreetingMessage(
            message=f"Hello from {service}!",
            timestamp=format_timestamp(now),
        ),
        meta=GreetingMeta(
            service=service,
            language=GREETING_LANGUAGE,
            framework=GREETING_FRAMEWORK,
        ),
    )


def compose_custom_greeting(
    service: str, name: str | None, now: datetime,
) -> CustomGreetingResponse:
    """Personalised greeting. Whitespace-only names count as missing."""
    name = name.strip() if name else None
    if name:
        message = f"Hello {name}, welcome to {service}!"
    else:
        message = f"Hello there, welcome to {service}!"
    return CustomGreetingResponse(
        greeting=GreetingMessage(message=message, timestamp=format_timestamp(now)),
        meta=CustomGreetingMeta(service=service, greeting_type="custom_greeting"),
    )
