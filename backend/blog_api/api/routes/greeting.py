"""Greeting Routes: hello endpoints used as smoke tests by the frontend."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Query

from blog_api.config import get_settings
from blog_api.core.compose_probes import compose_greeting, compose_custom_greeting
from blog_api.schemas.probes import GreetingResponse, CustomGreetingResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/hello", tags=["greeting"])


@router.get("", response_model=GreetingResponse)
async def hello():
    """Standard greeting from the backend."""
    logger.info("Hello endpoint called")
    return compose_greeting(get_settings().service_name, datetime.now(timezone.utc))


@router.get("/custom", response_model=CustomGreetingResponse)
async def custom_hello(name: str | None = Query(None, max_length=100)):
    """Greeting personalised with ?name=."""
    logger.info(f"Custom hello endpoint called with name: {name!r}")
    return compose_custom_greeting(
        get_settings().service_name, name, datetime.now(timezone.utc),
    )
