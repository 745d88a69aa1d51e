"""Probe composition: health and greeting payloads with an injected clock."""

from datetime import datetime, timezone

from blog_api.core.compose_probes import (
    compose_health, compose_greeting, compose_custom_greeting,
)

NOW = datetime(2026, 1, 12, 12, 0, tzinfo=timezone.utc)


def test_health_payload():
    health = compose_health("blog-backend", "0.1.0", NOW)
    assert health.model_dump() == {
        "status": "healthy",
        "timestamp": "2026-01-12T12:00:00+00:00",
        "version": "0.1.0",
        "service": "blog-backend",
    }


def test_greeting_meta_names_stack():
    greeting = compose_greeting("blog-backend", NOW)
    assert greeting.meta.language == "Python"
    assert greeting.meta.framework == "FastAPI"
    assert greeting.greeting.timestamp == "2026-01-12T12:00:00+00:00"


def test_custom_greeting_uses_name():
    greeting = compose_custom_greeting("blog-backend", "Kohta", NOW)
    assert greeting.greeting.message == "Hello Kohta, welcome to blog-backend!"
    assert greeting.meta.model_dump(by_alias=True) == {
        "service": "blog-backend", "type": "custom_greeting",
    }


def test_custom_greeting_blank_name_is_generic():
    for name in (None, "", "   "):
        greeting = compose_custom_greeting("blog-backend", name, NOW)
        assert greeting.greeting.message == "Hello there, welcome to blog-backend!"
