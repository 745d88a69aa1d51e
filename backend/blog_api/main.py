"""Blog API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BlogApiError → {"error", "message", "code"} JSON
    - CORS configured from settings (not hardcoded)
    - Database pool created on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - OpenAPI served by FastAPI itself at /docs and /openapi.json
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_api.api.error_handlers import register_error_handlers
from blog_api.infrastructure.database import init_db, close_db
from blog_api.infrastructure.observability import setup_logging
from blog_api.config import get_settings
from blog_api.api.routes import health, greeting, posts, locales

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.database_pool_timeout_seconds,
        pool_recycle=settings.database_pool_recycle_seconds,
    )
    logger.info(f"Blog API started ({settings.environment})")
    yield
    await close_db()
    logger.info("Blog API shutting down")


settings = get_settings()
app = FastAPI(
    title="Blog API", version=settings.app_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE"],
    allow_headers=["Authorization", "Accept", "Content-Type"],
)

# Routes - explicit registration
app.include_router(health.router)
app.include_router(greeting.router)
app.include_router(posts.router)
app.include_router(locales.router)

register_error_handlers(app)
