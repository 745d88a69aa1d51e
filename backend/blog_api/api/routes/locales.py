"""Locales Routes: supported languages.

Invariants:
    - /active and /default are declared before /{code} so they are not read as codes
    - Unknown code → 404 envelope naming the code; storage failure → 500 envelope
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.core.assemble_responses import assemble_locale_list
from blog_api.core.errors import ResourceNotFoundError
from blog_api.core.project_content import project_locale
from blog_api.infrastructure.database import get_db
from blog_api.infrastructure.locale_repository import LocaleRepository
from blog_api.schemas.locale import LocaleResponse, LocalesListResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/locales", tags=["locales"])


@router.get("", response_model=LocalesListResponse)
async def list_locales(db: AsyncSession = Depends(get_db)):
    """All registered locales."""
    locales = await LocaleRepository(db).list_all()
    logger.info(f"Fetched {len(locales)} locales", extra={"resource": "locales"})
    return assemble_locale_list(locales)


@router.get("/active", response_model=LocalesListResponse)
async def list_active_locales(db: AsyncSession = Depends(get_db)):
    """Active locales only."""
    locales = await LocaleRepository(db).list_active()
    logger.info(f"Fetched {len(locales)} active locales", extra={"resource": "locales"})
    return assemble_locale_list(locales)


@router.get("/default", response_model=LocaleResponse)
async def get_default_locale(db: AsyncSession = Depends(get_db)):
    locale = await LocaleRepository(db).find_default()
    if locale is None:
        raise ResourceNotFoundError("Default locale", "default")
    return project_locale(locale)


@router.get("/{code}", response_model=LocaleResponse)
async def get_locale_by_code(code: str, db: AsyncSession = Depends(get_db)):
    """A single locale by its code (e.g. ja, en)."""
    locale = await LocaleRepository(db).find_by_code(code)
    if locale is None:
        raise ResourceNotFoundError("Locale", code)
    logger.info(f"Found locale: {locale.display_info()}")
    return project_locale(locale)
