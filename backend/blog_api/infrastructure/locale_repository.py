"""Locale Repository: reads over the locales table, ordered by locale_id.

Invariants:
    - list_all / list_active ordered by locale_id ascending
    - find_by_code and find_default return None when nothing matches
    - find_default with several default rows returns the lowest locale_id
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.core.domain_types import LocaleCode
from blog_api.infrastructure.query_runner import FetchMode, fetch
from blog_api.models.locale import Locale


class LocaleRepository:
    """Read operations for Locale."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_all(self) -> list[Locale]:
        stmt = select(Locale).order_by(Locale.locale_id.asc())
        return await fetch(self._db, stmt, FetchMode.ALL, "locales.list_all")

    async def list_active(self) -> list[Locale]:
        stmt = (
            select(Locale)
            .where(Locale.is_active.is_(True))
            .order_by(Locale.locale_id.asc())
        )
        return await fetch(self._db, stmt, FetchMode.ALL, "locales.list_active")

    async def find_by_code(self, code: LocaleCode | str) -> Locale | None:
        stmt = select(Locale).where(Locale.code == code)
        return await fetch(self._db, stmt, FetchMode.OPTIONAL, "locales.find_by_code")

    async def find_default(self) -> Locale | None:
        """The default locale; first by locale_id if the data has several."""
        stmt = (
            select(Locale)
            .where(Locale.is_default.is_(True))
            .order_by(Locale.locale_id.asc())
            .limit(1)
        )
        return await fetch(self._db, stmt, FetchMode.OPTIONAL, "locales.find_default")

    async def count(self) -> int:
        stmt = select(func.count()).select_from(Locale)
        return await fetch(self._db, stmt, FetchMode.SCALAR, "locales.count")
