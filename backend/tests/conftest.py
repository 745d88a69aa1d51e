"""Root conftest: shared test configuration, in-memory DB and HTTP client.

Invariants:
    - Every test gets a fresh in-memory SQLite database built from Base.metadata
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency; PostgreSQL-only
      features (partial indexes, gen_random_uuid) live in alembic, not in the ORM
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient  # noqa: E402

from blog_api.db.base import Base  # noqa: E402
from blog_api.infrastructure.database import get_db, DatabaseSessionManager  # noqa: E402
from blog_api.models.locale import Locale  # noqa: E402
from blog_api.models.post import Post  # noqa: E402
import blog_api.infrastructure.database as db_module  # noqa: E402
from blog_api.main import app  # noqa: E402
from tests.factories import default_locales  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    # Readiness probe goes through db_manager, not get_db
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_posts(test_db):
    """Insert posts into the test DB."""
    async def _seed(*posts: Post) -> list[Post]:
        test_db.add_all(posts)
        await test_db.commit()
        return list(posts)
    return _seed


@pytest.fixture
async def seed_locales(test_db):
    """Insert the ja / en locales by default, or the rows passed in."""
    async def _seed(*rows: Locale) -> list[Locale]:
        rows = list(rows) or default_locales()
        test_db.add_all(rows)
        await test_db.commit()
        return rows
    return _seed
