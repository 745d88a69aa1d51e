"""Settings: URL normalisation and defaults."""

from blog_api.config import Settings


def test_postgres_url_converted_to_asyncpg():
    settings = Settings(database_url="postgresql://u:p@db:5432/blog")
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/blog"


def test_other_urls_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"


def test_pool_defaults(monkeypatch):
    for key in ("DATABASE_POOL_SIZE", "DATABASE_POOL_TIMEOUT_SECONDS", "DATABASE_POOL_RECYCLE_SECONDS"):
        monkeypatch.delenv(key, raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_pool_size == 10
    assert settings.database_pool_timeout_seconds == 3
    assert settings.database_pool_recycle_seconds == 1800
