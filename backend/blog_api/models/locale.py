"""Locale ORM: a language the site can be served in.

Invariants:
    - code is unique (e.g. "ja", "en")
    - At most one row has is_default = true (enforced by a partial unique index
      in PostgreSQL, see alembic 001; not re-checked here)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from blog_api.db.base import Base


class Locale(Base):
    """Supported locale entity."""
    __tablename__ = "locales"

    locale_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    code: Mapped[str] = mapped_column(
        String(10), nullable=False, unique=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    is_default: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def is_japanese(self) -> bool:
        return self.code == "ja"

    def is_english(self) -> bool:
        return self.code == "en"

    def display_info(self) -> str:
        """Human-readable one-liner, e.g. '日本語 (ja) - Active - Default'."""
        active = "Active" if self.is_active else "Inactive"
        default = " - Default" if self.is_default else ""
        return f"{self.name} ({self.code}) - {active}{default}"
