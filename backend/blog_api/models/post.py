"""Post ORM: persists a bilingual (ja/en) blog article.

Invariants:
    - slug and uuid are unique
    - deleted_at set means soft-deleted: no repository read may return the row
    - published = true implies status = "published" and published_at is set
      (not enforced on write; the read filter in PostRepository enforces it)
    - status is one of PostStatus

Design Decisions:
    - category_id / author_id / featured_image_id are plain nullable integers:
      the referenced tables are owned by the authoring side, not this service
    - Integer primary key plus a separate UUID: id for joins, uuid for public links
"""

import uuid as uuid_mod
from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from blog_api.core.domain_types import PostStatus, ContentFormat
from blog_api.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Post(Base):
    """Blog post entity - one row of the posts table."""
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    slug: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    uuid: Mapped[uuid_mod.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False, unique=True, default=uuid_mod.uuid4,
    )

    # Japanese content
    title_ja: Mapped[str] = mapped_column(String(255), nullable=False)
    content_ja: Mapped[str] = mapped_column(Text, nullable=False)
    excerpt_ja: Mapped[str | None] = mapped_column(Text, nullable=True)
    seo_title_ja: Mapped[str | None] = mapped_column(String(255), nullable=True)
    seo_description_ja: Mapped[str | None] = mapped_column(Text, nullable=True)

    # English content
    title_en: Mapped[str] = mapped_column(String(255), nullable=False)
    content_en: Mapped[str] = mapped_column(Text, nullable=False)
    excerpt_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    seo_title_en: Mapped[str | None] = mapped_column(String(255), nullable=True)
    seo_description_en: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Classification
    category_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    author_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    featured_image_id: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Lifecycle
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=PostStatus.DRAFT.value,
    )
    published: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    published_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    scheduled_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    # Metrics
    view_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    reading_time_ja: Mapped[int | None] = mapped_column(Integer, nullable=True)
    reading_time_en: Mapped[int | None] = mapped_column(Integer, nullable=True)
    content_format: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ContentFormat.MARKDOWN.value,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
