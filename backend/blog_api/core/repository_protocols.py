"""Boundary Protocols: structural contracts between core and the ORM shell.

Invariants:
    - Core NEVER imports from models/ or infrastructure/ - dependency arrows point inward only
    - Projection functions accept anything shaped like a Post / Locale row

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Lets core tests build plain objects instead of ORM instances when convenient
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID


class PostLike(Protocol):
    """Structural contract for a Post entity as the projection layer reads it."""
    id: int
    slug: str
    uuid: UUID
    title_ja: str
    title_en: str
    content_ja: str
    content_en: str
    excerpt_ja: str | None
    excerpt_en: str | None
    seo_title_ja: str | None
    seo_title_en: str | None
    seo_description_ja: str | None
    seo_description_en: str | None
    category_id: int | None
    author_id: int | None
    featured_image_id: int | None
    status: str
    published: bool
    published_at: datetime | None
    scheduled_at: datetime | None
    view_count: int
    reading_time_ja: int | None
    reading_time_en: int | None
    content_format: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None


class LocaleLike(Protocol):
    """Structural contract for a Locale entity as the projection layer reads it."""
    locale_id: int
    code: str
    name: str
    is_default: bool
    is_active: bool
    created_at: datetime
