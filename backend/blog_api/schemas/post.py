"""Post Schemas: list-item and list-envelope shapes for the posts API.

Invariants:
    - PostListItem has no content_ja / content_en, no SEO fields, no scheduled_at,
      deleted_at or content_format
    - uuid and timestamps are strings in a fixed format (see core/project_content.py)
    - PostListResponse.page / per_page are stub values until pagination exists

Design Decisions:
    - Separate from the ORM model: storage columns can change without touching the API
"""

from pydantic import BaseModel, Field


class PostListItem(BaseModel):
    """Post summary - everything a list/preview needs, minus the body."""
    id: int = Field(examples=[1])
    slug: str = Field(examples=["getting-started-with-rust"])
    uuid: str = Field(examples=["550e8400-e29b-41d4-a716-446655440000"])
    title_ja: str
    title_en: str
    excerpt_ja: str | None = None
    excerpt_en: str | None = None
    category_id: int | None = None
    author_id: int | None = None
    featured_image_id: int | None = None
    status: str = Field(examples=["published"])
    published: bool
    published_at: str | None = Field(None, examples=["2026-01-12T12:00:00+00:00"])
    view_count: int = 0
    reading_time_ja: int | None = None
    reading_time_en: int | None = None
    created_at: str
    updated_at: str


class PostListResponse(BaseModel):
    """Envelope for GET /api/v1/posts."""
    posts: list[PostListItem]
    total: int
    page: int
    per_page: int
