"""Content Projection: pure mappings from stored entities to API response shapes.

Invariants:
    - Pure and total: no IO, no exceptions for any validated entity
    - project_post drops content_ja, content_en, seo_title_*, seo_description_*,
      scheduled_at, deleted_at, content_format; they never reach the API boundary
    - project_locale drops created_at
    - uuid rendered in canonical 8-4-4-4-12 hex form
    - Timestamps rendered in UTC as YYYY-MM-DDTHH:MM:SS+00:00

Design Decisions:
    - One explicit function per entity/DTO pair instead of from_attributes:
      the exposed field set is written down once, here
    - Naive datetimes are read as UTC (SQLite hands them back without tzinfo)
"""

from datetime import datetime, timezone

from blog_api.core.repository_protocols import PostLike, LocaleLike
from blog_api.schemas.post import PostListItem
from blog_api.schemas.locale import LocaleResponse

# Fields that exist on the entity but must never be exposed.
POST_HIDDEN_FIELDS = frozenset({
    "content_ja", "content_en",
    "seo_title_ja", "seo_title_en",
    "seo_description_ja", "seo_description_en",
    "scheduled_at", "deleted_at", "content_format",
})


def format_timestamp(value: datetime) -> str:
    """Render a datetime in the fixed API timestamp format."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="seconds")


def format_optional_timestamp(value: datetime | None) -> str | None:
    return format_timestamp(value) if value is not None else None


def project_post(post: PostLike) -> PostListItem:
    """Post entity → PostListItem. Pure, no IO."""
    return PostListItem(
        id=post.id,
        slug=post.slug,
        uuid=str(post.uuid),
        title_ja=post.title_ja,
        title_en=post.title_en,
        excerpt_ja=post.excerpt_ja,
        excerpt_en=post.excerpt_en,
        category_id=post.category_id,
        author_id=post.author_id,
        featured_image_id=post.featured_image_id,
        status=post.status,
        published=post.published,
        published_at=format_optional_timestamp(post.published_at),
        view_count=post.view_count,
        reading_time_ja=post.reading_time_ja,
        reading_time_en=post.reading_time_en,
        created_at=format_timestamp(post.created_at),
        updated_at=format_timestamp(post.updated_at),
    )


def project_locale(locale: LocaleLike) -> LocaleResponse:
    """Locale entity → LocaleResponse. Pure, no IO."""
    return LocaleResponse(
        locale_id=locale.locale_id,
        code=locale.code,
        name=locale.name,
        is_default=locale.is_default,
        is_active=locale.is_active,
    )
