"""Post Repository: filtered reads over the posts table.

Invariants:
    - Every read excludes soft-deleted rows (deleted_at IS NOT NULL)
    - list_published and count_published share one filter, so count matches list
      when nothing is written in between (they are separate queries, no snapshot)
    - Published filter also requires status = 'published' and published_at set:
      rows violating the publication policy never surface as published
    - find_by_slug returns None when nothing matches; None is not an error
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.core.domain_types import PostStatus, Slug
from blog_api.infrastructure.query_runner import FetchMode, fetch
from blog_api.models.post import Post


def _not_deleted():
    return Post.deleted_at.is_(None)


def _published_filter() -> tuple:
    return (
        Post.published.is_(True),
        Post.status == PostStatus.PUBLISHED.value,
        Post.published_at.is_not(None),
        _not_deleted(),
    )


class PostRepository:
    """Read operations for Post. Holds only the request's session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_published(self) -> list[Post]:
        """Published, non-deleted posts, newest publication first."""
        stmt = (
            select(Post)
            .where(*_published_filter())
            .order_by(Post.published_at.desc(), Post.id.desc())
        )
        return await fetch(self._db, stmt, FetchMode.ALL, "posts.list_published")

    async def list_all(self) -> list[Post]:
        """Administrative view: every non-deleted post, newest created first."""
        stmt = (
            select(Post)
            .where(_not_deleted())
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        return await fetch(self._db, stmt, FetchMode.ALL, "posts.list_all")

    async def find_by_slug(self, slug: Slug | str) -> Post | None:
        stmt = select(Post).where(Post.slug == slug, _not_deleted())
        return await fetch(self._db, stmt, FetchMode.OPTIONAL, "posts.find_by_slug")

    async def count_published(self) -> int:
        stmt = select(func.count()).select_from(Post).where(*_published_filter())
        return await fetch(self._db, stmt, FetchMode.SCALAR, "posts.count_published")
