"""Publication Visibility: the read-side publication policy as a pure predicate.

Invariants:
    - Visible means: published flag set, status "published", published_at set, not deleted
    - Mirrors the SQL filter in PostRepository.list_published for single-row lookups
"""

from blog_api.core.domain_types import PostStatus
from blog_api.core.repository_protocols import PostLike


def is_publicly_visible(post: PostLike) -> bool:
    return (
        post.published
        and post.status == PostStatus.PUBLISHED.value
        and post.published_at is not None
        and post.deleted_at is None
    )
