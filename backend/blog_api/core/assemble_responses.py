"""Response Assembly: wraps projected items with count and pagination metadata.

Invariants:
    - Post lists carry the total from an independent count query (may diverge
      from len(posts) under concurrent writes; no snapshot isolation)
    - Locale lists carry total = number of items returned
    - page / per_page are fixed stubs (1 / 20), never computed
"""

from typing import Iterable

from blog_api.core.domain_types import STUB_PAGE, STUB_PER_PAGE
from blog_api.core.project_content import project_post, project_locale
from blog_api.core.repository_protocols import PostLike, LocaleLike
from blog_api.schemas.post import PostListResponse
from blog_api.schemas.locale import LocalesListResponse


def assemble_post_list(posts: Iterable[PostLike], total: int) -> PostListResponse:
    return PostListResponse(
        posts=[project_post(p) for p in posts],
        total=total,
        page=STUB_PAGE,
        per_page=STUB_PER_PAGE,
    )


def assemble_locale_list(locales: Iterable[LocaleLike]) -> LocalesListResponse:
    items = [project_locale(loc) for loc in locales]
    return LocalesListResponse(locales=items, total=len(items))
