"""Posts Routes: published post list and single-post lookup.

Invariants:
    - Only published, non-deleted posts are visible here
    - Bodies (content_ja / content_en) and SEO fields never appear in responses
    - total comes from a separate count query; page / per_page are stubs
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.core.assemble_responses import assemble_post_list
from blog_api.core.errors import ResourceNotFoundError
from blog_api.core.project_content import project_post
from blog_api.core.visibility import is_publicly_visible
from blog_api.infrastructure.database import get_db
from blog_api.infrastructure.post_repository import PostRepository
from blog_api.schemas.post import PostListItem, PostListResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/posts", tags=["posts"])


@router.get("", response_model=PostListResponse)
async def list_posts(db: AsyncSession = Depends(get_db)):
    """Published posts, newest first."""
    repo = PostRepository(db)
    posts = await repo.list_published()
    total = await repo.count_published()
    logger.info(f"Fetched {len(posts)} posts", extra={"count": total})
    return assemble_post_list(posts, total)


@router.get("/{slug}", response_model=PostListItem)
async def get_post_by_slug(slug: str, db: AsyncSession = Depends(get_db)):
    """A single published post by slug; 404 if absent, unpublished or deleted."""
    post = await PostRepository(db).find_by_slug(slug)
    if post is None or not is_publicly_visible(post):
        raise ResourceNotFoundError("Post", slug)
    return project_post(post)
