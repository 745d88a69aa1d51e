"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - PostId and LocaleId wrap integer primary keys
    - Post lifecycle states encoded as an Enum - no raw string matching in filters

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: compare equal to the stored column value and serialize without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PostId = NewType("PostId", int)
LocaleId = NewType("LocaleId", int)
Slug = NewType("Slug", str)
LocaleCode = NewType("LocaleCode", str)


# ─── Enums ───────────────────────────────────────────────────────

class PostStatus(str, Enum):
    """Post lifecycle states - maps to DB `status` column."""
    DRAFT = "draft"
    PUBLISHED = "published"
    SCHEDULED = "scheduled"
    ARCHIVED = "archived"


class ContentFormat(str, Enum):
    """Body markup of content_ja / content_en."""
    MARKDOWN = "markdown"
    HTML = "html"


# ─── Pagination stub ─────────────────────────────────────────────

STUB_PAGE = 1
STUB_PER_PAGE = 20
