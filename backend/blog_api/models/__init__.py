"""ORM Models: SQLAlchemy declarative models for the content entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - One column per stored column; no computed or cached state

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from blog_api.models.post import Post  # noqa: F401
from blog_api.models.locale import Locale  # noqa: F401
