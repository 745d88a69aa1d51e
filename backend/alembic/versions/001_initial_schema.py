"""Initial schema: posts and locales.

Revision ID: 001_initial
Revises: None
Create Date: 2026-01-12

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "locales",
        sa.Column("locale_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("code", sa.String(10), nullable=False, unique=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("is_default", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default="true"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    # At most one default locale
    op.create_index(
        "uq_locales_single_default", "locales", ["is_default"],
        unique=True, postgresql_where=sa.text("is_default"),
    )

    op.create_table(
        "posts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("uuid", UUID(as_uuid=True), nullable=False, unique=True,
                  server_default=sa.text("gen_random_uuid()")),
        sa.Column("title_ja", sa.String(255), nullable=False),
        sa.Column("content_ja", sa.Text, nullable=False),
        sa.Column("excerpt_ja", sa.Text, nullable=True),
        sa.Column("seo_title_ja", sa.String(255), nullable=True),
        sa.Column("seo_description_ja", sa.Text, nullable=True),
        sa.Column("title_en", sa.String(255), nullable=False),
        sa.Column("content_en", sa.Text, nullable=False),
        sa.Column("excerpt_en", sa.Text, nullable=True),
        sa.Column("seo_title_en", sa.String(255), nullable=True),
        sa.Column("seo_description_en", sa.Text, nullable=True),
        sa.Column("category_id", sa.Integer, nullable=True),
        sa.Column("author_id", sa.Integer, nullable=True),
        sa.Column("featured_image_id", sa.Integer, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        sa.Column("published", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("scheduled_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("view_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("reading_time_ja", sa.Integer, nullable=True),
        sa.Column("reading_time_en", sa.Integer, nullable=True),
        sa.Column("content_format", sa.String(20), nullable=False, server_default="markdown"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint(
            "status IN ('draft', 'published', 'scheduled', 'archived')",
            name="ck_posts_status",
        ),
    )
    op.create_index("ix_posts_slug", "posts", ["slug"], unique=True)
    op.create_index(
        "ix_posts_published_at", "posts", ["published_at"],
        postgresql_where=sa.text("published AND deleted_at IS NULL"),
    )


def downgrade() -> None:
    op.drop_index("ix_posts_published_at", table_name="posts")
    op.drop_index("ix_posts_slug", table_name="posts")
    op.drop_table("posts")
    op.drop_index("uq_locales_single_default", table_name="locales")
    op.drop_table("locales")
