"""Seed the two supported locales: ja (default) and en.

Revision ID: 002_seed_locales
Revises: 001_initial
Create Date: 2026-01-12

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "002_seed_locales"
down_revision: Union[str, None] = "001_initial"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_locales = sa.table(
    "locales",
    sa.column("locale_id", sa.Integer),
    sa.column("code", sa.String),
    sa.column("name", sa.String),
    sa.column("is_default", sa.Boolean),
    sa.column("is_active", sa.Boolean),
)


def upgrade() -> None:
    op.bulk_insert(_locales, [
        {"locale_id": 1, "code": "ja", "name": "日本語", "is_default": True, "is_active": True},
        {"locale_id": 2, "code": "en", "name": "English", "is_default": False, "is_active": True},
    ])
    op.execute(
        "SELECT setval(pg_get_serial_sequence('locales', 'locale_id'), "
        "(SELECT MAX(locale_id) FROM locales))",
    )


def downgrade() -> None:
    op.execute("DELETE FROM locales WHERE code IN ('ja', 'en')")
