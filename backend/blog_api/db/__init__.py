"""Database Metadata: SQLAlchemy declarative base shared by all ORM models.

Invariants:
    - Single metadata object; alembic and test fixtures create tables from it
"""
