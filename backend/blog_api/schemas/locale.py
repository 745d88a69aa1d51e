"""Locale Schemas: public locale shape (no created_at) and its list envelope."""

from pydantic import BaseModel, Field


class LocaleResponse(BaseModel):
    """Public locale data."""
    locale_id: int = Field(examples=[1])
    code: str = Field(examples=["ja"])
    name: str = Field(examples=["日本語"])
    is_default: bool
    is_active: bool


class LocalesListResponse(BaseModel):
    """Envelope for GET /api/v1/locales and /api/v1/locales/active."""
    locales: list[LocaleResponse]
    total: int = Field(examples=[2])
