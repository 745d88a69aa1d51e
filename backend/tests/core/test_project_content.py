"""Content projection: exposure policy and fixed formatting, no IO."""

import uuid
from datetime import datetime, timedelta, timezone

from tests.factories import build_post
from blog_api.core.project_content import (
    POST_HIDDEN_FIELDS, format_timestamp, format_optional_timestamp,
    project_post, project_locale,
)
from blog_api.models.locale import Locale


def test_post_projection_omits_body_and_seo_fields():
    item = project_post(build_post()).model_dump()
    for hidden in POST_HIDDEN_FIELDS:
        assert hidden not in item


def test_hidden_field_set_covers_bodies_and_both_seo_pairs():
    assert {
        "content_ja", "content_en",
        "seo_title_ja", "seo_title_en",
        "seo_description_ja", "seo_description_en",
    } <= POST_HIDDEN_FIELDS


def test_post_projection_copies_retained_fields_verbatim():
    post = build_post(
        7, category_id=3, featured_image_id=9, view_count=42,
        reading_time_ja=5, reading_time_en=None,
    )
    item = project_post(post)
    assert item.id == 7
    assert item.slug == "post-7"
    assert item.title_ja == "記事 7"
    assert item.title_en == "Post 7"
    assert item.excerpt_en == "Excerpt 7"
    assert item.category_id == 3
    assert item.author_id == 1
    assert item.featured_image_id == 9
    assert item.status == "published"
    assert item.published is True
    assert item.view_count == 42
    assert item.reading_time_ja == 5
    assert item.reading_time_en is None


def test_uuid_rendered_as_canonical_string():
    uid = uuid.UUID("550e8400-e29b-41d4-a716-446655440000")
    item = project_post(build_post(uuid=uid))
    assert item.uuid == "550e8400-e29b-41d4-a716-446655440000"


def test_timestamps_rendered_in_fixed_utc_format():
    created = datetime(2026, 1, 12, 12, 0, 0, 123456, tzinfo=timezone.utc)
    item = project_post(build_post(created_at=created, updated_at=created, published_at=created))
    assert item.created_at == "2026-01-12T12:00:00+00:00"
    assert item.updated_at == "2026-01-12T12:00:00+00:00"
    assert item.published_at == "2026-01-12T12:00:00+00:00"


def test_unpublished_post_projects_null_published_at():
    item = project_post(build_post(published=False, status="draft", published_at=None))
    assert item.published_at is None


def test_naive_timestamp_treated_as_utc():
    assert format_timestamp(datetime(2026, 3, 1, 8, 30)) == "2026-03-01T08:30:00+00:00"


def test_offset_timestamp_converted_to_utc():
    jst = timezone(timedelta(hours=9))
    assert format_timestamp(datetime(2026, 3, 1, 9, 0, tzinfo=jst)) == "2026-03-01T00:00:00+00:00"


def test_format_optional_timestamp_passes_none_through():
    assert format_optional_timestamp(None) is None


def test_distinct_posts_project_to_distinct_items():
    a = project_post(build_post(1))
    b = project_post(build_post(2))
    assert a != b


def test_locale_projection_drops_created_at():
    locale = Locale(
        locale_id=1, code="ja", name="日本語", is_default=True, is_active=True,
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )
    assert project_locale(locale).model_dump() == {
        "locale_id": 1,
        "code": "ja",
        "name": "日本語",
        "is_default": True,
        "is_active": True,
    }
