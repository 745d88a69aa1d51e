"""Domain Types: enum values match stored column values."""

from blog_api.core.domain_types import (
    PostId, LocaleId, PostStatus, ContentFormat, STUB_PAGE, STUB_PER_PAGE,
)


def test_identity_types_wrap_int():
    assert PostId(3) == 3
    assert LocaleId(1) == 1


def test_post_status_has_four_states():
    assert {s.value for s in PostStatus} == {"draft", "published", "scheduled", "archived"}


def test_str_enum_compares_to_column_value():
    assert PostStatus.PUBLISHED == "published"
    assert ContentFormat.MARKDOWN == "markdown"


def test_pagination_stub_values():
    assert (STUB_PAGE, STUB_PER_PAGE) == (1, 20)
