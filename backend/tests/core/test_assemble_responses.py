"""Response assembly: totals and pagination stubs."""

from tests.factories import build_post
from blog_api.core.assemble_responses import assemble_post_list, assemble_locale_list
from blog_api.models.locale import Locale


def test_post_list_uses_given_total_and_stub_pagination():
    response = assemble_post_list([build_post(1), build_post(2)], total=2)
    assert response.total == 2
    assert response.page == 1
    assert response.per_page == 20
    assert [p.slug for p in response.posts] == ["post-1", "post-2"]


def test_post_list_total_is_not_recomputed_from_items():
    # count query and list query are independent; the assembler trusts the count
    response = assemble_post_list([build_post(1)], total=3)
    assert response.total == 3
    assert len(response.posts) == 1


def test_empty_post_list():
    response = assemble_post_list([], total=0)
    assert response.posts == []
    assert response.total == 0


def test_locale_list_total_is_item_count():
    locales = [
        Locale(locale_id=1, code="ja", name="日本語", is_default=True, is_active=True),
        Locale(locale_id=2, code="en", name="English", is_default=False, is_active=True),
    ]
    response = assemble_locale_list(locales)
    assert response.total == 2
    assert [loc.code for loc in response.locales] == ["ja", "en"]
