import pytest
from fakes import make_detail, make_preview

from user_manager.domain.entities.user import UserPage
from user_manager.domain.value_objects.operation_result import Error, Loading, Success


@pytest.mark.parametrize(
    ("page", "limit", "total", "has_more", "page_count"),
    [
        (0, 2, 5, True, 3),
        (1, 2, 5, True, 3),
        (2, 2, 5, False, 3),
        (1, 2, 4, False, 2),
        (0, 20, 0, False, 0),
        (0, 0, 10, False, 0),
    ],
)
def test_user_page_pagination(page, limit, total, has_more, page_count):
    user_page = UserPage(items=(), page=page, limit=limit, total=total)
    assert user_page.has_more is has_more
    assert user_page.page_count == page_count


def test_user_page_converts_items_to_tuple():
    user_page = UserPage(items=[make_preview("1")], page=0, limit=1, total=1)
    assert user_page.items == (make_preview("1"),)
    assert len(user_page) == 1


def test_user_page_rejects_negative_values():
    with pytest.raises(ValueError):
        UserPage(page=-1)


def test_user_detail_id_and_email_are_immutable():
    user = make_detail("1")
    assert user.with_changes(first_name="Jack").first_name == "Jack"
    assert user.with_changes(email=user.email).email == user.email
    with pytest.raises(ValueError):
        user.with_changes(email="other@example.com")
    with pytest.raises(ValueError):
        user.with_changes(id="2")


def test_user_names():
    preview = make_detail("7", title="mrs", first_name="Ann", last_name="Lee").to_preview()
    assert preview.id == "7"
    assert preview.full_name == "Ann Lee"
    assert preview.display_name == "Mrs. Ann Lee"


def test_operation_result_variants_are_exclusive():
    variants = [Success(1), Error("boom"), Loading()]
    flags = [(v.is_success, v.is_error, v.is_loading) for v in variants]
    assert flags == [(True, False, False), (False, True, False), (False, False, True)]
    assert str(Error("boom")) == "boom"
