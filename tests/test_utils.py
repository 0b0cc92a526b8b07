import pytest

from app.utils.casing import to_camel_case, to_snake_case
from app.utils.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, validate_pagination


@pytest.mark.parametrize(
    "page, page_size, expected",
    [
        (None, None, (1, DEFAULT_PAGE_SIZE)),
        (0, 0, (1, DEFAULT_PAGE_SIZE)),
        (-2, -5, (1, DEFAULT_PAGE_SIZE)),
        (3, 1, (3, 1)),
        (1, 101, (1, MAX_PAGE_SIZE)),
        (7, 100, (7, 100)),
    ],
)
def test_validate_pagination(page, page_size, expected):
    assert validate_pagination(page, page_size) == expected


def test_to_camel_case_nested():
    payload = {
        "continent_id": 4,
        "continent": {"created_at": "now"},
        "items": [{"department_id": 1}],
    }

    assert to_camel_case(payload) == {
        "continentId": 4,
        "continent": {"createdAt": "now"},
        "items": [{"departmentId": 1}],
    }


def test_to_snake_case_nested():
    assert to_snake_case([{"cityId": 1, "meta": {"pageSize": 2}}]) == [
        {"city_id": 1, "meta": {"page_size": 2}}
    ]


def test_casing_leaves_values_alone():
    assert to_camel_case({"name": "snake_case value"}) == {"name": "snake_case value"}
    assert to_snake_case("camelCase") == "camelCase"
    assert to_camel_case(None) is None
