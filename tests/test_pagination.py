"""Tests for page slicing and pagination params"""
import pytest
from pydantic import ValidationError as PydanticValidationError

from school_admin.schemas.pagination import PaginationParams
from school_admin.utils.pagination import Paginator


def test_twelve_items_in_pages_of_ten():
    items = list(range(12))

    first = Paginator.paginate(items, PaginationParams(page=0, size=10))
    assert first.content == list(range(10))
    assert first.total_elements == 12
    assert first.total_pages == 2
    assert first.first is True
    assert first.last is False

    second = Paginator.paginate(items, PaginationParams(page=1, size=10))
    assert second.content == [10, 11]
    assert second.first is False
    assert second.last is True


@pytest.mark.parametrize("total,size", [(0, 3), (1, 1), (7, 3), (9, 3), (25, 10)])
def test_pages_cover_every_item_once(total, size):
    items = list(range(total))
    params = PaginationParams(page=0, size=size)
    pages = Paginator.total_pages(total, size)

    collected = []
    for page in range(pages):
        result = Paginator.paginate(items, params.model_copy(update={"page": page}))
        assert result.total_pages == pages
        assert result.last == (page == pages - 1)
        collected.extend(result.content)
    assert collected == items


def test_empty_set():
    result = Paginator.paginate([], PaginationParams(page=0, size=10))
    assert result.content == []
    assert result.total_elements == 0
    assert result.total_pages == 0
    assert result.first is True
    assert result.last is True


def test_page_past_the_end_is_empty():
    result = Paginator.paginate(list(range(5)), PaginationParams(page=3, size=10))
    assert result.content == []
    assert result.last is True


def test_unpaginated_returns_single_page():
    result = Paginator.paginate(list(range(23)), PaginationParams(unpaginated=True))
    assert len(result.content) == 23
    assert result.total_pages == 1
    assert result.first and result.last


def test_params_reject_invalid_values():
    with pytest.raises(PydanticValidationError):
        PaginationParams(page=-1)
    with pytest.raises(PydanticValidationError):
        PaginationParams(size=0)
    with pytest.raises(PydanticValidationError):
        PaginationParams(sort_dir="sideways")


def test_one_based_page_numbers():
    assert PaginationParams.from_one_based(1, 10).page == 0
    assert PaginationParams.from_one_based(3, 5).page == 2
    assert PaginationParams.from_one_based(0).page == 0


def test_params_accept_camel_case_query():
    params = PaginationParams.model_validate({"page": "2", "size": "5", "sortBy": "lastName", "sortDir": "desc"})
    assert params.sort_by == "lastName"
    assert params.to_query() == {"page": 2, "size": 5, "sortBy": "lastName", "sortDir": "desc"}


def test_envelope_wire_shape():
    wire = Paginator.paginate([1, 2], PaginationParams(size=10)).to_wire()
    assert set(wire) == {"content", "totalElements", "totalPages", "number", "size", "first", "last"}
