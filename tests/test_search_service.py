"""Tests for the shared search pipeline over the in-memory store"""
from datetime import date

import pytest

from school_admin.core.exceptions import ValidationError
from school_admin.datasources import InMemoryStore
from school_admin.models import ENROLLMENTS, GROUPS
from school_admin.schemas.filters import GroupFilters, PaymentFilters, StudentFilters
from school_admin.schemas.pagination import PaginationParams
from school_admin.services import Services


@pytest.mark.asyncio
async def test_text_search_scenario(services: Services):
    page = await services.students.search(StudentFilters(search_text="ana"), PaginationParams(size=10))
    assert [s.full_name for s in page.content] == ["Ana García"]
    assert page.total_elements == 1
    assert page.total_pages == 1
    assert page.first and page.last


@pytest.mark.asyncio
async def test_accepts_plain_dicts(services: Services):
    page = await services.students.search({"grade": "segundo"}, {"page": 0, "size": 5})
    assert [s.public_id for s in page.content] == ["stu-002"]


@pytest.mark.asyncio
async def test_default_page_size(services: Services):
    page = await services.tutors.search()
    assert page.size == 10
    assert page.number == 0


@pytest.mark.asyncio
async def test_inactive_records_hidden_by_default(services: Services):
    visible = await services.groups.search_all()
    assert "grp-004" not in [g.public_id for g in visible]

    everything = await services.groups.search_all(GroupFilters(include_inactive=True))
    assert len(everything) == 5

    inactive = await services.groups.search_all(GroupFilters(is_active=False))
    assert [g.public_id for g in inactive] == ["grp-004"]


@pytest.mark.asyncio
async def test_available_only_scenario(empty_services: Services, empty_store: InMemoryStore):
    empty_store.seed(GROUPS, [
        {"academic_level": "Primaria", "grade": "Primero", "name": "A",
         "academic_year": "2024-2025", "max_students": 25, "students_count": 25},
        {"academic_level": "Primaria", "grade": "Primero", "name": "B",
         "academic_year": "2024-2025", "max_students": 25, "students_count": 24},
    ])
    available = await empty_services.groups.search_all(GroupFilters(available_only=True))
    assert [g.name for g in available] == ["B"]

    unconstrained = await empty_services.groups.search_all(GroupFilters(available_only=False))
    assert len(unconstrained) == 2


@pytest.mark.asyncio
async def test_sorting_by_wire_name(services: Services):
    page = await services.tutors.search(None, PaginationParams(sort_by="firstName", sort_dir="desc"))
    assert [t.first_name for t in page.content] == ["Pedro", "María", "Carmen"]


@pytest.mark.asyncio
async def test_unsorted_results_keep_source_order(services: Services):
    contacts = await services.emergency_contacts.search_all()
    assert [c.public_id for c in contacts] == ["ec-001", "ec-002", "ec-003", "ec-004"]


@pytest.mark.asyncio
async def test_unknown_sort_key_is_rejected(services: Services):
    with pytest.raises(ValidationError) as exc_info:
        await services.students.search(None, PaginationParams(sort_by="shoeSize"))
    assert exc_info.value.field == "sortBy"


@pytest.mark.asyncio
async def test_invalid_pagination_is_rejected(services: Services):
    with pytest.raises(ValidationError):
        await services.students.search(None, {"page": -1, "size": 10})


@pytest.mark.asyncio
async def test_invalid_filters_are_rejected(services: Services):
    with pytest.raises(ValidationError):
        await services.enrollments.search({"status": "PERDIDA"})


@pytest.mark.asyncio
async def test_twelve_enrollments_in_two_pages(empty_services: Services, empty_store: InMemoryStore):
    rows = [
        {
            "student_public_id": f"stu-{n:03d}",
            "group_public_id": "grp-001",
            "enrollment_date": "2024-08-20",
            "academic_year": "2024-2025",
        }
        for n in range(1, 13)
    ]
    empty_store.seed(ENROLLMENTS, rows)

    first = await empty_services.enrollments.search(None, PaginationParams.from_one_based(1, 10))
    assert len(first.content) == 10
    assert first.total_elements == 12
    assert first.total_pages == 2
    assert first.first is True and first.last is False

    second = await empty_services.enrollments.search(None, PaginationParams.from_one_based(2, 10))
    assert [e.student_public_id for e in second.content] == ["stu-011", "stu-012"]
    assert second.last is True


@pytest.mark.asyncio
async def test_payment_due_date_range(services: Services):
    payments = await services.payments.search_all(
        PaymentFilters(date_from=date(2025, 8, 1), date_to=date(2025, 8, 6))
    )
    assert [p.public_id for p in payments] == ["pay-003"]


@pytest.mark.asyncio
async def test_count_and_quick_search(services: Services):
    assert await services.students.count() == 2
    assert [s.public_id for s in await services.students.quick_search("lópez")] == ["stu-002"]


@pytest.mark.asyncio
async def test_search_never_mutates_store(services: Services, store: InMemoryStore):
    before = [s.model_dump() for s in await store.all(services.students.resource)]
    page = await services.students.search(StudentFilters(search_text="a"), PaginationParams(sort_by="lastName"))
    page.content[0].first_name = "Changed"
    after = [s.model_dump() for s in await store.all(services.students.resource)]
    assert before == after
