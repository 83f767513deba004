"""Tests for the REST adapter, using the bundled API as its backend"""
import httpx
import pytest

from school_admin.core.exceptions import (
    InvalidStateTransition,
    NotFoundError,
    TransportError,
    ValidationError,
)
from school_admin.datasources import RemoteDataSource
from school_admin.models import GROUPS, STUDENTS, EnrollmentStatus
from school_admin.schemas.filters import GroupFilters, StudentFilters
from school_admin.schemas.pagination import PaginationParams
from school_admin.services import Services

from .payloads import enrollment_payload, student_payload


def failing_source(handler) -> RemoteDataSource:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://backend/api")
    return RemoteDataSource(client=client)


def test_requires_base_url_or_client():
    with pytest.raises(ValueError):
        RemoteDataSource()


@pytest.mark.asyncio
async def test_search_matches_local_pipeline(services: Services, remote_services: Services):
    filters = StudentFilters(search_text="a")
    pagination = PaginationParams(size=1, sort_by="lastName", sort_dir="desc")

    local = await services.students.search(filters, pagination)
    remote = await remote_services.students.search(filters, pagination)

    assert remote.to_wire() == local.to_wire()
    assert remote.content[0].full_name == "Carlos López"


@pytest.mark.asyncio
async def test_search_applies_lifecycle_default(remote_services: Services):
    groups = await remote_services.groups.search_all()
    assert len(groups) == 4

    everything = await remote_services.groups.search_all(GroupFilters(include_inactive=True))
    assert len(everything) == 5

    available = await remote_services.groups.search_all(GroupFilters(available_only=True))
    assert all(g.students_count < g.max_students for g in available)


@pytest.mark.asyncio
async def test_all_includes_inactive(remote: RemoteDataSource):
    groups = await remote.all(GROUPS)
    assert len(groups) == 5


@pytest.mark.asyncio
async def test_unknown_sort_key_fails_before_request(remote_services: Services):
    with pytest.raises(ValidationError):
        await remote_services.students.search(None, PaginationParams(sort_by="shoeSize"))


@pytest.mark.asyncio
async def test_get(remote_services: Services):
    student = await remote_services.students.get_by_id("stu-001")
    assert student.full_name == "Ana García"
    assert [ref.public_id for ref in student.tutors] == ["tut-001", "tut-003"]

    assert await remote_services.students.get_by_id("stu-404") is None


@pytest.mark.asyncio
async def test_crud_round_trip(remote_services: Services, services: Services):
    created = await remote_services.students.create(student_payload())
    assert created.public_id == "stu-003"

    updated = await remote_services.students.update(created.public_id, {"section": "C"})
    assert updated.section == "C"
    assert updated.first_name == "Lucía"

    replaced = await remote_services.students.replace(created.public_id, student_payload(grade="Segundo"))
    assert replaced.grade == "Segundo"
    assert replaced.section == "A"

    await remote_services.students.delete(created.public_id)
    assert await services.students.get_by_id(created.public_id) is None


@pytest.mark.asyncio
async def test_soft_delete_through_backend(remote_services: Services):
    await remote_services.tutors.delete("tut-001")
    tutor = await remote_services.tutors.get_by_id("tut-001")
    assert tutor.is_active is False


@pytest.mark.asyncio
async def test_error_mapping(remote_services: Services):
    with pytest.raises(NotFoundError):
        await remote_services.students.update("stu-404", {"section": "C"})
    with pytest.raises(NotFoundError):
        await remote_services.payments.delete("pay-404")
    with pytest.raises(ValidationError):
        await remote_services.groups.update("grp-001", {"maxStudents": 0})


@pytest.mark.asyncio
async def test_transitions(remote_services: Services):
    created = await remote_services.enrollments.create(enrollment_payload())
    confirmed = await remote_services.enrollments.confirm(created.public_id)
    assert confirmed.status is EnrollmentStatus.CONFIRMADA

    completed = await remote_services.enrollments.complete(created.public_id)
    assert completed.status is EnrollmentStatus.COMPLETADA

    with pytest.raises(InvalidStateTransition):
        await remote_services.enrollments.confirm(created.public_id)


@pytest.mark.asyncio
async def test_student_count_action(remote_services: Services):
    group = await remote_services.groups.update_student_count("grp-001", 3)
    assert group.students_count == 23


@pytest.mark.asyncio
async def test_connection_error_is_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    source = failing_source(handler)
    with pytest.raises(TransportError):
        await source.get(STUDENTS, "stu-001")
    await source.client.aclose()


@pytest.mark.asyncio
async def test_timeout_is_transport_error():
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    source = failing_source(handler)
    with pytest.raises(TransportError):
        await source.all(STUDENTS)
    await source.client.aclose()


@pytest.mark.asyncio
async def test_server_error_is_transport_error():
    source = failing_source(lambda request: httpx.Response(500, json={"error": "boom"}))
    with pytest.raises(TransportError) as exc_info:
        await source.delete(STUDENTS, "stu-001")
    assert "boom" in exc_info.value.message
    await source.client.aclose()


@pytest.mark.asyncio
async def test_malformed_page_is_transport_error():
    source = failing_source(lambda request: httpx.Response(200, json={"unexpected": True}))
    with pytest.raises(TransportError):
        await Services(source).students.search()
    await source.client.aclose()


@pytest.mark.asyncio
async def test_close_leaves_injected_client_open(remote: RemoteDataSource):
    await remote.close()
    assert not remote.client.is_closed
