# school_admin/routers/students.py
from fastapi import APIRouter, Depends, Query

from .crud import add_crud_routes
from ..core.deps import get_services
from ..core.exceptions import NotFoundError
from ..services import Services

router = APIRouter(prefix="/students", tags=["Students"])


@router.get("/search", response_model=list)
async def quick_search_students(
    q: str = Query(..., description="Text matched against names, email and parent name"),
    services: Services = Depends(get_services)
):
    """Unpaginated text search"""
    students = await services.students.quick_search(q)
    return [student.to_wire() for student in students]


@router.get("/{public_id}/tutors", response_model=list)
async def get_student_tutors(public_id: str, services: Services = Depends(get_services)):
    student = await services.students.get_by_id(public_id)
    if student is None:
        raise NotFoundError("Student", public_id)
    tutors = await services.tutors_of(student)
    return [tutor.to_wire() for tutor in tutors]


@router.get("/{public_id}/emergency-contacts", response_model=list)
async def get_student_emergency_contacts(public_id: str, services: Services = Depends(get_services)):
    student = await services.students.get_by_id(public_id)
    if student is None:
        raise NotFoundError("Student", public_id)
    contacts = await services.emergency_contacts_of(student)
    return [contact.to_wire() for contact in contacts]


add_crud_routes(router, lambda services: services.students)
