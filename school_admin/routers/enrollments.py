# school_admin/routers/enrollments.py
from fastapi import APIRouter, Depends, Query

from .crud import add_crud_routes
from ..core.deps import get_services
from ..models.enrollment import EnrollmentStatus
from ..services import Services

router = APIRouter(prefix="/enrollments", tags=["Enrollments"])


@router.get("/stats/count-by-status", response_model=int)
async def count_enrollments_by_status(
    status: EnrollmentStatus = Query(...),
    services: Services = Depends(get_services)
):
    return await services.enrollments.count_by_status(status)


@router.get("/stats/count-by-year", response_model=int)
async def count_enrollments_by_year(
    academic_year: str = Query(..., alias="academicYear"),
    services: Services = Depends(get_services)
):
    return await services.enrollments.count_by_academic_year(academic_year)


@router.get("/student/{student_public_id}", response_model=list)
async def get_enrollments_by_student(student_public_id: str, services: Services = Depends(get_services)):
    enrollments = await services.enrollments.by_student(student_public_id)
    return [enrollment.to_wire() for enrollment in enrollments]


@router.get("/group/{group_public_id}", response_model=list)
async def get_enrollments_by_group(group_public_id: str, services: Services = Depends(get_services)):
    enrollments = await services.enrollments.by_group(group_public_id)
    return [enrollment.to_wire() for enrollment in enrollments]


@router.patch("/{public_id}/confirm", response_model=dict)
async def confirm_enrollment(public_id: str, services: Services = Depends(get_services)):
    """PENDIENTE -> CONFIRMADA"""
    enrollment = await services.enrollments.confirm(public_id)
    return enrollment.to_wire()


@router.patch("/{public_id}/complete", response_model=dict)
async def complete_enrollment(public_id: str, services: Services = Depends(get_services)):
    """CONFIRMADA -> COMPLETADA"""
    enrollment = await services.enrollments.complete(public_id)
    return enrollment.to_wire()


@router.patch("/{public_id}/cancel", response_model=dict)
async def cancel_enrollment(public_id: str, services: Services = Depends(get_services)):
    """PENDIENTE or CONFIRMADA -> CANCELADA, and deactivates the enrollment"""
    enrollment = await services.enrollments.cancel(public_id)
    return enrollment.to_wire()


add_crud_routes(router, lambda services: services.enrollments)
