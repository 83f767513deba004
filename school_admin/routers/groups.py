# school_admin/routers/groups.py
from fastapi import APIRouter, Body, Depends, Query

from .crud import add_crud_routes
from ..core.deps import get_services
from ..models.group import AcademicLevel
from ..services import Services

router = APIRouter(prefix="/groups", tags=["Groups"])


@router.get("/stats", response_model=dict)
async def get_group_stats(services: Services = Depends(get_services)):
    """Totals, full groups and average occupancy"""
    return await services.groups.stats()


@router.get("/filter", response_model=list)
async def get_groups_by_level_and_grade(
    academic_level: AcademicLevel = Query(..., alias="academicLevel"),
    grade: str = Query(...),
    services: Services = Depends(get_services)
):
    groups = await services.groups.by_level_and_grade(academic_level, grade)
    return [group.to_wire() for group in groups]


@router.get("/available", response_model=list)
async def get_available_groups(
    academic_level: AcademicLevel = Query(..., alias="academicLevel"),
    grade: str = Query(...),
    services: Services = Depends(get_services)
):
    """Groups of a level and grade that still have room"""
    groups = await services.groups.available_groups(academic_level, grade)
    return [group.to_wire() for group in groups]


@router.patch("/{public_id}/student-count", response_model=dict)
async def update_group_student_count(
    public_id: str,
    increment: int = Body(..., embed=True),
    services: Services = Depends(get_services)
):
    group = await services.groups.update_student_count(public_id, increment)
    return group.to_wire()


add_crud_routes(router, lambda services: services.groups)
