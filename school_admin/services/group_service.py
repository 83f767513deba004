# school_admin/services/group_service.py
import logging
from typing import Any, Dict, List

from .base_service import BaseService
from ..core.exceptions import ValidationError
from ..models.group import GROUPS, AcademicLevel, Group
from ..schemas.filters import GroupFilters
from ..utils.filtering import Contains, Equals, Flag, TextSearch, WhenTrue

logger = logging.getLogger(__name__)


def has_room(group: Group) -> bool:
    return (group.students_count or 0) < group.max_students


class GroupService(BaseService[Group]):
    resource = GROUPS
    filter_model = GroupFilters
    rules = {
        "search_text": TextSearch(("name", "grade", "academic_year")),
        "academic_level": Equals("academic_level"),
        "grade": Contains("grade"),
        "name": Contains("name"),
        "academic_year": Equals("academic_year"),
        "is_active": Flag("is_active"),
        "available_only": WhenTrue(has_room),
    }
    sortable = (
        "academic_level", "grade", "name", "academic_year", "max_students",
        "students_count", "is_active", "public_id",
    )

    async def by_level_and_grade(self, academic_level: AcademicLevel, grade: str) -> List[Group]:
        filters = GroupFilters(academic_level=academic_level, grade=grade)
        groups = await self.search_all(filters)
        # grade filter is a substring match; this lookup wants the exact grade
        return [g for g in groups if g.grade == grade]

    async def available_groups(self, academic_level: AcademicLevel, grade: str) -> List[Group]:
        groups = await self.by_level_and_grade(academic_level, grade)
        return [g for g in groups if has_room(g)]

    async def update_student_count(self, public_id: str, increment: int) -> Group:
        """Shift the enrolled-students counter, never below zero."""
        if not isinstance(increment, int) or isinstance(increment, bool):
            raise ValidationError("increment must be an integer", field="increment")

        def compute(current: Group) -> Dict[str, Any]:
            return {"students_count": max(0, current.students_count + increment)}

        group = await self.source.apply_action(
            self.resource, public_id, "student-count", compute, body={"increment": increment}
        )
        if group.is_full:
            logger.warning(f"Group {group.public_id} is full ({group.students_count}/{group.max_students})")
        return group

    async def stats(self) -> Dict[str, Any]:
        groups = await self.search_all(GroupFilters(include_inactive=True))
        total_students = sum(g.students_count for g in groups)
        total_capacity = sum(g.max_students for g in groups)
        occupancy = (total_students / total_capacity) * 100 if total_capacity > 0 else 0
        return {
            "totalGroups": len(groups),
            "totalStudents": total_students,
            "fullGroups": sum(1 for g in groups if g.is_full),
            "averageOccupancy": round(occupancy, 2),
        }
