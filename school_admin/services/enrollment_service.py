# school_admin/services/enrollment_service.py
"""Enrollments and their status lifecycle.

PENDIENTE -> CONFIRMADA (confirm) -> COMPLETADA (complete). PENDIENTE and
CONFIRMADA can also be cancelled, which deactivates the enrollment.
COMPLETADA and CANCELADA are terminal.
"""
import logging
from typing import Any, Dict, List

from .base_service import BaseService
from ..core.exceptions import InvalidStateTransition, ValidationError
from ..models.enrollment import (
    ENROLLMENT_ACTIONS,
    ENROLLMENTS,
    Enrollment,
    EnrollmentStatus,
    next_status,
)
from ..schemas.filters import EnrollmentFilters
from ..utils.filtering import Equals, Flag, TextSearch

logger = logging.getLogger(__name__)


class EnrollmentService(BaseService[Enrollment]):
    resource = ENROLLMENTS
    filter_model = EnrollmentFilters
    rules = {
        "search_text": TextSearch(("student_full_name", "group_full_name", "academic_year")),
        "status": Equals("status"),
        "academic_year": Equals("academic_year"),
        "group_public_id": Equals("group_public_id"),
        "student_public_id": Equals("student_public_id"),
        "is_active": Flag("is_active"),
    }
    sortable = (
        "student_full_name", "group_full_name", "enrollment_date", "academic_year",
        "enrollment_fee", "status", "is_active", "public_id",
    )

    async def by_student(self, student_public_id: str) -> List[Enrollment]:
        return await self.search_all(
            EnrollmentFilters(student_public_id=student_public_id, include_inactive=True)
        )

    async def by_group(self, group_public_id: str) -> List[Enrollment]:
        return await self.search_all(
            EnrollmentFilters(group_public_id=group_public_id, include_inactive=True)
        )

    async def count_by_status(self, status: EnrollmentStatus) -> int:
        return await self.count(EnrollmentFilters(status=status, include_inactive=True))

    async def count_by_academic_year(self, academic_year: str) -> int:
        return await self.count(EnrollmentFilters(academic_year=academic_year, include_inactive=True))

    @staticmethod
    def _status(value: Any) -> EnrollmentStatus:
        try:
            return EnrollmentStatus(value)
        except ValueError as e:
            raise ValidationError(f"Unknown enrollment status: {value}", field="status") from e

    async def _guard_lifecycle(self, public_id: str, payload, full: bool) -> Dict[str, Any]:
        """Status only moves through confirm/complete/cancel; cancelled stays inactive."""
        data = self._normalize(payload, target=public_id)
        current = await self.get_by_id(public_id)
        if current is None:
            # The data source reports the missing record
            return data

        if full:
            # A replace keeps the lifecycle fields it leaves out
            data.setdefault("status", current.status)
            data.setdefault("is_active", current.is_active)

        if "status" in data:
            requested = self._status(data["status"])
            if requested is not current.status:
                raise InvalidStateTransition(current.status.value, f"set status to {requested.value}")

        reactivate = data.get("is_active")
        if current.status is EnrollmentStatus.CANCELADA and reactivate is not None and reactivate is not False:
            raise InvalidStateTransition(current.status.value, "reactivate")
        return data

    async def create(self, payload) -> Enrollment:
        """New enrollments always start PENDIENTE."""
        data = self._normalize(payload)
        if "status" in data:
            requested = self._status(data["status"])
            if requested is not EnrollmentStatus.PENDIENTE:
                raise InvalidStateTransition(
                    EnrollmentStatus.PENDIENTE.value,
                    f"create as {requested.value}",
                    message=f"New enrollments start as PENDIENTE, not {requested.value}",
                )
        return await super().create(data)

    async def update(self, public_id: str, changes) -> Enrollment:
        data = await self._guard_lifecycle(public_id, changes, full=False)
        return await super().update(public_id, data)

    async def replace(self, public_id: str, payload) -> Enrollment:
        data = await self._guard_lifecycle(public_id, payload, full=True)
        return await super().replace(public_id, data)

    async def transition(self, public_id: str, action: str) -> Enrollment:
        if action not in ENROLLMENT_ACTIONS:
            raise ValidationError(f"Unknown enrollment action: {action}", field="action")

        def compute(current: Enrollment) -> Dict[str, Any]:
            target = next_status(current.status, action)
            if target is None:
                raise InvalidStateTransition(current.status.value, action)
            changes: Dict[str, Any] = {"status": target}
            if target is EnrollmentStatus.CANCELADA:
                changes["is_active"] = False
            return changes

        enrollment = await self.source.apply_action(self.resource, public_id, action, compute)
        logger.info(f"Enrollment {public_id} -> {enrollment.status.value}")
        return enrollment

    async def confirm(self, public_id: str) -> Enrollment:
        return await self.transition(public_id, "confirm")

    async def complete(self, public_id: str) -> Enrollment:
        return await self.transition(public_id, "complete")

    async def cancel(self, public_id: str) -> Enrollment:
        return await self.transition(public_id, "cancel")
