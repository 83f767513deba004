# school_admin/services/__init__.py
from typing import List, MutableMapping, Optional

from .base_service import BaseService
from .contact_service import EmergencyContactService, TutorService
from .dashboard_service import DashboardService
from .enrollment_service import EnrollmentService
from .grade_service import GradeService
from .group_service import GroupService
from .payment_service import PaymentService
from .relationship_resolver import RelationshipResolver, Resolution
from .student_service import StudentService
from ..datasources.base import DataSource
from ..models import EmergencyContact, Student, Tutor


class Services:
    """Every entity service wired to one data source."""

    def __init__(self, source: DataSource):
        self.source = source
        self.students = StudentService(source)
        self.tutors = TutorService(source)
        self.emergency_contacts = EmergencyContactService(source)
        self.groups = GroupService(source)
        self.enrollments = EnrollmentService(source)
        self.payments = PaymentService(source)
        self.grades = GradeService(source)
        self.dashboard = DashboardService(self.students, self.payments)

    async def tutors_of(
        self, student: Student, cache: Optional[MutableMapping[str, Tutor]] = None
    ) -> List[Tutor]:
        return await RelationshipResolver(self.tutors).resolve_refs(student.tutors, cache)

    async def emergency_contacts_of(
        self, student: Student, cache: Optional[MutableMapping[str, EmergencyContact]] = None
    ) -> List[EmergencyContact]:
        return await RelationshipResolver(self.emergency_contacts).resolve_refs(
            student.emergency_contacts, cache
        )

    async def close(self):
        await self.source.close()


__all__ = [
    "BaseService",
    "DashboardService",
    "EmergencyContactService",
    "EnrollmentService",
    "GradeService",
    "GroupService",
    "PaymentService",
    "RelationshipResolver",
    "Resolution",
    "Services",
    "StudentService",
    "TutorService",
]
