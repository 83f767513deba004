# school_admin/models/enrollment.py
import enum
from datetime import date
from typing import Dict, Optional, Tuple

from pydantic import Field

from .base import ActiveRecord, Resource


class EnrollmentStatus(str, enum.Enum):
    PENDIENTE = "PENDIENTE"
    CONFIRMADA = "CONFIRMADA"
    COMPLETADA = "COMPLETADA"
    CANCELADA = "CANCELADA"


# (action, current status) -> next status
ENROLLMENT_TRANSITIONS: Dict[Tuple[str, EnrollmentStatus], EnrollmentStatus] = {
    ("confirm", EnrollmentStatus.PENDIENTE): EnrollmentStatus.CONFIRMADA,
    ("cancel", EnrollmentStatus.PENDIENTE): EnrollmentStatus.CANCELADA,
    ("complete", EnrollmentStatus.CONFIRMADA): EnrollmentStatus.COMPLETADA,
    ("cancel", EnrollmentStatus.CONFIRMADA): EnrollmentStatus.CANCELADA,
}

ENROLLMENT_ACTIONS = frozenset(action for action, _ in ENROLLMENT_TRANSITIONS)


class Enrollment(ActiveRecord):
    student_public_id: str
    student_full_name: Optional[str] = None
    group_public_id: str
    group_full_name: Optional[str] = None
    enrollment_date: date
    academic_year: str
    enrollment_fee: float = Field(default=0, ge=0)
    status: EnrollmentStatus = EnrollmentStatus.PENDIENTE
    notes: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.status in (EnrollmentStatus.COMPLETADA, EnrollmentStatus.CANCELADA)


def next_status(current: EnrollmentStatus, action: str) -> Optional[EnrollmentStatus]:
    """Target status for ``action`` from ``current``, or None when not allowed."""
    return ENROLLMENT_TRANSITIONS.get((action, current))


ENROLLMENTS = Resource(name="enrollments", label="Enrollment", model=Enrollment, id_prefix="enr")
