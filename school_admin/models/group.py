# school_admin/models/group.py
import enum

from pydantic import Field

from .base import ActiveRecord, Resource


class AcademicLevel(str, enum.Enum):
    MATERNAL = "Maternal"
    PREESCOLAR = "Preescolar"
    PRIMARIA = "Primaria"
    SECUNDARIA = "Secundaria"


class Group(ActiveRecord):
    academic_level: AcademicLevel
    grade: str  # e.g. "Primero", "Segundo"
    name: str  # e.g. "A", "B"
    academic_year: str  # e.g. "2024-2025"
    max_students: int = Field(..., gt=0)
    students_count: int = Field(default=0, ge=0)

    @property
    def is_full(self) -> bool:
        # Soft business rule, only surfaced as a warning
        return self.students_count >= self.max_students

    @property
    def full_name(self) -> str:
        return f"{self.grade} {self.name}"


GROUPS = Resource(name="groups", label="Group", model=Group, id_prefix="grp")
