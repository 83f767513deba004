# school_admin/models/student.py
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from .base import ActiveRecord, Resource


class RelationshipRef(BaseModel):
    """Pointer from one record to another by public id, with a label like "Madre"."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    public_id: str
    relationship: Optional[str] = None


class Student(ActiveRecord):
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: date
    grade: str
    section: str
    parent_name: Optional[str] = None
    parent_phone: Optional[str] = None
    parent_email: Optional[str] = None
    address: str
    enrollment_date: Optional[date] = None

    # Related tutors and emergency contacts, resolved on demand
    tutors: List[RelationshipRef] = []
    emergency_contacts: List[RelationshipRef] = []

    @field_validator('tutors', 'emergency_contacts')
    @classmethod
    def unique_references(cls, v):
        seen = set()
        for ref in v:
            if ref.public_id in seen:
                raise ValueError(f'{ref.public_id} is linked more than once')
            seen.add(ref.public_id)
        return v

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


STUDENTS = Resource(name="students", label="Student", model=Student, id_prefix="stu")
