# school_admin/schemas/filters.py
"""Sparse filter objects. Every field is optional; None means no constraint."""
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from ..models.enrollment import EnrollmentStatus
from ..models.group import AcademicLevel
from ..models.payment import PaymentMethod, PaymentStatus


class SearchFilters(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore')

    search_text: Optional[str] = None

    @field_validator('search_text')
    @classmethod
    def blank_search_is_absent(cls, v):
        if v is not None and not v.strip():
            return None
        return v

    def to_query(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_defaults=True)


class LifecycleFilters(SearchFilters):
    is_active: Optional[bool] = None
    # Inactive records are hidden unless is_active is set or this is True
    include_inactive: bool = False


class StudentFilters(LifecycleFilters):
    grade: Optional[str] = None
    section: Optional[str] = None


class ContactFilters(LifecycleFilters):
    relationship: Optional[str] = None


class TutorFilters(ContactFilters):
    pass


class EmergencyContactFilters(ContactFilters):
    pass


class GroupFilters(LifecycleFilters):
    academic_level: Optional[AcademicLevel] = None
    grade: Optional[str] = None
    name: Optional[str] = None
    academic_year: Optional[str] = None
    available_only: Optional[bool] = None


class EnrollmentFilters(LifecycleFilters):
    status: Optional[EnrollmentStatus] = None
    academic_year: Optional[str] = None
    group_public_id: Optional[str] = None
    student_public_id: Optional[str] = None


class PaymentFilters(SearchFilters):
    status: Optional[PaymentStatus] = None
    payment_method: Optional[PaymentMethod] = None
    student_public_id: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
