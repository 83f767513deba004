# school_admin/models/__init__.py
"""Entity records and their storage descriptors."""
from .base import Record, ActiveRecord, TimestampedRecord, Resource
from .student import Student, RelationshipRef, STUDENTS
from .contact import ContactPerson, Tutor, EmergencyContact, TUTORS, EMERGENCY_CONTACTS
from .group import Group, AcademicLevel, GROUPS
from .enrollment import Enrollment, EnrollmentStatus, ENROLLMENTS, next_status
from .payment import Payment, PaymentMethod, PaymentStatus, PeriodType, PAYMENTS
from .grade import Grade, GRADES

ALL_RESOURCES = (STUDENTS, TUTORS, EMERGENCY_CONTACTS, GROUPS, ENROLLMENTS, PAYMENTS, GRADES)

__all__ = [
    "Record",
    "ActiveRecord",
    "TimestampedRecord",
    "Resource",
    "Student",
    "RelationshipRef",
    "ContactPerson",
    "Tutor",
    "EmergencyContact",
    "Group",
    "AcademicLevel",
    "Enrollment",
    "EnrollmentStatus",
    "next_status",
    "Payment",
    "PaymentMethod",
    "PaymentStatus",
    "PeriodType",
    "Grade",
    "STUDENTS",
    "TUTORS",
    "EMERGENCY_CONTACTS",
    "GROUPS",
    "ENROLLMENTS",
    "PAYMENTS",
    "GRADES",
    "ALL_RESOURCES",
]
