# school_admin/models/contact.py
"""Tutors and emergency contacts share the same shape and are soft-deleted."""
from typing import Optional

from .base import Resource, TimestampedRecord


class ContactPerson(TimestampedRecord):
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: str
    address: Optional[str] = None
    relationship: str
    document_number: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Tutor(ContactPerson):
    pass


class EmergencyContact(ContactPerson):
    pass


TUTORS = Resource(name="tutors", label="Tutor", model=Tutor, id_prefix="tut", soft_delete=True)
EMERGENCY_CONTACTS = Resource(
    name="emergency-contacts",
    label="Emergency contact",
    model=EmergencyContact,
    id_prefix="ec",
    soft_delete=True,
)
