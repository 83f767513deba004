# school_admin/services/contact_service.py
"""Tutors and emergency contacts: same shape, soft-deleted."""
from .base_service import BaseService
from ..models.contact import EMERGENCY_CONTACTS, TUTORS, EmergencyContact, Tutor
from ..schemas.filters import EmergencyContactFilters, TutorFilters
from ..utils.filtering import Equals, Flag, TextSearch

CONTACT_SORTABLE = (
    "first_name", "last_name", "email", "phone", "relationship", "document_number",
    "created_at", "updated_at", "is_active", "public_id",
)


class TutorService(BaseService[Tutor]):
    resource = TUTORS
    filter_model = TutorFilters
    rules = {
        "search_text": TextSearch(("first_name", "last_name", "email", "phone", "document_number")),
        "relationship": Equals("relationship"),
        "is_active": Flag("is_active"),
    }
    sortable = CONTACT_SORTABLE


class EmergencyContactService(BaseService[EmergencyContact]):
    resource = EMERGENCY_CONTACTS
    filter_model = EmergencyContactFilters
    rules = {
        "search_text": TextSearch(
            ("first_name", "last_name", "email", "phone", "document_number", "relationship")
        ),
        "relationship": Equals("relationship"),
        "is_active": Flag("is_active"),
    }
    sortable = CONTACT_SORTABLE
