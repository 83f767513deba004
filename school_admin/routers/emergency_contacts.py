# school_admin/routers/emergency_contacts.py
from fastapi import APIRouter

from .crud import add_crud_routes

router = APIRouter(prefix="/emergency-contacts", tags=["Emergency Contacts"])

add_crud_routes(router, lambda services: services.emergency_contacts)
