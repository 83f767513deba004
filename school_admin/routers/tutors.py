# school_admin/routers/tutors.py
from fastapi import APIRouter

from .crud import add_crud_routes

router = APIRouter(prefix="/tutors", tags=["Tutors"])

add_crud_routes(router, lambda services: services.tutors)
