# school_admin/routers/grades.py
from fastapi import APIRouter

from .crud import add_crud_routes

router = APIRouter(prefix="/grades", tags=["Grades"])

add_crud_routes(router, lambda services: services.grades, read_only=True)
