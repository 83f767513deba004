# school_admin/routers/payments.py
from fastapi import APIRouter, Depends

from .crud import add_crud_routes
from ..core.deps import get_services
from ..services import Services

router = APIRouter(prefix="/payments", tags=["Payments"])


@router.get("/student/{student_public_id}", response_model=list)
async def get_payments_by_student(student_public_id: str, services: Services = Depends(get_services)):
    payments = await services.payments.by_student(student_public_id)
    return [payment.to_wire() for payment in payments]


add_crud_routes(router, lambda services: services.payments)
