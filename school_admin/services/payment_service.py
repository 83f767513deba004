# school_admin/services/payment_service.py
from typing import List

from .base_service import BaseService
from ..models.payment import PAYMENTS, Payment
from ..schemas.filters import PaymentFilters
from ..utils.filtering import Equals, Predicate, TextSearch


def due_on_or_after(payment: Payment, start) -> bool:
    return payment.due_date >= start


def due_on_or_before(payment: Payment, end) -> bool:
    return payment.due_date <= end


class PaymentService(BaseService[Payment]):
    resource = PAYMENTS
    filter_model = PaymentFilters
    rules = {
        "search_text": TextSearch(("description", "period")),
        "status": Equals("status"),
        "payment_method": Equals("payment_method"),
        "student_public_id": Equals("student_public_id"),
        "date_from": Predicate(due_on_or_after),
        "date_to": Predicate(due_on_or_before),
    }
    sortable = (
        "amount", "payment_date", "due_date", "status", "payment_method",
        "period", "student_public_id", "public_id",
    )

    async def by_student(self, student_public_id: str) -> List[Payment]:
        return await self.search_all(PaymentFilters(student_public_id=student_public_id))
