# school_admin/services/dashboard_service.py
from typing import Any, Dict

from .payment_service import PaymentService
from .student_service import StudentService
from ..models.payment import PaymentStatus
from ..schemas.filters import PaymentFilters, StudentFilters


class DashboardService:
    def __init__(self, students: StudentService, payments: PaymentService):
        self.students = students
        self.payments = payments

    async def stats(self) -> Dict[str, Any]:
        """Headline numbers for the dashboard."""
        total_students = await self.students.count(StudentFilters(include_inactive=True))
        active_students = await self.students.count(StudentFilters(is_active=True))
        paid = await self.payments.search_all(PaymentFilters(status=PaymentStatus.PAGADO))
        pending = await self.payments.search_all(PaymentFilters(status=PaymentStatus.PENDIENTE))

        return {
            "totalStudents": total_students,
            "activeStudents": active_students,
            "totalPayments": len(paid),
            "pendingPayments": len(pending),
            "monthlyRevenue": sum(p.amount for p in paid),
            "unpaidAmount": sum(p.amount for p in pending),
        }
