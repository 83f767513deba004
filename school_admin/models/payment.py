# school_admin/models/payment.py
import enum
from datetime import date
from typing import Optional

from pydantic import Field

from .base import Record, Resource


class PaymentMethod(str, enum.Enum):
    EFECTIVO = "efectivo"
    TRANSFERENCIA = "transferencia"
    TARJETA = "tarjeta"


class PaymentStatus(str, enum.Enum):
    PENDIENTE = "pendiente"
    PAGADO = "pagado"
    VENCIDO = "vencido"


class PeriodType(str, enum.Enum):
    DIARIO = "diario"
    SEMANAL = "semanal"
    MENSUAL = "mensual"


class Payment(Record):
    student_public_id: str
    amount: float = Field(..., ge=0)
    payment_date: Optional[date] = None
    description: str
    payment_method: PaymentMethod
    status: PaymentStatus = PaymentStatus.PENDIENTE
    due_date: date
    period: str  # e.g. "Enero 2025", "Semana 1 de Agosto 2025"
    period_type: Optional[PeriodType] = None


PAYMENTS = Resource(name="payments", label="Payment", model=Payment, id_prefix="pay")
