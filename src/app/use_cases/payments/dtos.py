"""
Payment DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Payment


class PaymentResponse(BaseModel):
    id: str
    tenancy_id: str
    payment_type: str
    amount: str
    reference: str
    status: str
    paid_at: Optional[str] = None

    @classmethod
    def from_entity(cls, payment: Payment) -> "PaymentResponse":
        return cls(
            id=str(payment.id),
            tenancy_id=str(payment.tenancy_id),
            payment_type=payment.payment_type.value,
            amount=str(payment.amount),
            reference=payment.reference,
            status=payment.status.value,
            paid_at=payment.paid_at.isoformat() if payment.paid_at else None,
        )


class InitialPaymentResponse(BaseModel):
    reference: str
    checkout_url: str
    total_amount: str
    payments: List[PaymentResponse]


class PaymentEventResponse(BaseModel):
    reference: str
    payments: List[PaymentResponse]
    warnings: List[str] = []


class PaymentListResponse(BaseModel):
    payments: List[PaymentResponse]
