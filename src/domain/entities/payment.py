"""
Payment Entity

Status bookkeeping for gateway-initiated payments.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import PaymentStatus, PaymentType


class Payment(SQLModel, table=True):
    """
    Payment entity - one row per (tenancy, payment_type) charge.

    The gateway reports success asynchronously; reference maps the webhook
    event back to these rows.
    """

    __tablename__ = "payments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    tenancy_id: UUID = Field(nullable=False, index=True)
    payment_type: PaymentType = Field(nullable=False)
    amount: Decimal = Field(max_digits=12, decimal_places=2)
    reference: str = Field(max_length=128, index=True)

    status: PaymentStatus = Field(default=PaymentStatus.pending)
    paid_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_payment_tenancy_type", "tenancy_id", "payment_type"),)
