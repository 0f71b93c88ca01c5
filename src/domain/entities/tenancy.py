"""
Tenancy Entity

The lease record created once an application is accepted.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import LeaseStatus


class Tenancy(SQLModel, table=True):
    """
    Tenancy entity - lease terms and the dual-signature status machine.

    Business Rules:
    - draft -> awaiting_tenant_signature -> awaiting_landlord_signature -> completed
    - No regression and no skipping
    - completed implies both signature timestamps are set
    - custom_clauses holds a list of {"title", "body"} records
    - At most one tenancy per application
    """

    __tablename__ = "tenancies"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    application_id: Optional[UUID] = Field(default=None, unique=True, index=True)
    property_id: UUID = Field(nullable=False, index=True)
    landlord_id: UUID = Field(nullable=False, index=True)
    tenant_id: UUID = Field(nullable=False, index=True)

    monthly_rent: Decimal = Field(max_digits=12, decimal_places=2)
    security_deposit: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    start_date: date
    end_date: Optional[date] = Field(default=None)

    lease_status: LeaseStatus = Field(default=LeaseStatus.draft)
    lease_document_path: Optional[str] = Field(default=None, max_length=500)
    tenant_signed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    landlord_signed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    custom_clauses: list = Field(default_factory=list, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_tenancy_parties", "landlord_id", "tenant_id", "property_id"),
        Index("idx_tenancy_lease_status", "lease_status"),
    )

    @property
    def initial_payment_total(self) -> Decimal:
        return Decimal(self.monthly_rent) + Decimal(self.security_deposit or 0)
