"""
Tenancy/Lease DTOs (Data Transfer Objects)
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities import Tenancy


class LeaseClause(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    body: str = Field(min_length=1, max_length=5000)


class LeaseTermsInput(BaseModel):
    monthly_rent: Decimal
    security_deposit: Decimal = Decimal("0")
    start_date: date
    end_date: Optional[date] = None
    custom_clauses: List[LeaseClause] = []


class TenancyResponse(BaseModel):
    id: str
    application_id: Optional[str] = None
    property_id: str
    landlord_id: str
    tenant_id: str
    monthly_rent: str
    security_deposit: str
    start_date: str
    end_date: Optional[str] = None
    lease_status: str
    lease_document_path: Optional[str] = None
    tenant_signed_at: Optional[str] = None
    landlord_signed_at: Optional[str] = None
    custom_clauses: List[LeaseClause] = []
    warnings: List[str] = []

    @classmethod
    def from_entity(cls, tenancy: Tenancy) -> "TenancyResponse":
        return cls(
            id=str(tenancy.id),
            application_id=str(tenancy.application_id) if tenancy.application_id else None,
            property_id=str(tenancy.property_id),
            landlord_id=str(tenancy.landlord_id),
            tenant_id=str(tenancy.tenant_id),
            monthly_rent=str(tenancy.monthly_rent),
            security_deposit=str(tenancy.security_deposit),
            start_date=tenancy.start_date.isoformat(),
            end_date=tenancy.end_date.isoformat() if tenancy.end_date else None,
            lease_status=tenancy.lease_status.value,
            lease_document_path=tenancy.lease_document_path,
            tenant_signed_at=tenancy.tenant_signed_at.isoformat() if tenancy.tenant_signed_at else None,
            landlord_signed_at=(
                tenancy.landlord_signed_at.isoformat() if tenancy.landlord_signed_at else None
            ),
            custom_clauses=[LeaseClause(**c) for c in tenancy.custom_clauses or []],
        )


class TenancyListResponse(BaseModel):
    tenancies: List[TenancyResponse]
