"""
Application Gate DTOs (Data Transfer Objects)
"""

from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from src.domain.entities import Application, ApplicationStatus


class ScreeningDocument(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    path: str = Field(min_length=1, max_length=500)


class ScreeningInput(BaseModel):
    """Tenant-global screening data sent with every application"""

    first_name: str = Field(min_length=1, max_length=100)
    middle_name: Optional[str] = Field(default=None, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=50)
    id_number: Optional[str] = Field(default=None, max_length=50)

    employment_status: str = Field(min_length=1, max_length=50)
    job_title: Optional[str] = Field(default=None, max_length=100)
    company_name: Optional[str] = Field(default=None, max_length=255)
    net_monthly_income: Optional[Decimal] = Field(default=None, ge=0)

    current_address: Optional[str] = Field(default=None, max_length=500)
    reason_for_moving: Optional[str] = Field(default=None, max_length=1000)
    previous_landlord_name: Optional[str] = Field(default=None, max_length=255)
    previous_landlord_contact: Optional[str] = Field(default=None, max_length=255)

    has_pets: bool = False
    pet_details: Optional[str] = Field(default=None, max_length=500)

    screening_consent: bool = False
    documents: List[ScreeningDocument] = []


class ApplicationAccessResponse(BaseModel):
    can_apply: bool
    via: Optional[Literal["viewing", "invite"]] = None
    invite_id: Optional[str] = None


class ApplicationResponse(BaseModel):
    id: str
    tenant_id: str
    landlord_id: str
    property_id: str
    invite_id: Optional[str] = None
    status: str
    created_at: str
    updated_at: str
    warnings: List[str] = []

    @classmethod
    def from_entity(cls, application: Application) -> "ApplicationResponse":
        return cls(
            id=str(application.id),
            tenant_id=str(application.tenant_id),
            landlord_id=str(application.landlord_id),
            property_id=str(application.property_id),
            invite_id=str(application.invite_id) if application.invite_id else None,
            status=application.status.value,
            created_at=application.created_at.isoformat(),
            updated_at=application.updated_at.isoformat(),
        )


class ApplicationListResponse(BaseModel):
    applications: List[ApplicationResponse]


class UpdateApplicationStatusRequest(BaseModel):
    status: ApplicationStatus
