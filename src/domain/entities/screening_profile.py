"""
ScreeningProfile Entity

Tenant-global screening data, reused across every application.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlmodel import JSON, Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class ScreeningProfile(SQLModel, table=True):
    """
    ScreeningProfile entity - one row per tenant, upserted on every submission.

    documents holds a list of {"title", "path"} records.
    """

    __tablename__ = "screening_profiles"

    user_id: UUID = Field(primary_key=True)

    first_name: str = Field(max_length=100)
    middle_name: Optional[str] = Field(default=None, max_length=100)
    last_name: str = Field(max_length=100)
    phone: Optional[str] = Field(default=None, max_length=50)
    id_number: Optional[str] = Field(default=None, max_length=50)

    employment_status: str = Field(max_length=50)
    job_title: Optional[str] = Field(default=None, max_length=100)
    company_name: Optional[str] = Field(default=None, max_length=255)
    net_monthly_income: Optional[Decimal] = Field(default=None, max_digits=12, decimal_places=2)

    current_address: Optional[str] = Field(default=None, max_length=500)
    reason_for_moving: Optional[str] = Field(default=None, max_length=1000)
    previous_landlord_name: Optional[str] = Field(default=None, max_length=255)
    previous_landlord_contact: Optional[str] = Field(default=None, max_length=255)

    has_pets: bool = Field(default=False)
    pet_details: Optional[str] = Field(default=None, max_length=500)

    screening_consent: bool = Field(default=False)
    screening_consent_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    documents: list = Field(default_factory=list, sa_column=Column(JSON))

    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
