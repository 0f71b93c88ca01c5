"""
Application Entity

A tenant's formal request to rent a property.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import ApplicationStatus

TERMINAL_APPLICATION_STATUSES = (ApplicationStatus.accepted, ApplicationStatus.declined)
DECIDABLE_APPLICATION_STATUSES = (
    ApplicationStatus.pending,
    ApplicationStatus.submitted,
    ApplicationStatus.pending_credit_check,
)


class Application(SQLModel, table=True):
    """
    Application entity - rental application for a property.

    Business Rules:
    - At most one active (not superseded) application per (tenant, property)
    - Resubmission supersedes the previous row instead of deleting it
    - accepted and declined are terminal
    """

    __tablename__ = "applications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    tenant_id: UUID = Field(nullable=False, index=True)
    landlord_id: UUID = Field(nullable=False, index=True)
    property_id: UUID = Field(nullable=False, index=True)
    invite_id: Optional[UUID] = Field(default=None)

    status: ApplicationStatus = Field(default=ApplicationStatus.submitted)

    superseded_by_id: Optional[UUID] = Field(default=None)
    superseded_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_application_tenant_property", "tenant_id", "property_id"),
        Index("idx_application_status", "status"),
    )
