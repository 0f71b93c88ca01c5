"""
Viewing Entity

Tracks one tenant's viewing engagement for one property.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import ViewingStatus


class Viewing(SQLModel, table=True):
    """
    Viewing entity - requested -> scheduled -> completed -> confirmed -> application sent.

    Business Rules:
    - viewing_confirmed implies status=completed and completed_at is set
    - application_sent implies viewing_confirmed
    - Flags are monotonic: once set they are never unset
    - completed and cancelled are terminal statuses
    """

    __tablename__ = "viewings"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    property_id: UUID = Field(nullable=False, index=True)
    landlord_id: UUID = Field(nullable=False, index=True)
    tenant_id: UUID = Field(nullable=False, index=True)
    conversation_id: Optional[UUID] = Field(default=None)
    slot_id: Optional[UUID] = Field(default=None, index=True)

    scheduled_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    status: ViewingStatus = Field(default=ViewingStatus.requested)
    completed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    viewing_confirmed: bool = Field(default=False)
    application_sent: bool = Field(default=False)

    notes: Optional[str] = Field(default=None, max_length=2000)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_viewing_property_tenant", "property_id", "tenant_id"),
        Index("idx_viewing_status", "status"),
    )
