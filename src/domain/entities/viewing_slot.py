"""
ViewingSlot Entity

Landlord-defined time windows during which a property can be viewed.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import SlotStatus


class ViewingSlot(SQLModel, table=True):
    """
    ViewingSlot entity - a bookable viewing window for a property.

    Business Rules:
    - Created by the landlord, end_time must be after start_time
    - status=booked implies booked_by_tenant_id is set
    - Booking is a conditional update on status=available (no double-booking)
    """

    __tablename__ = "viewing_slots"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    property_id: UUID = Field(nullable=False, index=True)
    landlord_id: UUID = Field(nullable=False, index=True)

    start_time: datetime = Field(sa_column=Column(DateTime, nullable=False))
    end_time: datetime = Field(sa_column=Column(DateTime, nullable=False))

    status: SlotStatus = Field(default=SlotStatus.available)
    booked_by_tenant_id: Optional[UUID] = Field(default=None, index=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_slot_property_status_start", "property_id", "status", "start_time"),
        Index("idx_slot_tenant_property", "booked_by_tenant_id", "property_id"),
    )
