"""
Slot Ledger DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import ViewingSlot


class SlotResponse(BaseModel):
    """Viewing slot as returned to clients"""

    id: str
    property_id: str
    landlord_id: str
    start_time: str
    end_time: str
    status: str
    booked_by_tenant_id: Optional[str] = None

    @classmethod
    def from_entity(cls, slot: ViewingSlot) -> "SlotResponse":
        return cls(
            id=str(slot.id),
            property_id=str(slot.property_id),
            landlord_id=str(slot.landlord_id),
            start_time=slot.start_time.isoformat(),
            end_time=slot.end_time.isoformat(),
            status=slot.status.value,
            booked_by_tenant_id=str(slot.booked_by_tenant_id) if slot.booked_by_tenant_id else None,
        )


class SlotListResponse(BaseModel):
    slots: List[SlotResponse]


class BookingResponse(BaseModel):
    """Result of book / reschedule"""

    slot: SlotResponse
    viewing_id: Optional[str] = None
    warnings: List[str] = []


class CancelBookingResponse(BaseModel):
    status: str
    slot_id: str
    warnings: List[str] = []


class ActiveBookingResponse(BaseModel):
    has_booking: bool
    slot: Optional[SlotResponse] = None
