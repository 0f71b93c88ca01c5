"""
Viewing Tracker DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Viewing


class ViewingResponse(BaseModel):
    """Viewing as returned to clients"""

    id: str
    property_id: str
    landlord_id: str
    tenant_id: str
    conversation_id: Optional[str] = None
    slot_id: Optional[str] = None
    scheduled_date: Optional[str] = None
    status: str
    completed_at: Optional[str] = None
    viewing_confirmed: bool
    application_sent: bool
    notes: Optional[str] = None
    warnings: List[str] = []

    @classmethod
    def from_entity(cls, viewing: Viewing) -> "ViewingResponse":
        return cls(
            id=str(viewing.id),
            property_id=str(viewing.property_id),
            landlord_id=str(viewing.landlord_id),
            tenant_id=str(viewing.tenant_id),
            conversation_id=str(viewing.conversation_id) if viewing.conversation_id else None,
            slot_id=str(viewing.slot_id) if viewing.slot_id else None,
            scheduled_date=viewing.scheduled_date.isoformat() if viewing.scheduled_date else None,
            status=viewing.status.value,
            completed_at=viewing.completed_at.isoformat() if viewing.completed_at else None,
            viewing_confirmed=viewing.viewing_confirmed,
            application_sent=viewing.application_sent,
            notes=viewing.notes,
        )


class ViewingListResponse(BaseModel):
    viewings: List[ViewingResponse]
