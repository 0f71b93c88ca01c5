"""
Create Viewing Slot Use Case

Landlord publishes a bookable viewing window for a property.
"""

from datetime import datetime
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, ViewingSlot

from .dtos import SlotResponse


class CreateSlotUseCase:
    """
    Use case for creating viewing slots.

    Business Rules:
    - end_time must be after start_time
    - Slots cannot start in the past
    - New slots are available
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        landlord_id: UUID,
        property_id: UUID,
        start_time: datetime,
        end_time: datetime,
    ) -> Result[SlotResponse]:
        if end_time <= start_time:
            return Return.err(
                Error("INVALID_TIME_RANGE", "Slot end time must be after its start time")
            )
        if start_time <= utcnow():
            return Return.err(Error("SLOT_IN_PAST", "Slot must start in the future"))

        async with self.uow:
            slot = await self.uow.slots.create(
                ViewingSlot(
                    property_id=property_id,
                    landlord_id=landlord_id,
                    start_time=start_time,
                    end_time=end_time,
                )
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=landlord_id,
                    entity_type="viewing_slot",
                    entity_id=slot.id,
                    action="slot_created",
                    event_metadata={"property_id": str(property_id)},
                )
            )

            await self.uow.commit()

            return Return.ok(SlotResponse.from_entity(slot))
