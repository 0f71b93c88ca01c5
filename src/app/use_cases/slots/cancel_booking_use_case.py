"""
Cancel Viewing Booking Use Case
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.side_effects import notify_best_effort
from src.domain.entities import AuditEvent, ViewingStatus

from .dtos import CancelBookingResponse


class CancelBookingUseCase:
    """
    Use case for a tenant cancelling their booking for a property.

    Business Rules:
    - Only the tenant holding the booking can release it
    - The slot becomes available again and the open viewing is cancelled
    """

    def __init__(self, uow: UnitOfWork, notifier: Optional[INotificationService] = None):
        self.uow = uow
        self.notifier = notifier

    async def execute(self, tenant_id: UUID, property_id: UUID) -> Result[CancelBookingResponse]:
        async with self.uow:
            slot = await self.uow.slots.get_active_booking(tenant_id, property_id)
            if slot is None:
                return Return.err(
                    Error("BOOKING_NOT_FOUND", "No active viewing booking for this property")
                )

            released = await self.uow.slots.release(slot.id, tenant_id)
            if not released:
                return Return.err(
                    Error("BOOKING_NOT_FOUND", "No active viewing booking for this property")
                )

            viewing = await self.uow.viewings.get_by_slot_id(slot.id)
            if viewing is not None:
                await self.uow.viewings.transition(
                    viewing.id,
                    [ViewingStatus.requested, ViewingStatus.scheduled],
                    status=ViewingStatus.cancelled,
                )

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=tenant_id,
                    entity_type="viewing_slot",
                    entity_id=slot.id,
                    action="slot_booking_cancelled",
                    event_metadata={"property_id": str(property_id)},
                )
            )

            await self.uow.commit()

            response = CancelBookingResponse(status="cancelled", slot_id=str(slot.id))

        await notify_best_effort(
            self.notifier,
            slot.landlord_id,
            "viewing_cancelled",
            {"property_id": str(property_id), "tenant_id": str(tenant_id), "slot_id": str(slot.id)},
            response.warnings,
        )
        return Return.ok(response)
