"""
Reschedule Viewing Booking Use Case

Moves a tenant's booking from one slot to another in a single transaction.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.side_effects import notify_best_effort
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, SlotStatus, ViewingStatus

from .dtos import BookingResponse, SlotResponse


class RescheduleBookingUseCase:
    """
    Use case for rescheduling a viewing booking.

    Business Rules:
    - Claim of the new slot and release of the old slot commit together
    - If the new slot is taken, nothing changes and the old booking is kept
    - Both slots must belong to the same property
    - The open viewing follows the booking to the new slot
    """

    def __init__(self, uow: UnitOfWork, notifier: Optional[INotificationService] = None):
        self.uow = uow
        self.notifier = notifier

    async def execute(
        self, tenant_id: UUID, old_slot_id: UUID, new_slot_id: UUID
    ) -> Result[BookingResponse]:
        if old_slot_id == new_slot_id:
            return Return.err(
                Error("INVALID_RESCHEDULE", "New slot must differ from the current slot")
            )

        async with self.uow:
            old_slot = await self.uow.slots.get_by_id(old_slot_id)
            if (
                old_slot is None
                or old_slot.status != SlotStatus.booked
                or old_slot.booked_by_tenant_id != tenant_id
            ):
                return Return.err(
                    Error("BOOKING_NOT_FOUND", "No active booking for the given slot")
                )

            new_slot = await self.uow.slots.get_by_id(new_slot_id)
            if new_slot is None:
                return Return.err(Error("SLOT_NOT_FOUND", "Viewing slot not found"))

            if new_slot.property_id != old_slot.property_id:
                return Return.err(
                    Error("SLOT_PROPERTY_MISMATCH", "Both slots must belong to the same property")
                )

            if new_slot.start_time <= utcnow():
                return Return.err(Error("SLOT_IN_PAST", "This viewing slot has already started"))

            # Claim first: if this loses the race the rollback leaves the old booking intact
            claimed = await self.uow.slots.try_book(new_slot_id, tenant_id)
            if not claimed:
                return Return.err(
                    Error(
                        "SLOT_UNAVAILABLE",
                        "That time slot is no longer available. Your current booking is unchanged.",
                    )
                )

            released = await self.uow.slots.release(old_slot_id, tenant_id)
            if not released:
                return Return.err(
                    Error("BOOKING_NOT_FOUND", "Your current booking changed; please refresh")
                )

            viewing = await self.uow.viewings.get_by_slot_id(old_slot_id)
            if viewing is not None:
                await self.uow.viewings.transition(
                    viewing.id,
                    [ViewingStatus.requested, ViewingStatus.scheduled],
                    slot_id=new_slot_id,
                    scheduled_date=new_slot.start_time,
                    status=ViewingStatus.scheduled,
                )
                viewing_id = viewing.id
            else:
                viewing_id = None

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=tenant_id,
                    entity_type="viewing_slot",
                    entity_id=new_slot_id,
                    action="slot_booking_rescheduled",
                    event_metadata={
                        "property_id": str(new_slot.property_id),
                        "old_slot_id": str(old_slot_id),
                    },
                )
            )

            booked_slot = await self.uow.slots.get_by_id(new_slot_id)
            await self.uow.commit()

            response = BookingResponse(
                slot=SlotResponse.from_entity(booked_slot),
                viewing_id=str(viewing_id) if viewing_id else None,
            )

        await notify_best_effort(
            self.notifier,
            booked_slot.landlord_id,
            "viewing_rescheduled",
            {
                "property_id": str(booked_slot.property_id),
                "tenant_id": str(tenant_id),
                "slot_id": str(new_slot_id),
                "old_slot_id": str(old_slot_id),
                "start_time": booked_slot.start_time.isoformat(),
            },
            response.warnings,
        )
        return Return.ok(response)
