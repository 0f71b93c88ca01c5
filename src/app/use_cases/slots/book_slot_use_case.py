"""
Book Viewing Slot Use Case

The one operation with a genuine race: two tenants may try to book the
same slot at the same moment.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.side_effects import notify_best_effort
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, Viewing, ViewingStatus

from .dtos import BookingResponse, SlotResponse

logger = logging.getLogger(__name__)


class BookSlotUseCase:
    """
    Use case for booking a viewing slot.

    Business Rules:
    - Booking is a conditional update WHERE status=available; losing the
      race yields SLOT_UNAVAILABLE and the caller must pick another slot
    - A tenant holds at most one active booking per property
    - A successful booking opens a scheduled Viewing for the slot
    - Landlord notification is best-effort
    """

    def __init__(self, uow: UnitOfWork, notifier: Optional[INotificationService] = None):
        self.uow = uow
        self.notifier = notifier

    async def execute(self, tenant_id: UUID, slot_id: UUID) -> Result[BookingResponse]:
        """
        Execute book slot use case.

        Args:
            tenant_id: Tenant booking the slot
            slot_id: Slot to claim

        Returns:
            Result with BookingResponse DTO, or Error
        """
        async with self.uow:
            slot = await self.uow.slots.get_by_id(slot_id)
            if slot is None:
                return Return.err(Error("SLOT_NOT_FOUND", "Viewing slot not found"))

            if slot.start_time <= utcnow():
                return Return.err(Error("SLOT_IN_PAST", "This viewing slot has already started"))

            existing = await self.uow.slots.get_active_booking(tenant_id, slot.property_id)
            if existing is not None:
                return Return.err(
                    Error(
                        "ACTIVE_BOOKING_EXISTS",
                        "You already have a viewing booked for this property",
                    )
                )

            booked = await self.uow.slots.try_book(slot_id, tenant_id)
            if not booked:
                logger.info(f"Slot {slot_id} booking lost by tenant {tenant_id}")
                return Return.err(
                    Error(
                        "SLOT_UNAVAILABLE",
                        "That time slot is no longer available. Please choose a different time.",
                    )
                )

            # A concurrent booking by the same tenant may have committed since the check above
            if await self.uow.slots.count_active_bookings(tenant_id, slot.property_id) > 1:
                return Return.err(
                    Error(
                        "ACTIVE_BOOKING_EXISTS",
                        "You already have a viewing booked for this property",
                    )
                )

            viewing = await self.uow.viewings.create(
                Viewing(
                    property_id=slot.property_id,
                    landlord_id=slot.landlord_id,
                    tenant_id=tenant_id,
                    slot_id=slot.id,
                    scheduled_date=slot.start_time,
                    status=ViewingStatus.scheduled,
                )
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=tenant_id,
                    entity_type="viewing_slot",
                    entity_id=slot.id,
                    action="slot_booked",
                    event_metadata={
                        "property_id": str(slot.property_id),
                        "viewing_id": str(viewing.id),
                    },
                )
            )

            booked_slot = await self.uow.slots.get_by_id(slot_id)
            await self.uow.commit()

            response = BookingResponse(
                slot=SlotResponse.from_entity(booked_slot),
                viewing_id=str(viewing.id),
            )

        await notify_best_effort(
            self.notifier,
            booked_slot.landlord_id,
            "viewing_booked",
            {
                "property_id": str(booked_slot.property_id),
                "tenant_id": str(tenant_id),
                "slot_id": str(slot_id),
                "start_time": booked_slot.start_time.isoformat(),
            },
            response.warnings,
        )
        return Return.ok(response)
