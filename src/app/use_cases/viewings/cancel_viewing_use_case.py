"""
Cancel Viewing Use Case
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.side_effects import notify_best_effort
from src.domain.entities import AuditEvent, ViewingStatus

from .dtos import ViewingResponse


class CancelViewingUseCase:
    """
    Either party cancels an open viewing.

    Business Rules:
    - requested/scheduled -> cancelled
    - A slot booked for the viewing is released
    - The other party is notified (best-effort)
    """

    def __init__(self, uow: UnitOfWork, notifier: Optional[INotificationService] = None):
        self.uow = uow
        self.notifier = notifier

    async def execute(self, viewing_id: UUID, actor_id: UUID) -> Result[ViewingResponse]:
        async with self.uow:
            viewing = await self.uow.viewings.get_by_id(viewing_id)
            if viewing is None or actor_id not in (viewing.landlord_id, viewing.tenant_id):
                return Return.err(Error("VIEWING_NOT_FOUND", "Viewing not found"))

            updated = await self.uow.viewings.transition(
                viewing_id,
                [ViewingStatus.requested, ViewingStatus.scheduled],
                status=ViewingStatus.cancelled,
            )
            if not updated:
                return Return.err(
                    Error("VIEWING_CLOSED", "Only open viewings can be cancelled")
                )

            if viewing.slot_id is not None:
                await self.uow.slots.release(viewing.slot_id, viewing.tenant_id)

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=actor_id,
                    entity_type="viewing",
                    entity_id=viewing_id,
                    action="viewing_cancelled",
                )
            )

            viewing = await self.uow.viewings.get_by_id(viewing_id)
            await self.uow.commit()
            response = ViewingResponse.from_entity(viewing)

        counterparty = viewing.tenant_id if actor_id == viewing.landlord_id else viewing.landlord_id
        await notify_best_effort(
            self.notifier,
            counterparty,
            "viewing_cancelled",
            {"viewing_id": str(viewing_id), "property_id": str(viewing.property_id)},
            response.warnings,
        )
        return Return.ok(response)
