"""
Confirm Viewing Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, ViewingStatus

from .dtos import ViewingResponse


class ConfirmViewingUseCase:
    """
    Landlord confirms a completed viewing.

    Business Rules:
    - Requires status=completed, otherwise VIEWING_NOT_COMPLETED
    - viewing_confirmed is never unset; confirming twice is a no-op
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, viewing_id: UUID, landlord_id: UUID) -> Result[ViewingResponse]:
        async with self.uow:
            viewing = await self.uow.viewings.get_by_id(viewing_id)
            if viewing is None or viewing.landlord_id != landlord_id:
                return Return.err(Error("VIEWING_NOT_FOUND", "Viewing not found"))

            if viewing.viewing_confirmed:
                return Return.ok(ViewingResponse.from_entity(viewing))

            updated = await self.uow.viewings.transition(
                viewing_id, [ViewingStatus.completed], viewing_confirmed=True
            )
            if not updated:
                return Return.err(
                    Error(
                        "VIEWING_NOT_COMPLETED",
                        "Only completed viewings can be confirmed",
                    )
                )

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=landlord_id,
                    entity_type="viewing",
                    entity_id=viewing_id,
                    action="viewing_confirmed",
                )
            )

            viewing = await self.uow.viewings.get_by_id(viewing_id)
            await self.uow.commit()

            return Return.ok(ViewingResponse.from_entity(viewing))
