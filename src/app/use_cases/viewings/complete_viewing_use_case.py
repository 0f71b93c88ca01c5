"""
Complete Viewing Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, ViewingStatus

from .dtos import ViewingResponse


class CompleteViewingUseCase:
    """
    Use case for marking a viewing as having taken place.

    Business Rules:
    - requested/scheduled -> completed, stamps completed_at
    - Irreversible; completing an already completed viewing is a no-op
    - Cancelled viewings cannot be completed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, viewing_id: UUID, landlord_id: UUID) -> Result[ViewingResponse]:
        async with self.uow:
            viewing = await self.uow.viewings.get_by_id(viewing_id)
            if viewing is None or viewing.landlord_id != landlord_id:
                return Return.err(Error("VIEWING_NOT_FOUND", "Viewing not found"))

            if viewing.status == ViewingStatus.completed:
                return Return.ok(ViewingResponse.from_entity(viewing))

            completed_at = utcnow()
            updated = await self.uow.viewings.transition(
                viewing_id,
                [ViewingStatus.requested, ViewingStatus.scheduled],
                status=ViewingStatus.completed,
                completed_at=completed_at,
            )
            if not updated:
                return Return.err(
                    Error("VIEWING_CLOSED", "A cancelled viewing cannot be completed")
                )

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=landlord_id,
                    entity_type="viewing",
                    entity_id=viewing_id,
                    action="viewing_completed",
                    event_metadata={"completed_at": completed_at.isoformat()},
                )
            )

            viewing = await self.uow.viewings.get_by_id(viewing_id)
            await self.uow.commit()

            return Return.ok(ViewingResponse.from_entity(viewing))
