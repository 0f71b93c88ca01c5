"""
Schedule Viewing Use Case
"""

from datetime import datetime
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, ViewingStatus

from .dtos import ViewingResponse


class ScheduleViewingUseCase:
    """
    Landlord sets the date of a requested (or already scheduled) viewing.

    Completed and cancelled viewings cannot be rescheduled.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, viewing_id: UUID, landlord_id: UUID, scheduled_date: datetime
    ) -> Result[ViewingResponse]:
        if scheduled_date <= utcnow():
            return Return.err(Error("INVALID_SCHEDULE", "Viewing must be scheduled in the future"))

        async with self.uow:
            viewing = await self.uow.viewings.get_by_id(viewing_id)
            if viewing is None or viewing.landlord_id != landlord_id:
                return Return.err(Error("VIEWING_NOT_FOUND", "Viewing not found"))

            updated = await self.uow.viewings.transition(
                viewing_id,
                [ViewingStatus.requested, ViewingStatus.scheduled],
                status=ViewingStatus.scheduled,
                scheduled_date=scheduled_date,
            )
            if not updated:
                return Return.err(
                    Error("VIEWING_CLOSED", "Completed or cancelled viewings cannot be scheduled")
                )

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=landlord_id,
                    entity_type="viewing",
                    entity_id=viewing_id,
                    action="viewing_scheduled",
                    event_metadata={"scheduled_date": scheduled_date.isoformat()},
                )
            )

            viewing = await self.uow.viewings.get_by_id(viewing_id)
            await self.uow.commit()

            return Return.ok(ViewingResponse.from_entity(viewing))
