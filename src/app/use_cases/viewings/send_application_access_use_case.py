"""
Send Application Access Use Case

Landlord opens the application form to a tenant after a confirmed viewing.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.side_effects import notify_best_effort
from src.domain.entities import AuditEvent, ViewingStatus

from .dtos import ViewingResponse


class SendApplicationAccessUseCase:
    """
    Use case for granting application access from a viewing.

    Business Rules:
    - Requires viewing_confirmed, otherwise VIEWING_NOT_CONFIRMED
    - application_sent is never unset; sending twice is a no-op
    - Tenant notification is best-effort
    """

    def __init__(self, uow: UnitOfWork, notifier: Optional[INotificationService] = None):
        self.uow = uow
        self.notifier = notifier

    async def execute(self, viewing_id: UUID, landlord_id: UUID) -> Result[ViewingResponse]:
        async with self.uow:
            viewing = await self.uow.viewings.get_by_id(viewing_id)
            if viewing is None or viewing.landlord_id != landlord_id:
                return Return.err(Error("VIEWING_NOT_FOUND", "Viewing not found"))

            if viewing.application_sent:
                return Return.ok(ViewingResponse.from_entity(viewing))

            updated = await self.uow.viewings.transition(
                viewing_id,
                [ViewingStatus.completed],
                require_confirmed=True,
                application_sent=True,
            )
            if not updated:
                return Return.err(
                    Error(
                        "VIEWING_NOT_CONFIRMED",
                        "The viewing must be confirmed before sending the application",
                    )
                )

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=landlord_id,
                    entity_type="viewing",
                    entity_id=viewing_id,
                    action="application_access_sent",
                    event_metadata={"tenant_id": str(viewing.tenant_id)},
                )
            )

            viewing = await self.uow.viewings.get_by_id(viewing_id)
            await self.uow.commit()
            response = ViewingResponse.from_entity(viewing)

        await notify_best_effort(
            self.notifier,
            viewing.tenant_id,
            "application_access_sent",
            {"viewing_id": str(viewing_id), "property_id": str(viewing.property_id)},
            response.warnings,
        )
        return Return.ok(response)
