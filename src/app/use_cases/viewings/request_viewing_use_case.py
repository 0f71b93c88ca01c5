"""
Request Viewing Use Case

Tenant asks a landlord for a viewing outside the slot calendar.
"""

from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.side_effects import notify_best_effort
from src.domain.entities import AuditEvent, Viewing, ViewingStatus

from .dtos import ViewingResponse


class RequestViewingUseCase:
    def __init__(self, uow: UnitOfWork, notifier: Optional[INotificationService] = None):
        self.uow = uow
        self.notifier = notifier

    async def execute(
        self,
        tenant_id: UUID,
        property_id: UUID,
        landlord_id: UUID,
        conversation_id: Optional[UUID] = None,
        notes: Optional[str] = None,
    ) -> Result[ViewingResponse]:
        async with self.uow:
            viewing = await self.uow.viewings.create(
                Viewing(
                    property_id=property_id,
                    landlord_id=landlord_id,
                    tenant_id=tenant_id,
                    conversation_id=conversation_id,
                    notes=notes,
                    status=ViewingStatus.requested,
                )
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=tenant_id,
                    entity_type="viewing",
                    entity_id=viewing.id,
                    action="viewing_requested",
                    event_metadata={"property_id": str(property_id)},
                )
            )

            await self.uow.commit()
            response = ViewingResponse.from_entity(viewing)

        await notify_best_effort(
            self.notifier,
            landlord_id,
            "viewing_requested",
            {"viewing_id": response.id, "property_id": str(property_id), "tenant_id": str(tenant_id)},
            response.warnings,
        )
        return Return.ok(response)
