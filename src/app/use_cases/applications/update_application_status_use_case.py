"""
Update Application Status Use Case
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.side_effects import notify_best_effort
from src.domain.base import utcnow
from src.domain.entities import (
    DECIDABLE_APPLICATION_STATUSES,
    TERMINAL_APPLICATION_STATUSES,
    ApplicationStatus,
    AuditEvent,
)

from .dtos import ApplicationResponse


class UpdateApplicationStatusUseCase:
    """
    Landlord accepts or declines an application.

    Business Rules:
    - Only the owning landlord sees the application (others get NOT_FOUND)
    - Allowed from pending, submitted or pending_credit_check
    - accepted and declined are terminal
    - The tenant is notified (best-effort)
    """

    def __init__(self, uow: UnitOfWork, notifier: Optional[INotificationService] = None):
        self.uow = uow
        self.notifier = notifier

    async def execute(
        self, application_id: UUID, landlord_id: UUID, new_status: ApplicationStatus
    ) -> Result[ApplicationResponse]:
        if new_status not in TERMINAL_APPLICATION_STATUSES:
            return Return.err(
                Error("INVALID_STATUS", "Applications can only be accepted or declined")
            )

        async with self.uow:
            application = await self.uow.applications.get_by_id(application_id)
            if application is None or application.landlord_id != landlord_id:
                return Return.err(Error("APPLICATION_NOT_FOUND", "Application not found"))

            if application.superseded_by_id is not None:
                return Return.err(
                    Error("APPLICATION_FINALIZED", "Application was replaced by a newer one")
                )

            previous_status = application.status
            updated = await self.uow.applications.transition(
                application_id, DECIDABLE_APPLICATION_STATUSES, new_status, utcnow()
            )
            if not updated:
                application = await self.uow.applications.get_by_id(application_id)
                if application.status in TERMINAL_APPLICATION_STATUSES:
                    return Return.err(
                        Error(
                            "APPLICATION_FINALIZED",
                            f"Application is already {application.status.value}",
                        )
                    )
                return Return.err(
                    Error(
                        "CONCURRENT_UPDATE",
                        f"Application cannot be decided while {application.status.value}",
                    )
                )

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=landlord_id,
                    entity_type="application",
                    entity_id=application_id,
                    action="application_status_changed",
                    event_metadata={
                        "from": previous_status.value,
                        "to": new_status.value,
                    },
                )
            )

            application = await self.uow.applications.get_by_id(application_id)
            await self.uow.commit()
            response = ApplicationResponse.from_entity(application)

        await notify_best_effort(
            self.notifier,
            application.tenant_id,
            "application_status_changed",
            {"application_id": response.id, "status": response.status},
            response.warnings,
        )
        return Return.ok(response)
