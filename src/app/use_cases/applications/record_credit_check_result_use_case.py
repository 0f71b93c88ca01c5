"""
Record Credit Check Result Use Case

Callback from the credit check provider.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.side_effects import notify_best_effort
from src.domain.base import utcnow
from src.domain.entities import ApplicationStatus, AuditEvent

from .dtos import ApplicationResponse


class RecordCreditCheckResultUseCase:
    """
    pending_credit_check -> pending (passed) or declined (failed).

    Provider retries are common, so a result for an application that has
    already left pending_credit_check is acknowledged without changes.
    """

    def __init__(self, uow: UnitOfWork, notifier: Optional[INotificationService] = None):
        self.uow = uow
        self.notifier = notifier

    async def execute(self, application_id: UUID, passed: bool) -> Result[ApplicationResponse]:
        async with self.uow:
            application = await self.uow.applications.get_by_id(application_id)
            if application is None:
                return Return.err(Error("APPLICATION_NOT_FOUND", "Application not found"))

            if application.status != ApplicationStatus.pending_credit_check:
                if application.status == ApplicationStatus.submitted:
                    return Return.err(
                        Error(
                            "CREDIT_CHECK_NOT_PENDING",
                            "No credit check is pending for this application",
                        )
                    )
                return Return.ok(ApplicationResponse.from_entity(application))

            new_status = ApplicationStatus.pending if passed else ApplicationStatus.declined
            updated = await self.uow.applications.transition(
                application_id,
                [ApplicationStatus.pending_credit_check],
                new_status,
                utcnow(),
            )
            if not updated:
                application = await self.uow.applications.get_by_id(application_id)
                return Return.ok(ApplicationResponse.from_entity(application))

            await self.uow.audit_events.create(
                AuditEvent(
                    entity_type="application",
                    entity_id=application_id,
                    action="credit_check_completed",
                    event_metadata={"passed": passed, "to": new_status.value},
                )
            )

            application = await self.uow.applications.get_by_id(application_id)
            await self.uow.commit()
            response = ApplicationResponse.from_entity(application)

        await notify_best_effort(
            self.notifier,
            application.landlord_id,
            "credit_check_completed",
            {"application_id": response.id, "passed": passed},
            response.warnings,
        )
        return Return.ok(response)
