"""
Request Credit Check Use Case

Runs after a submission has committed, outside the tenant's request.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.credit_check_provider import ICreditCheckProvider
from src.app.services.exceptions import ExternalServiceError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import ApplicationStatus, AuditEvent

logger = logging.getLogger(__name__)


class RequestCreditCheckUseCase:
    """
    Asks the provider for a credit check and moves the application
    submitted -> pending_credit_check once the provider accepts.

    A provider failure leaves the application in submitted; the landlord
    can still decide it.
    """

    def __init__(self, uow: UnitOfWork, credit_checks: ICreditCheckProvider):
        self.uow = uow
        self.credit_checks = credit_checks

    async def execute(self, application_id: UUID, tenant_id: UUID) -> Result[bool]:
        try:
            await self.credit_checks.request_check(application_id, tenant_id)
        except ExternalServiceError as e:
            logger.warning(f"Credit check request for application {application_id} failed: {e}")
            return Return.err(Error("EXTERNAL_SERVICE_FAILURE", str(e)))

        async with self.uow:
            moved = await self.uow.applications.transition(
                application_id,
                [ApplicationStatus.submitted],
                ApplicationStatus.pending_credit_check,
                utcnow(),
            )
            if not moved:
                # Landlord decided before the provider acknowledged
                return Return.ok(False)

            await self.uow.audit_events.create(
                AuditEvent(
                    entity_type="application",
                    entity_id=application_id,
                    action="credit_check_requested",
                )
            )
            await self.uow.commit()
            return Return.ok(True)
