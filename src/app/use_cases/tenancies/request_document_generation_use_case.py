"""
Request Document Generation Use Case
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.document_generator import IDocumentGenerator
from src.app.services.exceptions import ExternalServiceError
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.side_effects import notify_best_effort
from src.domain.entities import AuditEvent, LeaseStatus

from .dtos import TenancyResponse

logger = logging.getLogger(__name__)


class RequestDocumentGenerationUseCase:
    """
    Renders the lease and hands it to the tenant for signature.

    Business Rules:
    - Requires a draft lease owned by the landlord
    - The generator is idempotent by tenancy id, so retries are safe
    - Generator failure leaves the lease in draft
    - draft -> awaiting_tenant_signature is conditional on still being draft
    """

    def __init__(
        self,
        uow: UnitOfWork,
        documents: IDocumentGenerator,
        notifier: Optional[INotificationService] = None,
    ):
        self.uow = uow
        self.documents = documents
        self.notifier = notifier

    async def execute(self, tenancy_id: UUID, landlord_id: UUID) -> Result[TenancyResponse]:
        async with self.uow:
            tenancy = await self.uow.tenancies.get_by_id(tenancy_id)
            if tenancy is None or tenancy.landlord_id != landlord_id:
                return Return.err(Error("TENANCY_NOT_FOUND", "Tenancy not found"))
            if tenancy.lease_status != LeaseStatus.draft:
                return Return.err(Error("LEASE_NOT_DRAFT", "Lease document was already generated"))

            try:
                document_path = await self.documents.generate_lease(tenancy)
            except ExternalServiceError as e:
                logger.error(f"Lease generation for tenancy {tenancy_id} failed: {e}")
                return Return.err(
                    Error("EXTERNAL_SERVICE_FAILURE", "Lease document could not be generated")
                )

            updated = await self.uow.tenancies.transition(
                tenancy_id,
                LeaseStatus.draft,
                lease_status=LeaseStatus.awaiting_tenant_signature,
                lease_document_path=document_path,
            )
            if not updated:
                return Return.err(Error("LEASE_NOT_DRAFT", "Lease document was already generated"))

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=landlord_id,
                    entity_type="tenancy",
                    entity_id=tenancy_id,
                    action="lease_document_generated",
                    event_metadata={"lease_document_path": document_path},
                )
            )

            tenancy = await self.uow.tenancies.get_by_id(tenancy_id)
            await self.uow.commit()
            response = TenancyResponse.from_entity(tenancy)

        await notify_best_effort(
            self.notifier,
            tenancy.tenant_id,
            "lease_ready_for_signature",
            {"tenancy_id": response.id},
            response.warnings,
        )
        return Return.ok(response)
