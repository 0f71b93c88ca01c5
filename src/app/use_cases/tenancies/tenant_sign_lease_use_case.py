"""
Tenant Sign Lease Use Case
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.side_effects import notify_best_effort
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, LeaseStatus

from .dtos import TenancyResponse


class TenantSignLeaseUseCase:
    """awaiting_tenant_signature -> awaiting_landlord_signature"""

    def __init__(self, uow: UnitOfWork, notifier: Optional[INotificationService] = None):
        self.uow = uow
        self.notifier = notifier

    async def execute(self, tenancy_id: UUID, tenant_id: UUID) -> Result[TenancyResponse]:
        signed_at = utcnow()

        async with self.uow:
            tenancy = await self.uow.tenancies.get_by_id(tenancy_id)
            if tenancy is None or tenancy.tenant_id != tenant_id:
                return Return.err(Error("TENANCY_NOT_FOUND", "Tenancy not found"))

            updated = await self.uow.tenancies.transition(
                tenancy_id,
                LeaseStatus.awaiting_tenant_signature,
                lease_status=LeaseStatus.awaiting_landlord_signature,
                tenant_signed_at=signed_at,
            )
            if not updated:
                return Return.err(
                    Error(
                        "LEASE_NOT_AWAITING_TENANT",
                        "Lease is not awaiting the tenant's signature",
                    )
                )

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=tenant_id,
                    entity_type="tenancy",
                    entity_id=tenancy_id,
                    action="lease_signed",
                    event_metadata={"party": "tenant"},
                )
            )

            tenancy = await self.uow.tenancies.get_by_id(tenancy_id)
            await self.uow.commit()
            response = TenancyResponse.from_entity(tenancy)

        await notify_best_effort(
            self.notifier,
            tenancy.landlord_id,
            "lease_signed",
            {"tenancy_id": response.id, "party": "tenant"},
            response.warnings,
        )
        return Return.ok(response)
