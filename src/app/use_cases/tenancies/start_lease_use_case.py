"""
Start Lease Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ApplicationStatus, AuditEvent, LeaseStatus, Tenancy

from .dtos import LeaseTermsInput, TenancyResponse


class StartLeaseUseCase:
    """
    Use case for opening a draft lease from an accepted application.

    Business Rules:
    - Application must belong to the landlord and be accepted
    - monthly_rent > 0, security_deposit >= 0, end_date after start_date
    - Idempotent: the tenancy already opened from the application, or an
      overlapping tenancy for the same parties, is returned instead of
      creating a duplicate. A concurrent start on the same application
      resolves to the tenancy that was stored first.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, landlord_id: UUID, application_id: UUID, terms: LeaseTermsInput
    ) -> Result[TenancyResponse]:
        if terms.monthly_rent <= 0:
            return Return.err(Error("INVALID_LEASE_TERMS", "Monthly rent must be positive"))
        if terms.security_deposit < 0:
            return Return.err(Error("INVALID_LEASE_TERMS", "Security deposit cannot be negative"))
        if terms.end_date is not None and terms.end_date <= terms.start_date:
            return Return.err(Error("INVALID_LEASE_TERMS", "Lease must end after it starts"))

        async with self.uow:
            application = await self.uow.applications.get_by_id(application_id)
            if application is None or application.landlord_id != landlord_id:
                return Return.err(Error("APPLICATION_NOT_FOUND", "Application not found"))

            if application.status != ApplicationStatus.accepted:
                return Return.err(
                    Error(
                        "APPLICATION_NOT_ACCEPTED",
                        "A lease can only be started from an accepted application",
                    )
                )

            existing = await self.uow.tenancies.get_by_application_id(application.id)
            if existing:
                return Return.ok(TenancyResponse.from_entity(existing))

            existing = await self.uow.tenancies.find_overlapping(
                landlord_id,
                application.tenant_id,
                application.property_id,
                terms.start_date,
                terms.end_date,
            )
            if existing:
                return Return.ok(TenancyResponse.from_entity(existing))

            draft = Tenancy(
                application_id=application.id,
                property_id=application.property_id,
                landlord_id=landlord_id,
                tenant_id=application.tenant_id,
                monthly_rent=terms.monthly_rent,
                security_deposit=terms.security_deposit,
                start_date=terms.start_date,
                end_date=terms.end_date,
                lease_status=LeaseStatus.draft,
                custom_clauses=[clause.model_dump() for clause in terms.custom_clauses],
            )
            tenancy = await self.uow.tenancies.create(draft)
            if tenancy is not draft:
                # Another start on this application was stored first
                return Return.ok(TenancyResponse.from_entity(tenancy))

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=landlord_id,
                    entity_type="tenancy",
                    entity_id=tenancy.id,
                    action="lease_started",
                    event_metadata={"application_id": str(application_id)},
                )
            )

            await self.uow.commit()
            return Return.ok(TenancyResponse.from_entity(tenancy))
