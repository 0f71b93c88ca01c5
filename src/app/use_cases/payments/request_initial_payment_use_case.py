"""
Request Initial Payment Use Case

Opens a gateway checkout for the deposit and first month's rent of a
completed lease.
"""

import logging
import time
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.exceptions import ExternalServiceError
from src.app.services.payment_gateway import IPaymentGateway
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    AuditEvent,
    LeaseStatus,
    Payment,
    PaymentStatus,
    PaymentType,
)

from .dtos import InitialPaymentResponse, PaymentResponse

logger = logging.getLogger(__name__)


class RequestInitialPaymentUseCase:
    """
    Business Rules:
    - Lease must be completed (both parties signed)
    - total = monthly_rent + security_deposit
    - Reference format: rent_<tenancy_id>_<unix_ts>
    - Gateway failure records nothing
    - A tenancy whose initial payment already went through cannot be charged again
    """

    def __init__(self, uow: UnitOfWork, gateway: IPaymentGateway):
        self.uow = uow
        self.gateway = gateway

    async def execute(self, tenancy_id: UUID, user_id: UUID) -> Result[InitialPaymentResponse]:
        async with self.uow:
            tenancy = await self.uow.tenancies.get_by_id(tenancy_id)
            if tenancy is None or user_id not in (tenancy.landlord_id, tenancy.tenant_id):
                return Return.err(Error("TENANCY_NOT_FOUND", "Tenancy not found"))

            if tenancy.lease_status != LeaseStatus.completed:
                return Return.err(
                    Error("LEASE_NOT_COMPLETED", "Both parties must sign before paying")
                )

            existing = await self.uow.payments.list_by_tenancy(tenancy_id)
            if any(p.status == PaymentStatus.paid for p in existing):
                return Return.err(
                    Error("PAYMENT_ALREADY_COMPLETED", "Initial payment was already made")
                )

            reference = f"rent_{tenancy.id}_{int(time.time())}"
            total = tenancy.initial_payment_total

            try:
                checkout_url = await self.gateway.initialize(reference, total, tenancy)
            except ExternalServiceError as e:
                logger.error(f"Payment initialization for tenancy {tenancy_id} failed: {e}")
                return Return.err(
                    Error("EXTERNAL_SERVICE_FAILURE", "Payment could not be initialized")
                )

            payments = []
            for payment_type, amount in (
                (PaymentType.security_deposit, tenancy.security_deposit),
                (PaymentType.first_month_rent, tenancy.monthly_rent),
            ):
                payments.append(
                    await self.uow.payments.create(
                        Payment(
                            tenancy_id=tenancy_id,
                            payment_type=payment_type,
                            amount=amount,
                            reference=reference,
                            status=PaymentStatus.pending,
                        )
                    )
                )

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=user_id,
                    entity_type="tenancy",
                    entity_id=tenancy_id,
                    action="initial_payment_requested",
                    event_metadata={"reference": reference, "amount": str(total)},
                )
            )

            await self.uow.commit()

            return Return.ok(
                InitialPaymentResponse(
                    reference=reference,
                    checkout_url=checkout_url,
                    total_amount=str(total),
                    payments=[PaymentResponse.from_entity(p) for p in payments],
                )
            )
