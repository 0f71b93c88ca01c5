"""
Record Payment Event Use Case

Gateway callback that settles the rows opened for a reference.
"""

from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.side_effects import notify_best_effort
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, PaymentStatus

from .dtos import PaymentEventResponse, PaymentResponse


class RecordPaymentEventUseCase:
    """Replayed events leave already settled rows untouched"""

    def __init__(self, uow: UnitOfWork, notifier: Optional[INotificationService] = None):
        self.uow = uow
        self.notifier = notifier

    async def execute(self, reference: str, succeeded: bool) -> Result[PaymentEventResponse]:
        now = utcnow()
        status = PaymentStatus.paid if succeeded else PaymentStatus.failed

        async with self.uow:
            payments = await self.uow.payments.get_by_reference(reference)
            if not payments:
                return Return.err(Error("PAYMENT_NOT_FOUND", "No payment for this reference"))

            changed = await self.uow.payments.mark(
                reference, status, now if succeeded else None
            )
            tenancy_id = payments[0].tenancy_id

            if changed:
                await self.uow.audit_events.create(
                    AuditEvent(
                        entity_type="tenancy",
                        entity_id=tenancy_id,
                        action="payment_recorded",
                        event_metadata={"reference": reference, "status": status.value},
                    )
                )

            payments = await self.uow.payments.get_by_reference(reference)
            await self.uow.commit()
            response = PaymentEventResponse(
                reference=reference,
                payments=[PaymentResponse.from_entity(p) for p in payments],
            )

            recipients = []
            if changed:
                tenancy = await self.uow.tenancies.get_by_id(tenancy_id)
                if tenancy is not None:
                    recipients = [tenancy.tenant_id, tenancy.landlord_id]

        for recipient_id in recipients:
            await notify_best_effort(
                self.notifier,
                recipient_id,
                "payment_recorded",
                {"tenancy_id": str(tenancy_id), "reference": reference, "status": status.value},
                response.warnings,
            )
        return Return.ok(response)
