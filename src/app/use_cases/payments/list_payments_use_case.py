"""
List Payments Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import PaymentListResponse, PaymentResponse


class ListPaymentsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenancy_id: UUID, user_id: UUID) -> Result[PaymentListResponse]:
        async with self.uow:
            tenancy = await self.uow.tenancies.get_by_id(tenancy_id)
            if tenancy is None or user_id not in (tenancy.landlord_id, tenancy.tenant_id):
                return Return.err(Error("TENANCY_NOT_FOUND", "Tenancy not found"))

            payments = await self.uow.payments.list_by_tenancy(tenancy_id)
            return Return.ok(
                PaymentListResponse(payments=[PaymentResponse.from_entity(p) for p in payments])
            )
