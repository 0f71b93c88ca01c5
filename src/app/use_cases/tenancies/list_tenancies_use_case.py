"""
List/Get Tenancies Use Cases
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import TenancyListResponse, TenancyResponse


class ListTenanciesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[TenancyListResponse]:
        async with self.uow:
            tenancies = await self.uow.tenancies.list_for_user(user_id)
            return Return.ok(
                TenancyListResponse(tenancies=[TenancyResponse.from_entity(t) for t in tenancies])
            )


class GetTenancyUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenancy_id: UUID, user_id: UUID) -> Result[TenancyResponse]:
        async with self.uow:
            tenancy = await self.uow.tenancies.get_by_id(tenancy_id)
            if tenancy is None or user_id not in (tenancy.landlord_id, tenancy.tenant_id):
                return Return.err(Error("TENANCY_NOT_FOUND", "Tenancy not found"))
            return Return.ok(TenancyResponse.from_entity(tenancy))
