"""
List Invites Use Case
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow

from .dtos import InviteListResponse, InviteResponse


class ListInvitesUseCase:
    """Live invites addressed to a tenant"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID) -> Result[InviteListResponse]:
        async with self.uow:
            invites = await self.uow.invites.list_live_for_tenant(tenant_id, utcnow())
            return Return.ok(
                InviteListResponse(invites=[InviteResponse.from_entity(i) for i in invites])
            )
