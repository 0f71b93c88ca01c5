"""
Redeem Invite Use Case

Resolves an invite token for the tenant who received it. Redeeming only
reads; the invite is consumed when an application is submitted with it.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import InviteStatus

from .dtos import RedeemInviteResponse


class RedeemInviteUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str, tenant_id: UUID) -> Result[RedeemInviteResponse]:
        async with self.uow:
            invite = await self.uow.invites.get_by_token(token)

            # Another tenant's token is indistinguishable from an unknown one
            if invite is None or invite.tenant_id != tenant_id:
                return Return.err(Error("INVITE_NOT_FOUND", "Invite not found"))

            if invite.status == InviteStatus.used:
                return Return.err(Error("INVITE_ALREADY_USED", "Invite has already been used"))

            if not invite.is_live(utcnow()):
                return Return.err(Error("INVITE_EXPIRED", "Invite has expired"))

            return Return.ok(
                RedeemInviteResponse(
                    invite_id=str(invite.id),
                    property_id=str(invite.property_id),
                    landlord_id=str(invite.landlord_id),
                    tenant_id=str(invite.tenant_id),
                    expires_at=invite.expires_at.isoformat(),
                )
            )
