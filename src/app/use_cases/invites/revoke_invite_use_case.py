"""
Revoke Invite Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, InviteStatus

from .dtos import InviteResponse


class RevokeInviteUseCase:
    """Landlord withdraws an unused invite (invited -> expired)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, invite_id: UUID, landlord_id: UUID) -> Result[InviteResponse]:
        async with self.uow:
            invite = await self.uow.invites.get_by_id(invite_id)
            if invite is None or invite.landlord_id != landlord_id:
                return Return.err(Error("INVITE_NOT_FOUND", "Invite not found"))

            if invite.status == InviteStatus.used:
                return Return.err(Error("INVITE_ALREADY_USED", "Invite has already been used"))

            if invite.status == InviteStatus.expired:
                return Return.ok(InviteResponse.from_entity(invite))

            invite.status = InviteStatus.expired
            invite = await self.uow.invites.update(invite)

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=landlord_id,
                    entity_type="application_invite",
                    entity_id=invite.id,
                    action="invite_revoked",
                )
            )

            await self.uow.commit()
            return Return.ok(InviteResponse.from_entity(invite))
