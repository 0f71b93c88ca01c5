"""
Resend Invite Use Case
"""

from datetime import timedelta
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.side_effects import notify_best_effort
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, InviteStatus

from .dtos import InviteResponse


class ResendInviteUseCase:
    """
    Extends the expiry of an unused invite and notifies the tenant again.

    Lapsed invites can be resent as long as no other live invite exists for
    the same pair.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifier: Optional[INotificationService] = None,
        validity_hours: int = 168,
    ):
        self.uow = uow
        self.notifier = notifier
        self.validity_hours = validity_hours

    async def execute(self, invite_id: UUID, landlord_id: UUID) -> Result[InviteResponse]:
        now = utcnow()

        async with self.uow:
            invite = await self.uow.invites.get_by_id(invite_id)
            if invite is None or invite.landlord_id != landlord_id:
                return Return.err(Error("INVITE_NOT_FOUND", "Invite not found"))

            if invite.status == InviteStatus.used:
                return Return.err(Error("INVITE_ALREADY_USED", "Invite has already been used"))

            live = await self.uow.invites.get_live_for_pair(
                invite.property_id, invite.tenant_id, now
            )
            if live is not None and live.id != invite.id:
                return Return.err(
                    Error(
                        "INVITE_ALREADY_EXISTS",
                        "This tenant already has a pending invite for the property",
                    )
                )

            invite.status = InviteStatus.invited
            invite.expires_at = now + timedelta(hours=self.validity_hours)
            invite = await self.uow.invites.update(invite)
            if (
                await self.uow.invites.count_live_for_pair(invite.property_id, invite.tenant_id, now)
                > 1
            ):
                return Return.err(
                    Error(
                        "INVITE_ALREADY_EXISTS",
                        "This tenant already has a pending invite for the property",
                    )
                )

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=landlord_id,
                    entity_type="application_invite",
                    entity_id=invite.id,
                    action="invite_resent",
                    event_metadata={"expires_at": invite.expires_at.isoformat()},
                )
            )

            await self.uow.commit()
            response = InviteResponse.from_entity(invite)

        await notify_best_effort(
            self.notifier,
            invite.tenant_id,
            "application_invite_sent",
            {"invite_id": response.id, "property_id": response.property_id, "token": response.token},
            response.warnings,
        )
        return Return.ok(response)
