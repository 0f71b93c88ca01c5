"""
Issue Invite Use Case

Landlord lets a tenant apply without going through a viewing.
"""

import secrets
from datetime import timedelta
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.side_effects import notify_best_effort
from src.domain.base import utcnow
from src.domain.entities import ApplicationInvite, AuditEvent, InviteStatus

from .dtos import InviteResponse


class IssueInviteUseCase:
    """
    Use case for issuing an application invite.

    Business Rules:
    - Token from secrets.token_urlsafe, valid for validity_hours
    - Only one live invite per (property, tenant): INVITE_ALREADY_EXISTS
    - Tenant notification is best-effort
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

    async def execute(
        self,
        landlord_id: UUID,
        property_id: UUID,
        tenant_id: UUID,
        conversation_id: Optional[UUID] = None,
    ) -> Result[InviteResponse]:
        now = utcnow()

        async with self.uow:
            existing = await self.uow.invites.get_live_for_pair(property_id, tenant_id, now)
            if existing:
                return Return.err(
                    Error(
                        "INVITE_ALREADY_EXISTS",
                        "This tenant already has a pending invite for the property",
                    )
                )

            invite = await self.uow.invites.create(
                ApplicationInvite(
                    token=secrets.token_urlsafe(32),
                    property_id=property_id,
                    landlord_id=landlord_id,
                    tenant_id=tenant_id,
                    conversation_id=conversation_id,
                    status=InviteStatus.invited,
                    created_at=now,
                    expires_at=now + timedelta(hours=self.validity_hours),
                )
            )
            if await self.uow.invites.count_live_for_pair(property_id, tenant_id, now) > 1:
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
                    action="invite_issued",
                    event_metadata={
                        "property_id": str(property_id),
                        "tenant_id": str(tenant_id),
                    },
                )
            )

            await self.uow.commit()
            response = InviteResponse.from_entity(invite)

        await notify_best_effort(
            self.notifier,
            tenant_id,
            "application_invite_sent",
            {"invite_id": response.id, "property_id": str(property_id), "token": response.token},
            response.warnings,
        )
        return Return.ok(response)
