"""
Submit Application Use Case

Gate-checked application submission with tenant screening. The credit check
is requested separately once the submission has committed.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.side_effects import notify_best_effort
from src.domain.base import utcnow
from src.domain.entities import (
    Application,
    ApplicationInvite,
    ApplicationStatus,
    AuditEvent,
    InviteStatus,
    ScreeningProfile,
)

from .dtos import ApplicationResponse, ScreeningInput
from .gate import evaluate_gate


class SubmitApplicationUseCase:
    """
    Use case for submitting a rental application.

    Business Rules:
    - Screening consent is mandatory
    - The gate is checked before anything is written
    - Screening profile is tenant-global and upserted on every submission
    - A previous application for the pair is superseded, not deleted
    - An accepted application blocks resubmission
    - An invite that granted access is consumed (single use)
    - The application belongs to the landlord who granted access; a
      different landlord_id from the caller is rejected
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifier: Optional[INotificationService] = None,
    ):
        self.uow = uow
        self.notifier = notifier

    async def execute(
        self,
        tenant_id: UUID,
        property_id: UUID,
        landlord_id: Optional[UUID],
        screening: ScreeningInput,
        invite_id: Optional[UUID] = None,
    ) -> Result[ApplicationResponse]:
        if not screening.screening_consent:
            return Return.err(
                Error("SCREENING_CONSENT_REQUIRED", "Screening consent is required to apply")
            )

        now = utcnow()

        async with self.uow:
            decision = await evaluate_gate(self.uow, tenant_id, property_id, now)

            invite: Optional[ApplicationInvite] = None
            if invite_id is not None:
                invite = await self.uow.invites.get_by_id(invite_id)
                if (
                    invite is None
                    or invite.tenant_id != tenant_id
                    or invite.property_id != property_id
                ):
                    return Return.err(Error("INVITE_NOT_FOUND", "Invite not found"))
                if not invite.is_live(now):
                    if not decision.via_viewing:
                        return Return.err(_dead_invite_error(invite))
                    invite = None
            elif not decision.via_viewing:
                invite = decision.invite

            if not decision.via_viewing and invite is None:
                return Return.err(
                    Error(
                        "APPLICATION_GATE_DENIED",
                        "Complete a viewing or use an invite before applying",
                    )
                )

            granting_landlord_id = (
                decision.viewing.landlord_id if decision.via_viewing else invite.landlord_id
            )
            if landlord_id is not None and landlord_id != granting_landlord_id:
                return Return.err(
                    Error(
                        "APPLICATION_GATE_DENIED",
                        "Application access was not granted by this landlord",
                    )
                )

            existing = await self.uow.applications.get_active_for_pair(tenant_id, property_id)
            if existing and existing.status == ApplicationStatus.accepted:
                return Return.err(
                    Error(
                        "APPLICATION_ALREADY_ACCEPTED",
                        "An accepted application already exists for this property",
                    )
                )

            consumed_invite_id = None
            if invite is not None:
                if await self.uow.invites.mark_used(invite.id, now):
                    consumed_invite_id = invite.id
                elif not decision.via_viewing:
                    return Return.err(
                        Error("INVITE_ALREADY_USED", "Invite has already been used")
                    )

            await self.uow.screening_profiles.upsert(
                ScreeningProfile(
                    user_id=tenant_id,
                    **screening.model_dump(exclude={"documents"}),
                    documents=[doc.model_dump() for doc in screening.documents],
                    screening_consent_date=now,
                    updated_at=now,
                )
            )
            await self.uow.screening_profiles.mark_tenant_screened(tenant_id)

            application = await self.uow.applications.create(
                Application(
                    tenant_id=tenant_id,
                    landlord_id=granting_landlord_id,
                    property_id=property_id,
                    invite_id=consumed_invite_id,
                    status=ApplicationStatus.submitted,
                    created_at=now,
                    updated_at=now,
                )
            )

            if existing is not None:
                superseded = await self.uow.applications.supersede(existing.id, application.id, now)
                if not superseded:
                    return Return.err(
                        Error(
                            "CONCURRENT_UPDATE",
                            "The previous application changed while submitting, please retry",
                        )
                    )

            await self.uow.audit_events.create(
                AuditEvent(
                    actor_id=tenant_id,
                    entity_type="application",
                    entity_id=application.id,
                    action="application_submitted",
                    event_metadata={
                        "property_id": str(property_id),
                        "via": "viewing" if consumed_invite_id is None else "invite",
                        "supersedes": str(existing.id) if existing else None,
                    },
                )
            )

            await self.uow.commit()
            response = ApplicationResponse.from_entity(application)

        await notify_best_effort(
            self.notifier,
            granting_landlord_id,
            "application_submitted",
            {"application_id": response.id, "property_id": str(property_id)},
            response.warnings,
        )
        return Return.ok(response)


def _dead_invite_error(invite: ApplicationInvite) -> Error:
    if invite.status == InviteStatus.used:
        return Error("INVITE_ALREADY_USED", "Invite has already been used")
    return Error("INVITE_EXPIRED", "Invite has expired")
