"""
Application gate

A tenant may apply to a property once the landlord has sent application
access after a confirmed viewing, or while they hold a live invite for it.
The granting record also names the landlord the application belongs to.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ApplicationInvite, Viewing


@dataclass
class GateDecision:
    viewing: Optional[Viewing]
    invite: Optional[ApplicationInvite]

    @property
    def via_viewing(self) -> bool:
        return self.viewing is not None

    @property
    def allowed(self) -> bool:
        return self.via_viewing or self.invite is not None


async def evaluate_gate(
    uow: UnitOfWork, tenant_id: UUID, property_id: UUID, now: datetime
) -> GateDecision:
    """Consults both the viewing tracker and the invite issuer before denying"""
    viewing = await uow.viewings.get_application_access(property_id, tenant_id)
    invite = await uow.invites.get_live_for_pair(property_id, tenant_id, now)
    return GateDecision(viewing=viewing, invite=invite)
