"""
Invitation Issuer DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import ApplicationInvite


class InviteResponse(BaseModel):
    """Invite as seen by the landlord who issued it"""

    id: str
    token: str
    property_id: str
    landlord_id: str
    tenant_id: str
    conversation_id: Optional[str] = None
    status: str
    expires_at: str
    used_at: Optional[str] = None
    warnings: List[str] = []

    @classmethod
    def from_entity(cls, invite: ApplicationInvite) -> "InviteResponse":
        return cls(
            id=str(invite.id),
            token=invite.token,
            property_id=str(invite.property_id),
            landlord_id=str(invite.landlord_id),
            tenant_id=str(invite.tenant_id),
            conversation_id=str(invite.conversation_id) if invite.conversation_id else None,
            status=invite.status.value,
            expires_at=invite.expires_at.isoformat(),
            used_at=invite.used_at.isoformat() if invite.used_at else None,
        )


class RedeemInviteResponse(BaseModel):
    """What a tenant learns from a valid invite token"""

    invite_id: str
    property_id: str
    landlord_id: str
    tenant_id: str
    expires_at: str


class InviteListResponse(BaseModel):
    invites: List[InviteResponse]
