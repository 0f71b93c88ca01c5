"""
ApplicationInvite Entity

Landlord-issued tokens that let a tenant apply without a completed viewing.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import InviteStatus


class ApplicationInvite(SQLModel, table=True):
    """
    ApplicationInvite entity - single-use, expiring application bypass.

    Business Rules:
    - Token is cryptographically secure and unique
    - One live invite (status=invited, unexpired) per (property, tenant)
    - Expiry is derived at read time from expires_at, never by a background job
    - Marked used only when an application is submitted with it
    """

    __tablename__ = "application_invites"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    token: str = Field(unique=True, index=True, max_length=64)

    property_id: UUID = Field(nullable=False, index=True)
    landlord_id: UUID = Field(nullable=False, index=True)
    tenant_id: UUID = Field(nullable=False, index=True)
    conversation_id: Optional[UUID] = Field(default=None)

    status: InviteStatus = Field(default=InviteStatus.invited)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    used_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invite_property_tenant", "property_id", "tenant_id"),
        Index("idx_invite_status", "status"),
    )

    def is_live(self, now: datetime) -> bool:
        return self.status == InviteStatus.invited and self.expires_at > now
