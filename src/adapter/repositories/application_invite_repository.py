from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.application_invite_repository import (
    IApplicationInviteRepository,
)
from src.domain.entities import ApplicationInvite, InviteStatus


class ApplicationInviteRepository(IApplicationInviteRepository):
    """ApplicationInvite repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invite_id: UUID) -> Optional[ApplicationInvite]:
        """Get invite by ID"""
        stmt = (
            select(ApplicationInvite)
            .where(ApplicationInvite.id == invite_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_token(self, token: str) -> Optional[ApplicationInvite]:
        """Get invite by token"""
        stmt = (
            select(ApplicationInvite)
            .where(ApplicationInvite.token == token)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_live_for_pair(
        self, property_id: UUID, tenant_id: UUID, now: datetime
    ) -> Optional[ApplicationInvite]:
        """Get the unexpired invited invite for (property, tenant)"""
        stmt = (
            select(ApplicationInvite)
            .where(
                ApplicationInvite.property_id == property_id,
                ApplicationInvite.tenant_id == tenant_id,
                ApplicationInvite.status == InviteStatus.invited,
                ApplicationInvite.expires_at > now,
            )
            .order_by(ApplicationInvite.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def count_live_for_pair(
        self, property_id: UUID, tenant_id: UUID, now: datetime
    ) -> int:
        stmt = select(func.count()).select_from(ApplicationInvite).where(
            ApplicationInvite.property_id == property_id,
            ApplicationInvite.tenant_id == tenant_id,
            ApplicationInvite.status == InviteStatus.invited,
            ApplicationInvite.expires_at > now,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def list_live_for_tenant(
        self, tenant_id: UUID, now: datetime
    ) -> List[ApplicationInvite]:
        stmt = (
            select(ApplicationInvite)
            .where(
                ApplicationInvite.tenant_id == tenant_id,
                ApplicationInvite.status == InviteStatus.invited,
                ApplicationInvite.expires_at > now,
            )
            .order_by(ApplicationInvite.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, invite: ApplicationInvite) -> ApplicationInvite:
        """Create a new invite"""
        self.session.add(invite)
        await self.session.flush()
        await self.session.refresh(invite)
        return invite

    async def update(self, invite: ApplicationInvite) -> ApplicationInvite:
        """Update existing invite"""
        self.session.add(invite)
        await self.session.flush()
        await self.session.refresh(invite)
        return invite

    async def mark_used(self, invite_id: UUID, used_at: datetime) -> bool:
        """Compare-and-swap: live invited -> used"""
        stmt = (
            update(ApplicationInvite)
            .where(
                ApplicationInvite.id == invite_id,
                ApplicationInvite.status == InviteStatus.invited,
                ApplicationInvite.expires_at > used_at,
            )
            .values(status=InviteStatus.used, used_at=used_at)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1
