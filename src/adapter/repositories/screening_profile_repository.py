from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.screening_profile_repository import (
    IScreeningProfileRepository,
)
from src.domain.entities import Profile, ScreeningProfile


class ScreeningProfileRepository(IScreeningProfileRepository):
    """Screening profile repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_id(self, user_id: UUID) -> Optional[ScreeningProfile]:
        stmt = select(ScreeningProfile).where(ScreeningProfile.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(self, profile: ScreeningProfile) -> ScreeningProfile:
        """Insert or replace the tenant's screening profile"""
        merged = await self.session.merge(profile)
        await self.session.flush()
        await self.session.refresh(merged)
        return merged

    async def mark_tenant_screened(self, user_id: UUID) -> Profile:
        profile = await self.session.get(Profile, user_id)
        if profile is None:
            profile = Profile(user_id=user_id)
        profile.is_tenant_screened = True
        self.session.add(profile)
        await self.session.flush()
        return profile
