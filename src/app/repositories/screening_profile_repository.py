from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Profile, ScreeningProfile


class IScreeningProfileRepository(ABC):
    """Screening profile repository interface - application layer"""

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> Optional[ScreeningProfile]:
        """Get a tenant's screening profile"""
        pass

    @abstractmethod
    async def upsert(self, profile: ScreeningProfile) -> ScreeningProfile:
        """Insert or replace the tenant's screening profile"""
        pass

    @abstractmethod
    async def mark_tenant_screened(self, user_id: UUID) -> Profile:
        """Set is_tenant_screened on the marketplace profile, creating it if needed"""
        pass
