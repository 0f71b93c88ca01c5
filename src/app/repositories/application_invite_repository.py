from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import ApplicationInvite


class IApplicationInviteRepository(ABC):
    """ApplicationInvite repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invite_id: UUID) -> Optional[ApplicationInvite]:
        """Get invite by ID"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[ApplicationInvite]:
        """Get invite by token"""
        pass

    @abstractmethod
    async def get_live_for_pair(
        self, property_id: UUID, tenant_id: UUID, now: datetime
    ) -> Optional[ApplicationInvite]:
        """Get the unexpired invited invite for (property, tenant)"""
        pass

    @abstractmethod
    async def count_live_for_pair(
        self, property_id: UUID, tenant_id: UUID, now: datetime
    ) -> int:
        """Number of unexpired invited invites for (property, tenant)"""
        pass

    @abstractmethod
    async def list_live_for_tenant(
        self, tenant_id: UUID, now: datetime
    ) -> List[ApplicationInvite]:
        """All unexpired invited invites for a tenant, newest first"""
        pass

    @abstractmethod
    async def create(self, invite: ApplicationInvite) -> ApplicationInvite:
        """Create a new invite"""
        pass

    @abstractmethod
    async def update(self, invite: ApplicationInvite) -> ApplicationInvite:
        """Update existing invite"""
        pass

    @abstractmethod
    async def mark_used(self, invite_id: UUID, used_at: datetime) -> bool:
        """Mark invite used only if it is still invited and unexpired"""
        pass
