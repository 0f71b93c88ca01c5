from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import PresenceHeartbeat


class IPresenceRepository(ABC):
    """Presence heartbeat repository interface - application layer"""

    @abstractmethod
    async def get(self, user_id: UUID) -> Optional[PresenceHeartbeat]:
        """Get last heartbeat for a user"""
        pass

    @abstractmethod
    async def touch(self, user_id: UUID, at: datetime) -> PresenceHeartbeat:
        """Record a heartbeat"""
        pass
