from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.presence_repository import IPresenceRepository
from src.domain.entities import PresenceHeartbeat


class PresenceRepository(IPresenceRepository):
    """Presence heartbeat repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, user_id: UUID) -> Optional[PresenceHeartbeat]:
        return await self.session.get(PresenceHeartbeat, user_id)

    async def touch(self, user_id: UUID, at: datetime) -> PresenceHeartbeat:
        heartbeat = await self.session.get(PresenceHeartbeat, user_id)
        if heartbeat is None:
            heartbeat = PresenceHeartbeat(user_id=user_id, last_seen_at=at)
        else:
            heartbeat.last_seen_at = at
        self.session.add(heartbeat)
        await self.session.flush()
        return heartbeat
