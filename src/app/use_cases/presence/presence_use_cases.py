"""
Presence Use Cases

A user is online while their client keeps sending heartbeats.
"""

from datetime import timedelta
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow

from .dtos import PresenceResponse


class RecordHeartbeatUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[PresenceResponse]:
        now = utcnow()
        async with self.uow:
            heartbeat = await self.uow.presence.touch(user_id, now)
            await self.uow.commit()
            return Return.ok(
                PresenceResponse(
                    user_id=str(user_id),
                    online=True,
                    last_seen_at=heartbeat.last_seen_at.isoformat(),
                )
            )


class GetPresenceUseCase:
    def __init__(self, uow: UnitOfWork, online_threshold_seconds: int = 120):
        self.uow = uow
        self.online_threshold_seconds = online_threshold_seconds

    async def execute(self, user_id: UUID) -> Result[PresenceResponse]:
        async with self.uow:
            heartbeat = await self.uow.presence.get(user_id)
            if heartbeat is None:
                return Return.ok(PresenceResponse(user_id=str(user_id), online=False))

            threshold = timedelta(seconds=self.online_threshold_seconds)
            return Return.ok(
                PresenceResponse(
                    user_id=str(user_id),
                    online=utcnow() - heartbeat.last_seen_at < threshold,
                    last_seen_at=heartbeat.last_seen_at.isoformat(),
                )
            )
