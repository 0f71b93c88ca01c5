"""
PresenceHeartbeat Entity

Last time a user's client asserted it was alive. Online is derived from
last_seen_at, never stored.
"""

from datetime import datetime
from uuid import UUID

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class PresenceHeartbeat(SQLModel, table=True):
    __tablename__ = "presence_heartbeats"

    user_id: UUID = Field(primary_key=True)
    last_seen_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
