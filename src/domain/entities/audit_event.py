"""
AuditEvent Entity

Immutable log of every workflow state transition.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class AuditEvent(SQLModel, table=True):
    """
    AuditEvent entity - immutable log of workflow transitions.

    Business Rules:
    - Immutable (never updated or deleted)
    - Written in the same transaction as the transition it records
    - actor_id is nullable for provider callbacks (credit check, payments)
    """

    __tablename__ = "audit_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    actor_id: Optional[UUID] = Field(default=None, index=True)
    entity_type: str = Field(max_length=50)  # e.g., "viewing_slot", "tenancy"
    entity_id: UUID = Field(nullable=False)

    action: str = Field(max_length=100)  # e.g., "slot_booked", "lease_signed"
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_audit_created_at", "created_at"),
        Index("idx_audit_entity", "entity_type", "entity_id"),
        Index("idx_audit_actor_id", "actor_id"),
    )
