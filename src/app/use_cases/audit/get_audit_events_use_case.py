"""
Get Audit Events Use Case

Retrieves the workflow transitions a user performed, with pagination.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

MAX_PAGE_SIZE = 200


class GetAuditEventsUseCase:
    """
    Use case for retrieving a user's audit trail.

    Business Rules:
    - Results are actor-scoped (only events the caller triggered)
    - Results ordered by newest first
    - Supports cursor-based pagination
    - Each event includes entity, action, timestamp, metadata
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor_id: UUID,
        limit: int = 50,
        cursor: Optional[str] = None,
    ) -> Result[Dict[str, Any]]:
        """
        Execute get audit events use case.

        Args:
            actor_id: User UUID from JWT
            limit: Maximum number of events to return
            cursor: Pagination cursor (optional)

        Returns:
            Result with events list and next_cursor, or Error
        """
        if limit < 1 or limit > MAX_PAGE_SIZE:
            return Return.err(
                Error("INVALID_PAGE_SIZE", f"limit must be between 1 and {MAX_PAGE_SIZE}")
            )

        async with self.uow:
            events, next_cursor = await self.uow.audit_events.get_by_actor_paginated(
                actor_id, limit=limit, cursor=cursor
            )

            events_list = [
                {
                    "entity_type": event.entity_type,
                    "entity_id": str(event.entity_id),
                    "action": event.action,
                    "timestamp": event.created_at.isoformat() + "Z",
                    "metadata": event.event_metadata or {},
                }
                for event in events
            ]

            return Return.ok({"events": events_list, "next_cursor": next_cursor})
