from abc import ABC, abstractmethod
from typing import Any, Dict
from uuid import UUID


class INotificationService(ABC):
    """Fire-and-forget message dispatch. No delivery guarantee."""

    @abstractmethod
    async def notify(
        self, recipient_id: UUID, event_type: str, payload: Dict[str, Any]
    ) -> None:
        """Dispatch an event to a recipient. Raises ExternalServiceError on failure."""
        pass
