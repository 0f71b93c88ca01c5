from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional
from uuid import UUID

from src.domain.entities import Viewing, ViewingStatus


class IViewingRepository(ABC):
    """Viewing repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, viewing_id: UUID) -> Optional[Viewing]:
        """Get viewing by ID"""
        pass

    @abstractmethod
    async def get_by_slot_id(self, slot_id: UUID) -> Optional[Viewing]:
        """Get the open viewing created from a slot booking"""
        pass

    @abstractmethod
    async def create(self, viewing: Viewing) -> Viewing:
        """Create a new viewing"""
        pass

    @abstractmethod
    async def get_application_access(
        self, property_id: UUID, tenant_id: UUID
    ) -> Optional[Viewing]:
        """The viewing through which the landlord sent application access, if any"""
        pass

    @abstractmethod
    async def transition(
        self,
        viewing_id: UUID,
        expected_statuses: Iterable[ViewingStatus],
        require_confirmed: bool = False,
        **values: Any,
    ) -> bool:
        """Apply values only if the viewing is still in one of expected_statuses"""
        pass

    @abstractmethod
    async def list_for_user(
        self, user_id: UUID, property_id: Optional[UUID] = None
    ) -> List[Viewing]:
        """Viewings where the user is landlord or tenant, newest first"""
        pass
