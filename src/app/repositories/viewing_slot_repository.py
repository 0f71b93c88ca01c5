from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import ViewingSlot


class IViewingSlotRepository(ABC):
    """ViewingSlot repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, slot_id: UUID) -> Optional[ViewingSlot]:
        """Get slot by ID"""
        pass

    @abstractmethod
    async def create(self, slot: ViewingSlot) -> ViewingSlot:
        """Create a new slot"""
        pass

    @abstractmethod
    async def list_available(self, property_id: UUID, now: datetime) -> List[ViewingSlot]:
        """Available future slots for a property, ascending by start_time"""
        pass

    @abstractmethod
    async def get_active_booking(
        self, tenant_id: UUID, property_id: UUID
    ) -> Optional[ViewingSlot]:
        """Slot currently booked by the tenant for the property"""
        pass

    @abstractmethod
    async def count_active_bookings(self, tenant_id: UUID, property_id: UUID) -> int:
        """Number of slots the tenant currently holds for the property"""
        pass

    @abstractmethod
    async def try_book(self, slot_id: UUID, tenant_id: UUID) -> bool:
        """Book the slot only if it is still available. Returns False if the race was lost."""
        pass

    @abstractmethod
    async def release(self, slot_id: UUID, tenant_id: UUID) -> bool:
        """Release the slot only if it is still booked by the tenant"""
        pass
