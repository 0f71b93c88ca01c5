from abc import ABC, abstractmethod
from datetime import date
from typing import Any, List, Optional
from uuid import UUID

from src.domain.entities import LeaseStatus, Tenancy


class ITenancyRepository(ABC):
    """Tenancy repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, tenancy_id: UUID) -> Optional[Tenancy]:
        """Get tenancy by ID"""
        pass

    @abstractmethod
    async def get_by_application_id(self, application_id: UUID) -> Optional[Tenancy]:
        """Tenancy opened from the application, if any"""
        pass

    @abstractmethod
    async def find_overlapping(
        self,
        landlord_id: UUID,
        tenant_id: UUID,
        property_id: UUID,
        start_date: date,
        end_date: Optional[date],
    ) -> Optional[Tenancy]:
        """Existing tenancy for the same parties whose dates overlap"""
        pass

    @abstractmethod
    async def create(self, tenancy: Tenancy) -> Tenancy:
        """
        Create a new tenancy. If another tenancy already holds the same
        application_id, that one is returned instead and the unit of work is
        rolled back, so this must be its first write.
        """
        pass

    @abstractmethod
    async def transition(
        self, tenancy_id: UUID, expected_status: LeaseStatus, **values: Any
    ) -> bool:
        """Apply values only if lease_status still equals expected_status"""
        pass

    @abstractmethod
    async def list_for_user(self, user_id: UUID) -> List[Tenancy]:
        """Tenancies where the user is landlord or tenant"""
        pass
