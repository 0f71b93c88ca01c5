from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, List, Optional
from uuid import UUID

from src.domain.entities import Application, ApplicationStatus


class IApplicationRepository(ABC):
    """Application repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, application_id: UUID) -> Optional[Application]:
        """Get application by ID"""
        pass

    @abstractmethod
    async def get_active_for_pair(
        self, tenant_id: UUID, property_id: UUID
    ) -> Optional[Application]:
        """Get the application not yet superseded for (tenant, property)"""
        pass

    @abstractmethod
    async def create(self, application: Application) -> Application:
        """Create a new application"""
        pass

    @abstractmethod
    async def supersede(
        self, application_id: UUID, superseded_by_id: UUID, at: datetime
    ) -> bool:
        """Link an active application to its replacement"""
        pass

    @abstractmethod
    async def transition(
        self,
        application_id: UUID,
        expected_statuses: Iterable[ApplicationStatus],
        new_status: ApplicationStatus,
        at: datetime,
    ) -> bool:
        """Set new_status only if the current status is one of expected_statuses"""
        pass

    @abstractmethod
    async def list_for_tenant(self, tenant_id: UUID) -> List[Application]:
        """Active applications submitted by a tenant"""
        pass

    @abstractmethod
    async def list_for_landlord(
        self, landlord_id: UUID, property_id: Optional[UUID] = None
    ) -> List[Application]:
        """Active applications received by a landlord"""
        pass
