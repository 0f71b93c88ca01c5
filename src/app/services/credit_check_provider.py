from abc import ABC, abstractmethod
from uuid import UUID


class ICreditCheckProvider(ABC):
    """Credit check collaborator. Results arrive through the credit-check webhook."""

    @abstractmethod
    async def request_check(self, application_id: UUID, tenant_id: UUID) -> None:
        """Queue a credit check. Raises ExternalServiceError on failure."""
        pass
