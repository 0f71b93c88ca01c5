from abc import ABC, abstractmethod

from src.domain.entities import Tenancy


class IDocumentGenerator(ABC):
    """Lease document generation collaborator"""

    @abstractmethod
    async def generate_lease(self, tenancy: Tenancy) -> str:
        """
        Render and store the lease document for a tenancy.

        Expected to be idempotent by tenancy id.

        Returns:
            Stored document path

        Raises:
            ExternalServiceError: generation or storage failed
        """
        pass
