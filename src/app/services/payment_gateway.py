from abc import ABC, abstractmethod
from decimal import Decimal

from src.domain.entities import Tenancy


class IPaymentGateway(ABC):
    """Payment gateway collaborator"""

    @abstractmethod
    async def initialize(self, reference: str, amount: Decimal, tenancy: Tenancy) -> str:
        """
        Open a checkout for the tenancy's initial payment.

        Success is reported later through the payment webhook, keyed by reference.

        Returns:
            Checkout URL handed to the tenant

        Raises:
            ExternalServiceError: gateway rejected or was unreachable
        """
        pass
