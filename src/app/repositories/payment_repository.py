from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Payment, PaymentStatus


class IPaymentRepository(ABC):
    """Payment repository interface - application layer"""

    @abstractmethod
    async def create(self, payment: Payment) -> Payment:
        """Record a pending payment"""
        pass

    @abstractmethod
    async def get_by_reference(self, reference: str) -> List[Payment]:
        """All payment rows sharing a gateway reference"""
        pass

    @abstractmethod
    async def list_by_tenancy(self, tenancy_id: UUID) -> List[Payment]:
        """All payments for a tenancy"""
        pass

    @abstractmethod
    async def mark(
        self, reference: str, status: PaymentStatus, paid_at: Optional[datetime]
    ) -> int:
        """Move pending rows for a reference to status. Returns rows changed."""
        pass
