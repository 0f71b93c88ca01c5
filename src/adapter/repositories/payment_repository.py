from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.payment_repository import IPaymentRepository
from src.domain.entities import Payment, PaymentStatus


class PaymentRepository(IPaymentRepository):
    """Payment repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, payment: Payment) -> Payment:
        self.session.add(payment)
        await self.session.flush()
        await self.session.refresh(payment)
        return payment

    async def get_by_reference(self, reference: str) -> List[Payment]:
        stmt = (
            select(Payment)
            .where(Payment.reference == reference)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_tenancy(self, tenancy_id: UUID) -> List[Payment]:
        stmt = (
            select(Payment)
            .where(Payment.tenancy_id == tenancy_id)
            .order_by(Payment.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def mark(
        self, reference: str, status: PaymentStatus, paid_at: Optional[datetime]
    ) -> int:
        stmt = (
            update(Payment)
            .where(Payment.reference == reference, Payment.status == PaymentStatus.pending)
            .values(status=status, paid_at=paid_at)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount
