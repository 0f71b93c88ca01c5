from datetime import date
from typing import Any, List, Optional
from uuid import UUID

from sqlalchemy import or_, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.tenancy_repository import ITenancyRepository
from src.domain.base import utcnow
from src.domain.entities import LeaseStatus, Tenancy


class TenancyRepository(ITenancyRepository):
    """Tenancy repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, tenancy_id: UUID) -> Optional[Tenancy]:
        """Get tenancy by ID"""
        stmt = (
            select(Tenancy)
            .where(Tenancy.id == tenancy_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_application_id(self, application_id: UUID) -> Optional[Tenancy]:
        stmt = (
            select(Tenancy)
            .where(Tenancy.application_id == application_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_overlapping(
        self,
        landlord_id: UUID,
        tenant_id: UUID,
        property_id: UUID,
        start_date: date,
        end_date: Optional[date],
    ) -> Optional[Tenancy]:
        """
        Two date ranges overlap when each starts before the other ends.
        An open end_date extends indefinitely.
        """
        stmt = select(Tenancy).where(
            Tenancy.landlord_id == landlord_id,
            Tenancy.tenant_id == tenant_id,
            Tenancy.property_id == property_id,
            or_(Tenancy.end_date == None, Tenancy.end_date >= start_date),  # noqa: E711
        )
        if end_date is not None:
            stmt = stmt.where(Tenancy.start_date <= end_date)
        stmt = stmt.order_by(Tenancy.created_at.asc()).execution_options(populate_existing=True)
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, tenancy: Tenancy) -> Tenancy:
        """Create a new tenancy, or return the one already opened for its application"""
        application_id = tenancy.application_id
        self.session.add(tenancy)
        try:
            await self.session.flush()
        except IntegrityError:
            if application_id is None:
                raise
            await self.session.rollback()
            existing = await self.get_by_application_id(application_id)
            if existing is None:
                raise
            return existing
        await self.session.refresh(tenancy)
        return tenancy

    async def transition(
        self, tenancy_id: UUID, expected_status: LeaseStatus, **values: Any
    ) -> bool:
        """Guarded lease_status update"""
        stmt = (
            update(Tenancy)
            .where(Tenancy.id == tenancy_id, Tenancy.lease_status == expected_status)
            .values(updated_at=utcnow(), **values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def list_for_user(self, user_id: UUID) -> List[Tenancy]:
        stmt = (
            select(Tenancy)
            .where(or_(Tenancy.landlord_id == user_id, Tenancy.tenant_id == user_id))
            .order_by(Tenancy.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
