from typing import Any, Iterable, List, Optional
from uuid import UUID

from sqlalchemy import or_, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.viewing_repository import IViewingRepository
from src.domain.base import utcnow
from src.domain.entities import Viewing, ViewingStatus


class ViewingRepository(IViewingRepository):
    """Viewing repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, viewing_id: UUID) -> Optional[Viewing]:
        """Get viewing by ID"""
        stmt = (
            select(Viewing)
            .where(Viewing.id == viewing_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_slot_id(self, slot_id: UUID) -> Optional[Viewing]:
        """Get the open viewing created from a slot booking"""
        stmt = (
            select(Viewing)
            .where(
                Viewing.slot_id == slot_id,
                Viewing.status.in_([ViewingStatus.requested, ViewingStatus.scheduled]),
            )
            .order_by(Viewing.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, viewing: Viewing) -> Viewing:
        """Create a new viewing"""
        self.session.add(viewing)
        await self.session.flush()
        await self.session.refresh(viewing)
        return viewing

    async def get_application_access(
        self, property_id: UUID, tenant_id: UUID
    ) -> Optional[Viewing]:
        stmt = (
            select(Viewing)
            .where(
                Viewing.property_id == property_id,
                Viewing.tenant_id == tenant_id,
                Viewing.application_sent == True,  # noqa: E712
            )
            .order_by(Viewing.completed_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def transition(
        self,
        viewing_id: UUID,
        expected_statuses: Iterable[ViewingStatus],
        require_confirmed: bool = False,
        **values: Any,
    ) -> bool:
        """Guarded update: only touches the row if it is still in an expected state"""
        conditions = [Viewing.id == viewing_id, Viewing.status.in_(list(expected_statuses))]
        if require_confirmed:
            conditions.append(Viewing.viewing_confirmed == True)  # noqa: E712
        stmt = (
            update(Viewing)
            .where(*conditions)
            .values(updated_at=utcnow(), **values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def list_for_user(
        self, user_id: UUID, property_id: Optional[UUID] = None
    ) -> List[Viewing]:
        stmt = select(Viewing).where(
            or_(Viewing.landlord_id == user_id, Viewing.tenant_id == user_id)
        )
        if property_id is not None:
            stmt = stmt.where(Viewing.property_id == property_id)
        stmt = stmt.order_by(Viewing.created_at.desc()).execution_options(populate_existing=True)
        result = await self.session.exec(stmt)
        return list(result.all())
