from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.viewing_slot_repository import IViewingSlotRepository
from src.domain.entities import SlotStatus, ViewingSlot


class ViewingSlotRepository(IViewingSlotRepository):
    """ViewingSlot repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, slot_id: UUID) -> Optional[ViewingSlot]:
        """Get slot by ID"""
        stmt = (
            select(ViewingSlot)
            .where(ViewingSlot.id == slot_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, slot: ViewingSlot) -> ViewingSlot:
        """Create a new slot"""
        self.session.add(slot)
        await self.session.flush()
        await self.session.refresh(slot)
        return slot

    async def list_available(self, property_id: UUID, now: datetime) -> List[ViewingSlot]:
        """Available future slots for a property, ascending by start_time"""
        stmt = (
            select(ViewingSlot)
            .where(
                ViewingSlot.property_id == property_id,
                ViewingSlot.status == SlotStatus.available,
                ViewingSlot.start_time > now,
            )
            .order_by(ViewingSlot.start_time.asc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_active_booking(
        self, tenant_id: UUID, property_id: UUID
    ) -> Optional[ViewingSlot]:
        """Slot currently booked by the tenant for the property"""
        stmt = (
            select(ViewingSlot)
            .where(
                ViewingSlot.booked_by_tenant_id == tenant_id,
                ViewingSlot.property_id == property_id,
                ViewingSlot.status == SlotStatus.booked,
            )
            .order_by(ViewingSlot.start_time.asc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def count_active_bookings(self, tenant_id: UUID, property_id: UUID) -> int:
        stmt = select(func.count()).select_from(ViewingSlot).where(
            ViewingSlot.booked_by_tenant_id == tenant_id,
            ViewingSlot.property_id == property_id,
            ViewingSlot.status == SlotStatus.booked,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def try_book(self, slot_id: UUID, tenant_id: UUID) -> bool:
        """Compare-and-swap: available -> booked"""
        stmt = (
            update(ViewingSlot)
            .where(ViewingSlot.id == slot_id, ViewingSlot.status == SlotStatus.available)
            .values(status=SlotStatus.booked, booked_by_tenant_id=tenant_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def release(self, slot_id: UUID, tenant_id: UUID) -> bool:
        """Compare-and-swap: booked by tenant -> available"""
        stmt = (
            update(ViewingSlot)
            .where(
                ViewingSlot.id == slot_id,
                ViewingSlot.status == SlotStatus.booked,
                ViewingSlot.booked_by_tenant_id == tenant_id,
            )
            .values(status=SlotStatus.available, booked_by_tenant_id=None)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1
