from datetime import datetime
from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.application_repository import IApplicationRepository
from src.domain.entities import Application, ApplicationStatus


class ApplicationRepository(IApplicationRepository):
    """Application repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, application_id: UUID) -> Optional[Application]:
        """Get application by ID"""
        stmt = (
            select(Application)
            .where(Application.id == application_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active_for_pair(
        self, tenant_id: UUID, property_id: UUID
    ) -> Optional[Application]:
        stmt = (
            select(Application)
            .where(
                Application.tenant_id == tenant_id,
                Application.property_id == property_id,
                Application.superseded_by_id == None,  # noqa: E711
            )
            .order_by(Application.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, application: Application) -> Application:
        """Create a new application"""
        self.session.add(application)
        await self.session.flush()
        await self.session.refresh(application)
        return application

    async def supersede(
        self, application_id: UUID, superseded_by_id: UUID, at: datetime
    ) -> bool:
        stmt = (
            update(Application)
            .where(
                Application.id == application_id,
                Application.superseded_by_id == None,  # noqa: E711
                Application.status != ApplicationStatus.accepted,
            )
            .values(superseded_by_id=superseded_by_id, superseded_at=at, updated_at=at)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def transition(
        self,
        application_id: UUID,
        expected_statuses: Iterable[ApplicationStatus],
        new_status: ApplicationStatus,
        at: datetime,
    ) -> bool:
        """Guarded status update"""
        stmt = (
            update(Application)
            .where(
                Application.id == application_id,
                Application.status.in_(list(expected_statuses)),
            )
            .values(status=new_status, updated_at=at)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def list_for_tenant(self, tenant_id: UUID) -> List[Application]:
        stmt = (
            select(Application)
            .where(
                Application.tenant_id == tenant_id,
                Application.superseded_by_id == None,  # noqa: E711
            )
            .order_by(Application.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_for_landlord(
        self, landlord_id: UUID, property_id: Optional[UUID] = None
    ) -> List[Application]:
        stmt = select(Application).where(
            Application.landlord_id == landlord_id,
            Application.superseded_by_id == None,  # noqa: E711
        )
        if property_id is not None:
            stmt = stmt.where(Application.property_id == property_id)
        stmt = stmt.order_by(Application.created_at.desc()).execution_options(
            populate_existing=True
        )
        result = await self.session.exec(stmt)
        return list(result.all())
