from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.application_invite_repository import ApplicationInviteRepository
from src.adapter.repositories.application_repository import ApplicationRepository
from src.adapter.repositories.audit_event_repository import AuditEventRepository
from src.adapter.repositories.payment_repository import PaymentRepository
from src.adapter.repositories.presence_repository import PresenceRepository
from src.adapter.repositories.screening_profile_repository import ScreeningProfileRepository
from src.adapter.repositories.tenancy_repository import TenancyRepository
from src.adapter.repositories.viewing_repository import ViewingRepository
from src.adapter.repositories.viewing_slot_repository import ViewingSlotRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.slots = ViewingSlotRepository(self.session)
        self.viewings = ViewingRepository(self.session)
        self.invites = ApplicationInviteRepository(self.session)
        self.applications = ApplicationRepository(self.session)
        self.screening_profiles = ScreeningProfileRepository(self.session)
        self.tenancies = TenancyRepository(self.session)
        self.payments = PaymentRepository(self.session)
        self.presence = PresenceRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
