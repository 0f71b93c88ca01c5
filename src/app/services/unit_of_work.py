from abc import ABC, abstractmethod

from src.app.repositories.application_invite_repository import IApplicationInviteRepository
from src.app.repositories.application_repository import IApplicationRepository
from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.app.repositories.payment_repository import IPaymentRepository
from src.app.repositories.presence_repository import IPresenceRepository
from src.app.repositories.screening_profile_repository import IScreeningProfileRepository
from src.app.repositories.tenancy_repository import ITenancyRepository
from src.app.repositories.viewing_repository import IViewingRepository
from src.app.repositories.viewing_slot_repository import IViewingSlotRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    slots: IViewingSlotRepository
    viewings: IViewingRepository
    invites: IApplicationInviteRepository
    applications: IApplicationRepository
    screening_profiles: IScreeningProfileRepository
    tenancies: ITenancyRepository
    payments: IPaymentRepository
    presence: IPresenceRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
