from datetime import date, timedelta
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.domain.base import utcnow
from src.domain.entities import (
    Application,
    ApplicationStatus,
    LeaseStatus,
    SlotStatus,
    Tenancy,
    Viewing,
    ViewingSlot,
    ViewingStatus,
)


def _returns_argument(entity):
    return entity


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Repositories: creates echo the entity, guarded updates succeed, lookups miss
    uow.slots = AsyncMock()
    uow.slots.create.side_effect = _returns_argument
    uow.slots.get_active_booking.return_value = None
    uow.slots.try_book.return_value = True
    uow.slots.count_active_bookings.return_value = 1
    uow.slots.release.return_value = True

    uow.viewings = AsyncMock()
    uow.viewings.create.side_effect = _returns_argument
    uow.viewings.get_by_slot_id.return_value = None
    uow.viewings.get_application_access.return_value = None
    uow.viewings.transition.return_value = True

    uow.invites = AsyncMock()
    uow.invites.create.side_effect = _returns_argument
    uow.invites.update.side_effect = _returns_argument
    uow.invites.get_live_for_pair.return_value = None
    uow.invites.count_live_for_pair.return_value = 1
    uow.invites.mark_used.return_value = True

    uow.applications = AsyncMock()
    uow.applications.create.side_effect = _returns_argument
    uow.applications.get_active_for_pair.return_value = None
    uow.applications.supersede.return_value = True
    uow.applications.transition.return_value = True

    uow.screening_profiles = AsyncMock()
    uow.screening_profiles.upsert.side_effect = _returns_argument

    uow.tenancies = AsyncMock()
    uow.tenancies.create.side_effect = _returns_argument
    uow.tenancies.get_by_application_id.return_value = None
    uow.tenancies.find_overlapping.return_value = None
    uow.tenancies.transition.return_value = True

    uow.payments = AsyncMock()
    uow.payments.create.side_effect = _returns_argument
    uow.payments.list_by_tenancy.return_value = []
    uow.payments.get_by_reference.return_value = []

    uow.presence = AsyncMock()
    uow.presence.get.return_value = None

    uow.audit_events = AsyncMock()
    uow.audit_events.create.side_effect = _returns_argument
    return uow


@pytest.fixture
def notifier():
    return AsyncMock()


@pytest.fixture
def make_slot():
    def factory(**overrides):
        start = utcnow() + timedelta(days=1)
        values = dict(
            id=uuid4(),
            property_id=uuid4(),
            landlord_id=uuid4(),
            start_time=start,
            end_time=start + timedelta(minutes=30),
            status=SlotStatus.available,
        )
        values.update(overrides)
        return ViewingSlot(**values)

    return factory


@pytest.fixture
def make_viewing():
    def factory(**overrides):
        values = dict(
            id=uuid4(),
            property_id=uuid4(),
            landlord_id=uuid4(),
            tenant_id=uuid4(),
            status=ViewingStatus.scheduled,
        )
        values.update(overrides)
        return Viewing(**values)

    return factory


@pytest.fixture
def make_application():
    def factory(**overrides):
        values = dict(
            id=uuid4(),
            tenant_id=uuid4(),
            landlord_id=uuid4(),
            property_id=uuid4(),
            status=ApplicationStatus.pending,
        )
        values.update(overrides)
        return Application(**values)

    return factory


@pytest.fixture
def make_tenancy():
    def factory(**overrides):
        values = dict(
            id=uuid4(),
            property_id=uuid4(),
            landlord_id=uuid4(),
            tenant_id=uuid4(),
            monthly_rent=Decimal("1500.00"),
            security_deposit=Decimal("3000.00"),
            start_date=date(2030, 1, 1),
            end_date=date(2030, 12, 31),
            lease_status=LeaseStatus.draft,
        )
        values.update(overrides)
        return Tenancy(**values)

    return factory
