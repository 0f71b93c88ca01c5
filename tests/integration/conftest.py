from contextlib import asynccontextmanager
from typing import Any, Dict, List, Tuple
from uuid import UUID, uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.credit_check_provider import ICreditCheckProvider
from src.app.services.document_generator import IDocumentGenerator
from src.app.services.exceptions import ExternalServiceError
from src.app.services.notification_service import INotificationService
from src.app.services.payment_gateway import IPaymentGateway
from src.depends import (
    get_credit_check_provider,
    get_document_generator,
    get_notification_service,
    get_payment_gateway,
    get_unit_of_work,
    get_unit_of_work_factory,
)
from tests.integration.helpers import auth_headers


class RecordingNotifier(INotificationService):
    def __init__(self):
        self.sent: List[Tuple[UUID, str, Dict[str, Any]]] = []
        self.fail = False

    async def notify(self, recipient_id, event_type, payload):
        if self.fail:
            raise ExternalServiceError("notifications", "unavailable")
        self.sent.append((recipient_id, event_type, payload))

    def events(self) -> List[str]:
        return [event_type for _, event_type, _ in self.sent]


class FakeDocumentGenerator(IDocumentGenerator):
    def __init__(self):
        self.fail = False

    async def generate_lease(self, tenancy):
        if self.fail:
            raise ExternalServiceError("documents", "renderer down")
        return f"leases/{tenancy.id}.pdf"


class FakePaymentGateway(IPaymentGateway):
    def __init__(self):
        self.initialized: List[Tuple[str, Any]] = []

    async def initialize(self, reference, amount, tenancy):
        self.initialized.append((reference, amount))
        return f"https://checkout.test/{reference}"


class FakeCreditCheckProvider(ICreditCheckProvider):
    def __init__(self):
        self.requested: List[UUID] = []
        self.fail = False

    async def request_check(self, application_id, tenant_id):
        if self.fail:
            raise ExternalServiceError("credit_check", "provider down")
        self.requested.append(application_id)


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def documents():
    return FakeDocumentGenerator()


@pytest.fixture
def gateway():
    return FakePaymentGateway()


@pytest.fixture
def credit_checks():
    return FakeCreditCheckProvider()


@pytest_asyncio.fixture
async def client(db_session, session_factory, notifier, documents, gateway, credit_checks):
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    @asynccontextmanager
    async def background_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_unit_of_work_factory] = lambda: background_unit_of_work
    app.dependency_overrides[get_notification_service] = lambda: notifier
    app.dependency_overrides[get_document_generator] = lambda: documents
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    app.dependency_overrides[get_credit_check_provider] = lambda: credit_checks

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def landlord():
    user_id = uuid4()
    return user_id, auth_headers(user_id, "landlord")


@pytest.fixture
def tenant():
    user_id = uuid4()
    return user_id, auth_headers(user_id, "tenant")


@pytest.fixture
def other_tenant():
    user_id = uuid4()
    return user_id, auth_headers(user_id, "tenant")
