from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.http_collaborators import (
    HttpCreditCheckProvider,
    HttpDocumentGenerator,
    HttpNotificationService,
    HttpPaymentGateway,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import verify_jwt
from src.app.services.credit_check_provider import ICreditCheckProvider
from src.app.services.document_generator import IDocumentGenerator
from src.app.services.notification_service import INotificationService
from src.app.services.payment_gateway import IPaymentGateway
from src.domain.entities import UserRole

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@asynccontextmanager
async def new_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_unit_of_work_factory():
    """Opens a fresh session for work that outlives the request, such as background tasks"""
    return new_unit_of_work


def get_notification_service() -> INotificationService:
    return HttpNotificationService(
        ApplicationConfig.NOTIFICATION_SERVICE_URL,
        timeout=ApplicationConfig.EXTERNAL_TIMEOUT_SECONDS,
    )


def get_document_generator() -> IDocumentGenerator:
    return HttpDocumentGenerator(
        ApplicationConfig.DOCUMENT_SERVICE_URL,
        timeout=ApplicationConfig.EXTERNAL_TIMEOUT_SECONDS,
    )


def get_payment_gateway() -> IPaymentGateway:
    return HttpPaymentGateway(
        ApplicationConfig.PAYMENT_GATEWAY_URL,
        ApplicationConfig.PAYMENT_GATEWAY_SECRET,
        ApplicationConfig.PAYMENT_CURRENCY,
        timeout=ApplicationConfig.EXTERNAL_TIMEOUT_SECONDS,
    )


def get_credit_check_provider() -> Optional[ICreditCheckProvider]:
    # Without a provider, applications stay submitted until the landlord decides
    if not ApplicationConfig.CREDIT_CHECK_URL:
        return None
    return HttpCreditCheckProvider(
        ApplicationConfig.CREDIT_CHECK_URL,
        timeout=ApplicationConfig.EXTERNAL_TIMEOUT_SECONDS,
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing user_id and role

    Raises:
        HTTPException: 401 if token is invalid, expired or carries an unknown role
    """
    token = credentials.credentials
    payload = verify_jwt(token)

    if payload is None or "user_id" not in payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    if payload.get("role") not in {role.value for role in UserRole}:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token carries no marketplace role",
        )

    return payload
