"""
Viewing API Routes
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field, field_validator

from src.api.error import raise_for_error
from src.api.utils.roles import require_role
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.viewings import (
    CancelViewingUseCase,
    CompleteViewingUseCase,
    ConfirmViewingUseCase,
    ListViewingsUseCase,
    RequestViewingUseCase,
    ScheduleViewingUseCase,
    SendApplicationAccessUseCase,
    ViewingListResponse,
    ViewingResponse,
)
from src.depends import get_current_user, get_notification_service, get_unit_of_work
from src.domain.base import as_naive_utc
from src.domain.entities import UserRole

router = APIRouter(prefix="/viewings", tags=["Viewings"])


class RequestViewingRequest(BaseModel):
    property_id: UUID
    landlord_id: UUID
    conversation_id: Optional[UUID] = None
    notes: Optional[str] = Field(default=None, max_length=2000)


class ScheduleViewingRequest(BaseModel):
    scheduled_date: datetime

    @field_validator("scheduled_date")
    @classmethod
    def normalize(cls, value: datetime) -> datetime:
        return as_naive_utc(value)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ViewingResponse)
async def request_viewing(
    request: RequestViewingRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationService = Depends(get_notification_service),
):
    tenant_id = require_role(current_user, UserRole.tenant)

    result = await RequestViewingUseCase(uow, notifier).execute(
        tenant_id,
        request.property_id,
        request.landlord_id,
        conversation_id=request.conversation_id,
        notes=request.notes,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("", response_model=ViewingListResponse)
async def list_viewings(
    property_id: Optional[UUID] = None,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListViewingsUseCase(uow).execute(UUID(current_user["user_id"]), property_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{viewing_id}/schedule", response_model=ViewingResponse)
async def schedule_viewing(
    viewing_id: UUID,
    request: ScheduleViewingRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    landlord_id = require_role(current_user, UserRole.landlord)

    result = await ScheduleViewingUseCase(uow).execute(
        viewing_id, landlord_id, request.scheduled_date
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{viewing_id}/complete", response_model=ViewingResponse)
async def complete_viewing(
    viewing_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    landlord_id = require_role(current_user, UserRole.landlord)

    result = await CompleteViewingUseCase(uow).execute(viewing_id, landlord_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{viewing_id}/confirm", response_model=ViewingResponse)
async def confirm_viewing(
    viewing_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Confirm Viewing

    Raises:
        - 404 Not Found: VIEWING_NOT_FOUND
        - 412 Precondition Failed: VIEWING_NOT_COMPLETED
    """
    landlord_id = require_role(current_user, UserRole.landlord)

    result = await ConfirmViewingUseCase(uow).execute(viewing_id, landlord_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{viewing_id}/send-application", response_model=ViewingResponse)
async def send_application_access(
    viewing_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationService = Depends(get_notification_service),
):
    """
    Send Application Access

    Raises:
        - 404 Not Found: VIEWING_NOT_FOUND
        - 412 Precondition Failed: VIEWING_NOT_CONFIRMED
    """
    landlord_id = require_role(current_user, UserRole.landlord)

    result = await SendApplicationAccessUseCase(uow, notifier).execute(viewing_id, landlord_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{viewing_id}/cancel", response_model=ViewingResponse)
async def cancel_viewing(
    viewing_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationService = Depends(get_notification_service),
):
    actor_id = require_role(current_user, UserRole.landlord, UserRole.tenant)

    result = await CancelViewingUseCase(uow, notifier).execute(viewing_id, actor_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
