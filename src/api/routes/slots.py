"""
Viewing Slot API Routes

Landlords publish slots; tenants book, cancel and reschedule them.
"""

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field, field_validator

from src.api.error import raise_for_error
from src.api.utils.roles import require_role
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.slots import (
    ActiveBookingResponse,
    BookingResponse,
    BookSlotUseCase,
    CancelBookingResponse,
    CancelBookingUseCase,
    CreateSlotUseCase,
    GetActiveBookingUseCase,
    ListAvailableSlotsUseCase,
    RescheduleBookingUseCase,
    SlotListResponse,
    SlotResponse,
)
from src.depends import get_current_user, get_notification_service, get_unit_of_work
from src.domain.base import as_naive_utc
from src.domain.entities import UserRole

router = APIRouter(prefix="/slots", tags=["Viewing Slots"])


class CreateSlotRequest(BaseModel):
    property_id: UUID
    start_time: datetime
    end_time: datetime

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize(cls, value: datetime) -> datetime:
        return as_naive_utc(value)


class RescheduleRequest(BaseModel):
    new_slot_id: UUID = Field(..., description="Slot to move the booking to")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SlotResponse)
async def create_slot(
    request: CreateSlotRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Viewing Slot

    Raises:
        - 400 Bad Request: INVALID_TIME_RANGE
        - 403 Forbidden: caller is not a landlord
        - 412 Precondition Failed: SLOT_IN_PAST
    """
    landlord_id = require_role(current_user, UserRole.landlord)

    result = await CreateSlotUseCase(uow).execute(
        landlord_id, request.property_id, request.start_time, request.end_time
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/available", response_model=SlotListResponse)
async def list_available_slots(
    property_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Future, unbooked slots for a property, earliest first"""
    result = await ListAvailableSlotsUseCase(uow).execute(property_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/booking", response_model=ActiveBookingResponse)
async def get_active_booking(
    property_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    tenant_id = require_role(current_user, UserRole.tenant)

    result = await GetActiveBookingUseCase(uow).execute(tenant_id, property_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{slot_id}/book", response_model=BookingResponse)
async def book_slot(
    slot_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationService = Depends(get_notification_service),
):
    """
    Book Viewing Slot

    Raises:
        - 403 Forbidden: caller is not a tenant
        - 404 Not Found: SLOT_NOT_FOUND
        - 409 Conflict: SLOT_UNAVAILABLE (someone else booked it first)
        - 412 Precondition Failed: ACTIVE_BOOKING_EXISTS, SLOT_IN_PAST
    """
    tenant_id = require_role(current_user, UserRole.tenant)

    result = await BookSlotUseCase(uow, notifier).execute(tenant_id, slot_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/booking", response_model=CancelBookingResponse)
async def cancel_booking(
    property_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationService = Depends(get_notification_service),
):
    tenant_id = require_role(current_user, UserRole.tenant)

    result = await CancelBookingUseCase(uow, notifier).execute(tenant_id, property_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{slot_id}/reschedule", response_model=BookingResponse)
async def reschedule_booking(
    slot_id: UUID,
    request: RescheduleRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationService = Depends(get_notification_service),
):
    """
    Move a booking from slot_id to new_slot_id in one transaction.

    Raises:
        - 400 Bad Request: INVALID_RESCHEDULE, SLOT_PROPERTY_MISMATCH
        - 404 Not Found: BOOKING_NOT_FOUND, SLOT_NOT_FOUND
        - 409 Conflict: SLOT_UNAVAILABLE (old booking is kept)
    """
    tenant_id = require_role(current_user, UserRole.tenant)

    result = await RescheduleBookingUseCase(uow, notifier).execute(
        tenant_id, slot_id, request.new_slot_id
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
