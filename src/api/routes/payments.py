"""
Payment API Routes
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.api.utils.roles import require_role
from src.app.services.payment_gateway import IPaymentGateway
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.payments import (
    InitialPaymentResponse,
    ListPaymentsUseCase,
    PaymentListResponse,
    RequestInitialPaymentUseCase,
)
from src.depends import get_current_user, get_payment_gateway, get_unit_of_work
from src.domain.entities import UserRole

router = APIRouter(prefix="/tenancies/{tenancy_id}/payments", tags=["Payments"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=InitialPaymentResponse)
async def request_initial_payment(
    tenancy_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: IPaymentGateway = Depends(get_payment_gateway),
):
    """
    Open a checkout for deposit plus first month's rent

    Raises:
        - 404 Not Found: TENANCY_NOT_FOUND
        - 409 Conflict: PAYMENT_ALREADY_COMPLETED
        - 412 Precondition Failed: LEASE_NOT_COMPLETED
        - 502 Bad Gateway: EXTERNAL_SERVICE_FAILURE
    """
    user_id = require_role(current_user, UserRole.landlord, UserRole.tenant)

    result = await RequestInitialPaymentUseCase(uow, gateway).execute(tenancy_id, user_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("", response_model=PaymentListResponse)
async def list_payments(
    tenancy_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListPaymentsUseCase(uow).execute(tenancy_id, UUID(current_user["user_id"]))
    if result.is_err():
        raise_for_error(result.error)
    return result.value
