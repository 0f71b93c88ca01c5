"""
Application API Routes

Gate check, submission with screening, and the landlord decision.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, status
from pydantic import BaseModel

from src.api.error import raise_for_error
from src.api.utils.roles import require_role
from src.app.services.credit_check_provider import ICreditCheckProvider
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.applications import (
    ApplicationAccessResponse,
    ApplicationListResponse,
    ApplicationResponse,
    CheckApplicationAccessUseCase,
    ListApplicationsUseCase,
    RequestCreditCheckUseCase,
    ScreeningInput,
    SubmitApplicationUseCase,
    UpdateApplicationStatusRequest,
    UpdateApplicationStatusUseCase,
)
from src.depends import (
    get_credit_check_provider,
    get_current_user,
    get_notification_service,
    get_unit_of_work,
    get_unit_of_work_factory,
)
from src.domain.entities import UserRole

router = APIRouter(prefix="/applications", tags=["Applications"])


async def request_credit_check(
    uow_factory, credit_checks: ICreditCheckProvider, application_id: UUID, tenant_id: UUID
):
    async with uow_factory() as uow:
        await RequestCreditCheckUseCase(uow, credit_checks).execute(application_id, tenant_id)


class SubmitApplicationRequest(BaseModel):
    property_id: UUID
    landlord_id: Optional[UUID] = None
    invite_id: Optional[UUID] = None
    screening: ScreeningInput


@router.get("/access", response_model=ApplicationAccessResponse)
async def check_application_access(
    property_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Whether the tenant may apply, and through which grant"""
    tenant_id = require_role(current_user, UserRole.tenant)

    result = await CheckApplicationAccessUseCase(uow).execute(tenant_id, property_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ApplicationResponse)
async def submit_application(
    request: SubmitApplicationRequest,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    uow_factory=Depends(get_unit_of_work_factory),
    credit_checks: Optional[ICreditCheckProvider] = Depends(get_credit_check_provider),
    notifier: INotificationService = Depends(get_notification_service),
):
    """
    Submit Application

    The application is owned by the landlord who granted access; landlord_id
    is optional and, when given, must match. The credit check is requested
    in the background after the response.

    Raises:
        - 400 Bad Request: SCREENING_CONSENT_REQUIRED
        - 404 Not Found: INVITE_NOT_FOUND
        - 409 Conflict: CONCURRENT_UPDATE
        - 410 Gone: INVITE_EXPIRED
        - 412 Precondition Failed: APPLICATION_GATE_DENIED,
                                   APPLICATION_ALREADY_ACCEPTED, INVITE_ALREADY_USED
    """
    tenant_id = require_role(current_user, UserRole.tenant)

    use_case = SubmitApplicationUseCase(uow, notifier)
    result = await use_case.execute(
        tenant_id,
        request.property_id,
        request.landlord_id,
        request.screening,
        invite_id=request.invite_id,
    )
    if result.is_err():
        raise_for_error(result.error)

    if credit_checks is not None:
        background_tasks.add_task(
            request_credit_check,
            uow_factory,
            credit_checks,
            UUID(result.value.id),
            tenant_id,
        )
    return result.value


@router.get("", response_model=ApplicationListResponse)
async def list_applications(
    property_id: Optional[UUID] = None,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    user_id = require_role(current_user, UserRole.landlord, UserRole.tenant)

    result = await ListApplicationsUseCase(uow).execute(
        user_id, UserRole(current_user["role"]), property_id
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{application_id}/status", response_model=ApplicationResponse)
async def update_application_status(
    application_id: UUID,
    request: UpdateApplicationStatusRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationService = Depends(get_notification_service),
):
    """
    Accept or decline an application

    Raises:
        - 400 Bad Request: INVALID_STATUS
        - 404 Not Found: APPLICATION_NOT_FOUND
        - 412 Precondition Failed: APPLICATION_FINALIZED
    """
    landlord_id = require_role(current_user, UserRole.landlord)

    result = await UpdateApplicationStatusUseCase(uow, notifier).execute(
        application_id, landlord_id, request.status
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
