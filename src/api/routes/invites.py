"""
Application Invite API Routes
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.api.utils.roles import require_role
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invites import (
    InviteListResponse,
    InviteResponse,
    IssueInviteUseCase,
    ListInvitesUseCase,
    RedeemInviteResponse,
    RedeemInviteUseCase,
    ResendInviteUseCase,
    RevokeInviteUseCase,
)
from src.depends import get_current_user, get_notification_service, get_unit_of_work
from src.domain.entities import UserRole

router = APIRouter(prefix="/invites", tags=["Invites"])


class IssueInviteRequest(BaseModel):
    property_id: UUID
    tenant_id: UUID
    conversation_id: Optional[UUID] = None


class RedeemInviteRequest(BaseModel):
    token: str = Field(..., min_length=1, max_length=64, description="Invite token")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=InviteResponse)
async def issue_invite(
    request: IssueInviteRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationService = Depends(get_notification_service),
):
    """
    Invite a tenant to apply without a viewing

    Raises:
        - 403 Forbidden: caller is not a landlord
        - 409 Conflict: INVITE_ALREADY_EXISTS
    """
    landlord_id = require_role(current_user, UserRole.landlord)

    use_case = IssueInviteUseCase(
        uow, notifier, validity_hours=ApplicationConfig.INVITE_VALIDITY_HOURS
    )
    result = await use_case.execute(
        landlord_id, request.property_id, request.tenant_id, request.conversation_id
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("", response_model=InviteListResponse)
async def list_invites(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    tenant_id = require_role(current_user, UserRole.tenant)

    result = await ListInvitesUseCase(uow).execute(tenant_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/redeem", response_model=RedeemInviteResponse)
async def redeem_invite(
    request: RedeemInviteRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Resolve an invite token. The invite is consumed only on application submit.

    Raises:
        - 404 Not Found: INVITE_NOT_FOUND (unknown or another tenant's token)
        - 410 Gone: INVITE_EXPIRED
        - 412 Precondition Failed: INVITE_ALREADY_USED
    """
    tenant_id = require_role(current_user, UserRole.tenant)

    result = await RedeemInviteUseCase(uow).execute(request.token, tenant_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{invite_id}/resend", response_model=InviteResponse)
async def resend_invite(
    invite_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationService = Depends(get_notification_service),
):
    landlord_id = require_role(current_user, UserRole.landlord)

    use_case = ResendInviteUseCase(
        uow, notifier, validity_hours=ApplicationConfig.INVITE_VALIDITY_HOURS
    )
    result = await use_case.execute(invite_id, landlord_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{invite_id}/revoke", response_model=InviteResponse)
async def revoke_invite(
    invite_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    landlord_id = require_role(current_user, UserRole.landlord)

    result = await RevokeInviteUseCase(uow).execute(invite_id, landlord_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
