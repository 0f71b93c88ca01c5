"""
Tenancy API Routes

Lease creation, document generation and the dual signature flow.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.api.error import raise_for_error
from src.api.utils.roles import require_role
from src.app.services.document_generator import IDocumentGenerator
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tenancies import (
    GetTenancyUseCase,
    LandlordSignLeaseUseCase,
    LeaseTermsInput,
    ListTenanciesUseCase,
    RequestDocumentGenerationUseCase,
    StartLeaseUseCase,
    TenancyListResponse,
    TenancyResponse,
    TenantSignLeaseUseCase,
)
from src.depends import (
    get_current_user,
    get_document_generator,
    get_notification_service,
    get_unit_of_work,
)
from src.domain.entities import UserRole

router = APIRouter(prefix="/tenancies", tags=["Tenancies"])


class StartLeaseRequest(BaseModel):
    application_id: UUID
    terms: LeaseTermsInput


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TenancyResponse)
async def start_lease(
    request: StartLeaseRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Start a draft lease from an accepted application. Safe to retry.

    Raises:
        - 400 Bad Request: INVALID_LEASE_TERMS
        - 404 Not Found: APPLICATION_NOT_FOUND
        - 412 Precondition Failed: APPLICATION_NOT_ACCEPTED
    """
    landlord_id = require_role(current_user, UserRole.landlord)

    result = await StartLeaseUseCase(uow).execute(
        landlord_id, request.application_id, request.terms
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("", response_model=TenancyListResponse)
async def list_tenancies(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListTenanciesUseCase(uow).execute(UUID(current_user["user_id"]))
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{tenancy_id}", response_model=TenancyResponse)
async def get_tenancy(
    tenancy_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetTenancyUseCase(uow).execute(tenancy_id, UUID(current_user["user_id"]))
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{tenancy_id}/document", response_model=TenancyResponse)
async def request_document_generation(
    tenancy_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    documents: IDocumentGenerator = Depends(get_document_generator),
    notifier: INotificationService = Depends(get_notification_service),
):
    """
    Generate the lease document and send it for the tenant's signature

    Raises:
        - 404 Not Found: TENANCY_NOT_FOUND
        - 412 Precondition Failed: LEASE_NOT_DRAFT
        - 502 Bad Gateway: EXTERNAL_SERVICE_FAILURE (lease stays in draft)
    """
    landlord_id = require_role(current_user, UserRole.landlord)

    result = await RequestDocumentGenerationUseCase(uow, documents, notifier).execute(
        tenancy_id, landlord_id
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{tenancy_id}/tenant-sign", response_model=TenancyResponse)
async def tenant_sign_lease(
    tenancy_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationService = Depends(get_notification_service),
):
    tenant_id = require_role(current_user, UserRole.tenant)

    result = await TenantSignLeaseUseCase(uow, notifier).execute(tenancy_id, tenant_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{tenancy_id}/landlord-sign", response_model=TenancyResponse)
async def landlord_sign_lease(
    tenancy_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationService = Depends(get_notification_service),
):
    """
    Countersign the lease

    Raises:
        - 404 Not Found: TENANCY_NOT_FOUND
        - 412 Precondition Failed: LEASE_NOT_AWAITING_LANDLORD (tenant has not signed)
    """
    landlord_id = require_role(current_user, UserRole.landlord)

    result = await LandlordSignLeaseUseCase(uow, notifier).execute(tenancy_id, landlord_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
