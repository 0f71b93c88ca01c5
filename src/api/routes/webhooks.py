"""
Provider Webhook Routes

Callbacks from the payment gateway and the credit check provider. Both are
authenticated by an HMAC-SHA512 signature of the raw body, and both are safe
to replay.
"""

from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.webhook_signature import signed_by
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.applications import ApplicationResponse, RecordCreditCheckResultUseCase
from src.app.use_cases.payments import RecordPaymentEventUseCase
from src.depends import get_notification_service, get_unit_of_work

router = APIRouter(prefix="/webhooks", tags=["Webhooks"])

PAYMENT_SIGNATURE_HEADER = "x-paystack-signature"
CREDIT_CHECK_SIGNATURE_HEADER = "x-credit-check-signature"

PAYMENT_SUCCESS_EVENTS = {"charge.success"}
PAYMENT_FAILURE_EVENTS = {"charge.failed"}


class PaymentEventData(BaseModel):
    reference: str = Field(..., min_length=1, max_length=128)


class PaymentWebhookRequest(BaseModel):
    event: str
    data: PaymentEventData


class CreditCheckWebhookRequest(BaseModel):
    application_id: UUID
    passed: bool


class IgnoredEventResponse(BaseModel):
    status: str = "ignored"
    event: str


@router.post(
    "/payments",
    dependencies=[Depends(signed_by("PAYMENT_GATEWAY_SECRET", PAYMENT_SIGNATURE_HEADER))],
)
async def payment_webhook(
    request: PaymentWebhookRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationService = Depends(get_notification_service),
):
    """
    Payment gateway event

    Events other than charge.success and charge.failed are acknowledged and
    ignored so the gateway stops retrying them.

    Raises:
        - 401 Unauthorized: INVALID_SIGNATURE
        - 404 Not Found: PAYMENT_NOT_FOUND
    """
    if request.event in PAYMENT_SUCCESS_EVENTS:
        succeeded = True
    elif request.event in PAYMENT_FAILURE_EVENTS:
        succeeded = False
    else:
        return IgnoredEventResponse(event=request.event)

    result = await RecordPaymentEventUseCase(uow, notifier).execute(
        request.data.reference, succeeded
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/credit-checks",
    response_model=ApplicationResponse,
    dependencies=[
        Depends(signed_by("CREDIT_CHECK_WEBHOOK_SECRET", CREDIT_CHECK_SIGNATURE_HEADER))
    ],
)
async def credit_check_webhook(
    request: CreditCheckWebhookRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationService = Depends(get_notification_service),
):
    """
    Credit check result

    Raises:
        - 401 Unauthorized: INVALID_SIGNATURE
        - 404 Not Found: APPLICATION_NOT_FOUND
        - 412 Precondition Failed: CREDIT_CHECK_NOT_PENDING
    """
    result = await RecordCreditCheckResultUseCase(uow, notifier).execute(
        request.application_id, request.passed
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
