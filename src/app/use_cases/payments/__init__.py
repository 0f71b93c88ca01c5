"""
Payment Use Cases

Status bookkeeping only; money moves through the external gateway.
"""

from .dtos import (
    InitialPaymentResponse,
    PaymentEventResponse,
    PaymentListResponse,
    PaymentResponse,
)
from .list_payments_use_case import ListPaymentsUseCase
from .record_payment_event_use_case import RecordPaymentEventUseCase
from .request_initial_payment_use_case import RequestInitialPaymentUseCase

__all__ = [
    "RequestInitialPaymentUseCase",
    "RecordPaymentEventUseCase",
    "ListPaymentsUseCase",
    "InitialPaymentResponse",
    "PaymentEventResponse",
    "PaymentListResponse",
    "PaymentResponse",
]
