"""
Application Gate Use Cases
"""

from .check_application_access_use_case import CheckApplicationAccessUseCase
from .dtos import (
    ApplicationAccessResponse,
    ApplicationListResponse,
    ApplicationResponse,
    ScreeningDocument,
    ScreeningInput,
    UpdateApplicationStatusRequest,
)
from .list_applications_use_case import ListApplicationsUseCase
from .record_credit_check_result_use_case import RecordCreditCheckResultUseCase
from .request_credit_check_use_case import RequestCreditCheckUseCase
from .submit_application_use_case import SubmitApplicationUseCase
from .update_application_status_use_case import UpdateApplicationStatusUseCase

__all__ = [
    "CheckApplicationAccessUseCase",
    "SubmitApplicationUseCase",
    "UpdateApplicationStatusUseCase",
    "RecordCreditCheckResultUseCase",
    "RequestCreditCheckUseCase",
    "ListApplicationsUseCase",
    "ApplicationAccessResponse",
    "ApplicationListResponse",
    "ApplicationResponse",
    "ScreeningDocument",
    "ScreeningInput",
    "UpdateApplicationStatusRequest",
]
