"""
Viewing Tracker Use Cases

Lifecycle of a landlord-tenant-property viewing.
"""

from .cancel_viewing_use_case import CancelViewingUseCase
from .complete_viewing_use_case import CompleteViewingUseCase
from .confirm_viewing_use_case import ConfirmViewingUseCase
from .dtos import ViewingListResponse, ViewingResponse
from .list_viewings_use_case import ListViewingsUseCase
from .request_viewing_use_case import RequestViewingUseCase
from .schedule_viewing_use_case import ScheduleViewingUseCase
from .send_application_access_use_case import SendApplicationAccessUseCase

__all__ = [
    "RequestViewingUseCase",
    "ScheduleViewingUseCase",
    "CompleteViewingUseCase",
    "ConfirmViewingUseCase",
    "SendApplicationAccessUseCase",
    "CancelViewingUseCase",
    "ListViewingsUseCase",
    "ViewingResponse",
    "ViewingListResponse",
]
