"""
Use Cases

Organized by workflow component:
- slots/: Viewing slot ledger
- viewings/: Viewing tracker
- invites/: Application invitations
- applications/: Application gate and screening
- tenancies/: Lease orchestration
- payments/: Initial payment bookkeeping
- presence/: Online presence
- audit/: Audit trail

Import from subdirectories for better organization.
"""

from .applications import (
    CheckApplicationAccessUseCase,
    ListApplicationsUseCase,
    RecordCreditCheckResultUseCase,
    RequestCreditCheckUseCase,
    SubmitApplicationUseCase,
    UpdateApplicationStatusUseCase,
)
from .audit import GetAuditEventsUseCase
from .invites import (
    IssueInviteUseCase,
    ListInvitesUseCase,
    RedeemInviteUseCase,
    ResendInviteUseCase,
    RevokeInviteUseCase,
)
from .payments import (
    ListPaymentsUseCase,
    RecordPaymentEventUseCase,
    RequestInitialPaymentUseCase,
)
from .presence import GetPresenceUseCase, RecordHeartbeatUseCase
from .slots import (
    BookSlotUseCase,
    CancelBookingUseCase,
    CreateSlotUseCase,
    GetActiveBookingUseCase,
    ListAvailableSlotsUseCase,
    RescheduleBookingUseCase,
)
from .tenancies import (
    GetTenancyUseCase,
    LandlordSignLeaseUseCase,
    ListTenanciesUseCase,
    RequestDocumentGenerationUseCase,
    StartLeaseUseCase,
    TenantSignLeaseUseCase,
)
from .viewings import (
    CancelViewingUseCase,
    CompleteViewingUseCase,
    ConfirmViewingUseCase,
    ListViewingsUseCase,
    RequestViewingUseCase,
    ScheduleViewingUseCase,
    SendApplicationAccessUseCase,
)

__all__ = [
    # Slots
    "CreateSlotUseCase",
    "ListAvailableSlotsUseCase",
    "GetActiveBookingUseCase",
    "BookSlotUseCase",
    "CancelBookingUseCase",
    "RescheduleBookingUseCase",
    # Viewings
    "RequestViewingUseCase",
    "ScheduleViewingUseCase",
    "CompleteViewingUseCase",
    "ConfirmViewingUseCase",
    "SendApplicationAccessUseCase",
    "CancelViewingUseCase",
    "ListViewingsUseCase",
    # Invites
    "IssueInviteUseCase",
    "RedeemInviteUseCase",
    "ResendInviteUseCase",
    "RevokeInviteUseCase",
    "ListInvitesUseCase",
    # Applications
    "CheckApplicationAccessUseCase",
    "SubmitApplicationUseCase",
    "UpdateApplicationStatusUseCase",
    "RecordCreditCheckResultUseCase",
    "RequestCreditCheckUseCase",
    "ListApplicationsUseCase",
    # Tenancies
    "StartLeaseUseCase",
    "RequestDocumentGenerationUseCase",
    "TenantSignLeaseUseCase",
    "LandlordSignLeaseUseCase",
    "ListTenanciesUseCase",
    "GetTenancyUseCase",
    # Payments
    "RequestInitialPaymentUseCase",
    "RecordPaymentEventUseCase",
    "ListPaymentsUseCase",
    # Presence
    "RecordHeartbeatUseCase",
    "GetPresenceUseCase",
    # Audit
    "GetAuditEventsUseCase",
]
