"""
Rental Workflow Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    UserRole,
    SlotStatus,
    ViewingStatus,
    InviteStatus,
    ApplicationStatus,
    LeaseStatus,
    PaymentType,
    PaymentStatus,
)

# Export all entities
from .viewing_slot import ViewingSlot
from .viewing import Viewing
from .application_invite import ApplicationInvite
from .application import (
    Application,
    DECIDABLE_APPLICATION_STATUSES,
    TERMINAL_APPLICATION_STATUSES,
)
from .screening_profile import ScreeningProfile
from .profile import Profile
from .tenancy import Tenancy
from .payment import Payment
from .presence import PresenceHeartbeat
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "UserRole",
    "SlotStatus",
    "ViewingStatus",
    "InviteStatus",
    "ApplicationStatus",
    "LeaseStatus",
    "PaymentType",
    "PaymentStatus",
    # Entities
    "ViewingSlot",
    "Viewing",
    "ApplicationInvite",
    "Application",
    "DECIDABLE_APPLICATION_STATUSES",
    "TERMINAL_APPLICATION_STATUSES",
    "ScreeningProfile",
    "Profile",
    "Tenancy",
    "Payment",
    "PresenceHeartbeat",
    "AuditEvent",
]
