"""
Rental Workflow Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Actor role supplied by the identity provider"""

    landlord = "landlord"
    tenant = "tenant"
    admin = "admin"


class SlotStatus(str, Enum):
    """Viewing slot availability"""

    available = "available"
    booked = "booked"


class ViewingStatus(str, Enum):
    """Viewing lifecycle status"""

    requested = "requested"
    scheduled = "scheduled"
    completed = "completed"
    cancelled = "cancelled"


class InviteStatus(str, Enum):
    """Application invite status"""

    invited = "invited"
    used = "used"
    expired = "expired"


class ApplicationStatus(str, Enum):
    """Rental application status"""

    pending = "pending"
    invited = "invited"
    submitted = "submitted"
    pending_credit_check = "pending_credit_check"
    accepted = "accepted"
    declined = "declined"


class LeaseStatus(str, Enum):
    """Tenancy lease signature status"""

    draft = "draft"
    awaiting_tenant_signature = "awaiting_tenant_signature"
    awaiting_landlord_signature = "awaiting_landlord_signature"
    completed = "completed"


class PaymentType(str, Enum):
    """Initial payment components"""

    security_deposit = "security_deposit"
    first_month_rent = "first_month_rent"


class PaymentStatus(str, Enum):
    """Payment bookkeeping status"""

    pending = "pending"
    paid = "paid"
    failed = "failed"
