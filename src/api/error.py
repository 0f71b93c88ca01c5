from fastapi import status
from libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Conflict
_CONFLICT = {
    "SLOT_UNAVAILABLE",
    "INVITE_ALREADY_EXISTS",
    "CONCURRENT_UPDATE",
    "PAYMENT_ALREADY_COMPLETED",
}

# PreconditionFailed
_PRECONDITION_FAILED = {
    "ACTIVE_BOOKING_EXISTS",
    "SLOT_IN_PAST",
    "VIEWING_NOT_COMPLETED",
    "VIEWING_NOT_CONFIRMED",
    "VIEWING_CLOSED",
    "APPLICATION_GATE_DENIED",
    "APPLICATION_ALREADY_ACCEPTED",
    "APPLICATION_FINALIZED",
    "APPLICATION_NOT_ACCEPTED",
    "INVITE_ALREADY_USED",
    "LEASE_NOT_DRAFT",
    "LEASE_NOT_AWAITING_TENANT",
    "LEASE_NOT_AWAITING_LANDLORD",
    "LEASE_NOT_COMPLETED",
    "CREDIT_CHECK_NOT_PENDING",
}

# Validation
_VALIDATION = {
    "INVALID_TIME_RANGE",
    "INVALID_SCHEDULE",
    "INVALID_RESCHEDULE",
    "SLOT_PROPERTY_MISMATCH",
    "INVALID_LEASE_TERMS",
    "SCREENING_CONSENT_REQUIRED",
    "INVALID_STATUS",
    "INVALID_PAGE_SIZE",
}

# Expired
_EXPIRED = {"INVITE_EXPIRED"}

# ExternalServiceFailure
_EXTERNAL = {"EXTERNAL_SERVICE_FAILURE"}


def status_for(error: Error) -> int:
    """HTTP status for a use case error code, or 500 for unknown codes"""
    code = error.code
    if code in _CONFLICT:
        return status.HTTP_409_CONFLICT
    if code in _PRECONDITION_FAILED:
        return status.HTTP_412_PRECONDITION_FAILED
    if code.endswith("_NOT_FOUND"):
        return status.HTTP_404_NOT_FOUND
    if code in _EXPIRED:
        return status.HTTP_410_GONE
    if code in _VALIDATION:
        return status.HTTP_400_BAD_REQUEST
    if code == "FORBIDDEN":
        return status.HTTP_403_FORBIDDEN
    if code in _EXTERNAL:
        return status.HTTP_502_BAD_GATEWAY
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def raise_for_error(error: Error):
    """Translate a use case error into the exception the API handlers render"""
    status_code = status_for(error)
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
