from uuid import UUID

from fastapi import status

from libs.result import Error
from src.api.error import ClientError
from src.domain.entities import UserRole


def require_role(current_user: dict, *roles: UserRole) -> UUID:
    """
    Check the caller's marketplace role and return their user id.

    Raises:
        ClientError: 403 if the role is not one of roles
    """
    if current_user.get("role") not in {role.value for role in roles}:
        allowed = ", ".join(role.value for role in roles)
        raise ClientError(
            Error("FORBIDDEN", f"This action requires one of: {allowed}"),
            status_code=status.HTTP_403_FORBIDDEN,
        )
    return UUID(current_user["user_id"])
