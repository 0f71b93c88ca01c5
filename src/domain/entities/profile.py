"""
Profile Entity

Marketplace profile flags tracked alongside the identity provider's user.
"""

from typing import Optional
from uuid import UUID

from sqlmodel import Field, SQLModel


class Profile(SQLModel, table=True):
    __tablename__ = "profiles"

    user_id: UUID = Field(primary_key=True)
    display_name: Optional[str] = Field(default=None, max_length=255)
    is_tenant_screened: bool = Field(default=False)
