"""
List Applications Use Case
"""

from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import UserRole

from .dtos import ApplicationListResponse, ApplicationResponse


class ListApplicationsUseCase:
    """Tenants see what they submitted, landlords what they received"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, role: UserRole, property_id: Optional[UUID] = None
    ) -> Result[ApplicationListResponse]:
        async with self.uow:
            if role == UserRole.tenant:
                applications = await self.uow.applications.list_for_tenant(user_id)
                if property_id is not None:
                    applications = [a for a in applications if a.property_id == property_id]
            else:
                applications = await self.uow.applications.list_for_landlord(user_id, property_id)

            return Return.ok(
                ApplicationListResponse(
                    applications=[ApplicationResponse.from_entity(a) for a in applications]
                )
            )
