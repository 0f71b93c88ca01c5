"""
List Viewings Use Case
"""

from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import ViewingListResponse, ViewingResponse


class ListViewingsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, property_id: Optional[UUID] = None
    ) -> Result[ViewingListResponse]:
        async with self.uow:
            viewings = await self.uow.viewings.list_for_user(user_id, property_id)
            return Return.ok(
                ViewingListResponse(viewings=[ViewingResponse.from_entity(v) for v in viewings])
            )
