"""
List Available Slots Use Case
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow

from .dtos import SlotListResponse, SlotResponse


class ListAvailableSlotsUseCase:
    """Available, future slots for a property in ascending start order."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, property_id: UUID) -> Result[SlotListResponse]:
        async with self.uow:
            slots = await self.uow.slots.list_available(property_id, utcnow())
            return Return.ok(
                SlotListResponse(slots=[SlotResponse.from_entity(s) for s in slots])
            )
