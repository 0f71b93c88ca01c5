"""
Get Active Booking Use Case
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import ActiveBookingResponse, SlotResponse


class GetActiveBookingUseCase:
    """Returns the slot the tenant currently holds for a property, if any."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, property_id: UUID) -> Result[ActiveBookingResponse]:
        async with self.uow:
            slot = await self.uow.slots.get_active_booking(tenant_id, property_id)
            if slot is None:
                return Return.ok(ActiveBookingResponse(has_booking=False))
            return Return.ok(
                ActiveBookingResponse(has_booking=True, slot=SlotResponse.from_entity(slot))
            )
