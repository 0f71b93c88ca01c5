"""
Slot Ledger Use Cases

Viewing slot availability and booking.
"""

from .book_slot_use_case import BookSlotUseCase
from .cancel_booking_use_case import CancelBookingUseCase
from .create_slot_use_case import CreateSlotUseCase
from .dtos import (
    ActiveBookingResponse,
    BookingResponse,
    CancelBookingResponse,
    SlotListResponse,
    SlotResponse,
)
from .get_active_booking_use_case import GetActiveBookingUseCase
from .list_available_slots_use_case import ListAvailableSlotsUseCase
from .reschedule_booking_use_case import RescheduleBookingUseCase

__all__ = [
    "CreateSlotUseCase",
    "ListAvailableSlotsUseCase",
    "GetActiveBookingUseCase",
    "BookSlotUseCase",
    "CancelBookingUseCase",
    "RescheduleBookingUseCase",
    "SlotResponse",
    "SlotListResponse",
    "BookingResponse",
    "CancelBookingResponse",
    "ActiveBookingResponse",
]
