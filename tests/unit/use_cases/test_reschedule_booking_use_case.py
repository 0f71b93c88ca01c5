from uuid import uuid4

import pytest

from src.app.use_cases.slots import CancelBookingUseCase, RescheduleBookingUseCase
from src.domain.entities import SlotStatus, ViewingStatus


@pytest.fixture
def booked_pair(make_slot):
    tenant_id = uuid4()
    old_slot = make_slot(status=SlotStatus.booked, booked_by_tenant_id=tenant_id)
    new_slot = make_slot(property_id=old_slot.property_id, landlord_id=old_slot.landlord_id)
    return tenant_id, old_slot, new_slot


@pytest.mark.asyncio
async def test_reschedule_moves_booking_and_viewing(mock_uow, notifier, booked_pair, make_viewing):
    tenant_id, old_slot, new_slot = booked_pair
    viewing = make_viewing(slot_id=old_slot.id, tenant_id=tenant_id)
    mock_uow.slots.get_by_id.side_effect = [old_slot, new_slot, new_slot]
    mock_uow.viewings.get_by_slot_id.return_value = viewing

    result = await RescheduleBookingUseCase(mock_uow, notifier).execute(
        tenant_id, old_slot.id, new_slot.id
    )

    assert result.is_ok()
    assert result.value.viewing_id == str(viewing.id)
    mock_uow.slots.try_book.assert_awaited_once_with(new_slot.id, tenant_id)
    mock_uow.slots.release.assert_awaited_once_with(old_slot.id, tenant_id)

    transition = mock_uow.viewings.transition.call_args
    assert transition.kwargs["slot_id"] == new_slot.id
    assert transition.kwargs["scheduled_date"] == new_slot.start_time
    mock_uow.commit.assert_awaited_once()
    assert notifier.notify.call_args.args[1] == "viewing_rescheduled"


@pytest.mark.asyncio
async def test_unavailable_new_slot_keeps_old_booking(mock_uow, booked_pair):
    tenant_id, old_slot, new_slot = booked_pair
    mock_uow.slots.get_by_id.side_effect = [old_slot, new_slot]
    mock_uow.slots.try_book.return_value = False

    result = await RescheduleBookingUseCase(mock_uow).execute(tenant_id, old_slot.id, new_slot.id)

    assert result.is_err()
    assert result.error.code == "SLOT_UNAVAILABLE"
    mock_uow.slots.release.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_reschedule_across_properties_rejected(mock_uow, booked_pair, make_slot):
    tenant_id, old_slot, _ = booked_pair
    elsewhere = make_slot()
    mock_uow.slots.get_by_id.side_effect = [old_slot, elsewhere]

    result = await RescheduleBookingUseCase(mock_uow).execute(tenant_id, old_slot.id, elsewhere.id)

    assert result.is_err()
    assert result.error.code == "SLOT_PROPERTY_MISMATCH"
    mock_uow.slots.try_book.assert_not_called()


@pytest.mark.asyncio
async def test_reschedule_requires_own_booking(mock_uow, booked_pair):
    _, old_slot, new_slot = booked_pair
    mock_uow.slots.get_by_id.side_effect = [old_slot, new_slot]

    result = await RescheduleBookingUseCase(mock_uow).execute(uuid4(), old_slot.id, new_slot.id)

    assert result.is_err()
    assert result.error.code == "BOOKING_NOT_FOUND"


@pytest.mark.asyncio
async def test_reschedule_to_same_slot_rejected(mock_uow):
    slot_id = uuid4()

    result = await RescheduleBookingUseCase(mock_uow).execute(uuid4(), slot_id, slot_id)

    assert result.is_err()
    assert result.error.code == "INVALID_RESCHEDULE"
    mock_uow.__aenter__.assert_not_called()


@pytest.mark.asyncio
async def test_cancel_booking_releases_slot_and_cancels_viewing(
    mock_uow, notifier, booked_pair, make_viewing
):
    tenant_id, old_slot, _ = booked_pair
    viewing = make_viewing(slot_id=old_slot.id, tenant_id=tenant_id)
    mock_uow.slots.get_active_booking.return_value = old_slot
    mock_uow.viewings.get_by_slot_id.return_value = viewing

    result = await CancelBookingUseCase(mock_uow, notifier).execute(
        tenant_id, old_slot.property_id
    )

    assert result.is_ok()
    assert result.value.slot_id == str(old_slot.id)
    mock_uow.slots.release.assert_awaited_once_with(old_slot.id, tenant_id)
    transition = mock_uow.viewings.transition.call_args
    assert transition.args[0] == viewing.id
    assert transition.kwargs["status"] == ViewingStatus.cancelled
    assert notifier.notify.call_args.args[1] == "viewing_cancelled"


@pytest.mark.asyncio
async def test_cancel_without_booking(mock_uow):
    result = await CancelBookingUseCase(mock_uow).execute(uuid4(), uuid4())

    assert result.is_err()
    assert result.error.code == "BOOKING_NOT_FOUND"
    mock_uow.slots.release.assert_not_called()
