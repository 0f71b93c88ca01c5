from uuid import UUID, uuid4

import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import AuditEvent, SlotStatus, ViewingSlot
from tests.integration.helpers import create_slot


@pytest.mark.asyncio
async def test_book_slot_creates_scheduled_viewing(client: AsyncClient, landlord, tenant, notifier):
    """
    Given an available future slot
    When a tenant books it
    Then the slot is booked by that tenant and a scheduled viewing exists
    """
    landlord_id, landlord_headers = landlord
    tenant_id, tenant_headers = tenant
    property_id = uuid4()

    slot = await create_slot(client, landlord_headers, property_id)

    response = await client.post(f"/api/slots/{slot['id']}/book", headers=tenant_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["slot"]["status"] == "booked"
    assert data["slot"]["booked_by_tenant_id"] == str(tenant_id)
    assert data["viewing_id"] is not None
    assert data["warnings"] == []

    viewings = await client.get(
        "/api/viewings", params={"property_id": str(property_id)}, headers=tenant_headers
    )
    assert viewings.status_code == 200
    assert viewings.json()["viewings"][0]["status"] == "scheduled"

    assert (landlord_id, "viewing_booked") in [(r, e) for r, e, _ in notifier.sent]


@pytest.mark.asyncio
async def test_second_tenant_cannot_book_taken_slot(
    client: AsyncClient, landlord, tenant, other_tenant, db_session
):
    """Exactly one of two tenants holds the slot; the loser gets a conflict"""
    _, landlord_headers = landlord
    tenant_id, tenant_headers = tenant
    _, other_headers = other_tenant
    slot = await create_slot(client, landlord_headers, uuid4())

    first = await client.post(f"/api/slots/{slot['id']}/book", headers=tenant_headers)
    second = await client.post(f"/api/slots/{slot['id']}/book", headers=other_headers)

    assert first.status_code == 200
    assert second.status_code == 409
    assert second.json()["error"]["code"] == "SLOT_UNAVAILABLE"

    stmt = (
        select(ViewingSlot)
        .where(ViewingSlot.id == UUID(slot["id"]))
        .execution_options(populate_existing=True)
    )
    stored = (await db_session.exec(stmt)).one()
    assert stored.status == SlotStatus.booked
    assert stored.booked_by_tenant_id == tenant_id


@pytest.mark.asyncio
async def test_one_active_booking_per_property(client: AsyncClient, landlord, tenant):
    _, landlord_headers = landlord
    _, tenant_headers = tenant
    property_id = uuid4()
    first_slot = await create_slot(client, landlord_headers, property_id, days_ahead=2)
    second_slot = await create_slot(client, landlord_headers, property_id, days_ahead=3)

    await client.post(f"/api/slots/{first_slot['id']}/book", headers=tenant_headers)
    response = await client.post(f"/api/slots/{second_slot['id']}/book", headers=tenant_headers)

    assert response.status_code == 412
    assert response.json()["error"]["code"] == "ACTIVE_BOOKING_EXISTS"


@pytest.mark.asyncio
async def test_booked_slot_leaves_available_listing(client: AsyncClient, landlord, tenant):
    _, landlord_headers = landlord
    _, tenant_headers = tenant
    property_id = uuid4()
    booked = await create_slot(client, landlord_headers, property_id, days_ahead=2)
    free = await create_slot(client, landlord_headers, property_id, days_ahead=3)

    await client.post(f"/api/slots/{booked['id']}/book", headers=tenant_headers)

    response = await client.get(
        "/api/slots/available", params={"property_id": str(property_id)}, headers=tenant_headers
    )

    assert response.status_code == 200
    assert [s["id"] for s in response.json()["slots"]] == [free["id"]]


@pytest.mark.asyncio
async def test_reschedule_moves_booking(client: AsyncClient, landlord, tenant, db_session):
    _, landlord_headers = landlord
    _, tenant_headers = tenant
    property_id = uuid4()
    old_slot = await create_slot(client, landlord_headers, property_id, days_ahead=2)
    new_slot = await create_slot(client, landlord_headers, property_id, days_ahead=3)
    await client.post(f"/api/slots/{old_slot['id']}/book", headers=tenant_headers)

    response = await client.post(
        f"/api/slots/{old_slot['id']}/reschedule",
        json={"new_slot_id": new_slot["id"]},
        headers=tenant_headers,
    )

    assert response.status_code == 200
    assert response.json()["slot"]["id"] == new_slot["id"]

    booking = await client.get(
        "/api/slots/booking", params={"property_id": str(property_id)}, headers=tenant_headers
    )
    assert booking.json()["slot"]["id"] == new_slot["id"]

    available = await client.get(
        "/api/slots/available", params={"property_id": str(property_id)}, headers=tenant_headers
    )
    assert [s["id"] for s in available.json()["slots"]] == [old_slot["id"]]

    stmt = select(AuditEvent).where(AuditEvent.action == "slot_booking_rescheduled")
    assert (await db_session.exec(stmt)).first() is not None


@pytest.mark.asyncio
async def test_reschedule_to_taken_slot_keeps_old_booking(
    client: AsyncClient, landlord, tenant, other_tenant
):
    """A lost race on the new slot leaves the current booking untouched"""
    _, landlord_headers = landlord
    _, tenant_headers = tenant
    _, other_headers = other_tenant
    property_id = uuid4()
    old_slot = await create_slot(client, landlord_headers, property_id, days_ahead=2)
    taken_slot = await create_slot(client, landlord_headers, property_id, days_ahead=3)
    await client.post(f"/api/slots/{old_slot['id']}/book", headers=tenant_headers)
    await client.post(f"/api/slots/{taken_slot['id']}/book", headers=other_headers)

    response = await client.post(
        f"/api/slots/{old_slot['id']}/reschedule",
        json={"new_slot_id": taken_slot["id"]},
        headers=tenant_headers,
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "SLOT_UNAVAILABLE"

    booking = await client.get(
        "/api/slots/booking", params={"property_id": str(property_id)}, headers=tenant_headers
    )
    assert booking.json()["has_booking"] is True
    assert booking.json()["slot"]["id"] == old_slot["id"]


@pytest.mark.asyncio
async def test_cancel_booking_releases_slot(client: AsyncClient, landlord, tenant, other_tenant):
    _, landlord_headers = landlord
    _, tenant_headers = tenant
    _, other_headers = other_tenant
    property_id = uuid4()
    slot = await create_slot(client, landlord_headers, property_id)
    await client.post(f"/api/slots/{slot['id']}/book", headers=tenant_headers)

    response = await client.delete(
        "/api/slots/booking", params={"property_id": str(property_id)}, headers=tenant_headers
    )
    assert response.status_code == 200
    assert response.json()["slot_id"] == slot["id"]

    rebook = await client.post(f"/api/slots/{slot['id']}/book", headers=other_headers)
    assert rebook.status_code == 200


@pytest.mark.asyncio
async def test_tenant_cannot_create_slot(client: AsyncClient, tenant):
    _, tenant_headers = tenant

    response = await client.post(
        "/api/slots",
        json={
            "property_id": str(uuid4()),
            "start_time": "2099-01-01T10:00:00",
            "end_time": "2099-01-01T10:30:00",
        },
        headers=tenant_headers,
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FORBIDDEN"


@pytest.mark.asyncio
async def test_missing_token_is_rejected(client: AsyncClient):
    response = await client.get("/api/slots/available", params={"property_id": str(uuid4())})

    assert response.status_code in (401, 403)
