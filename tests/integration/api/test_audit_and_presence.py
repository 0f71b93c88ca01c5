from uuid import uuid4

import pytest
from httpx import AsyncClient

from tests.integration.helpers import create_slot


@pytest.mark.asyncio
async def test_audit_events_list_callers_transitions(client: AsyncClient, landlord, tenant):
    """
    Given a landlord created a slot and a tenant booked it
    When each of them reads their audit trail
    Then they only see the transitions they performed
    """
    _, landlord_headers = landlord
    _, tenant_headers = tenant
    slot = await create_slot(client, landlord_headers, uuid4())
    await client.post(f"/api/slots/{slot['id']}/book", headers=tenant_headers)

    landlord_events = await client.get("/api/audit/events", headers=landlord_headers)
    tenant_events = await client.get("/api/audit/events", headers=tenant_headers)

    assert landlord_events.status_code == 200
    assert [e["action"] for e in landlord_events.json()["events"]] == ["slot_created"]
    assert [e["action"] for e in tenant_events.json()["events"]] == ["slot_booked"]

    event = landlord_events.json()["events"][0]
    assert event["entity_type"] == "viewing_slot"
    assert event["entity_id"] == slot["id"]
    assert event["timestamp"].endswith("Z")
    assert landlord_events.json()["next_cursor"] is None


@pytest.mark.asyncio
async def test_audit_events_paginate(client: AsyncClient, landlord):
    _, landlord_headers = landlord
    property_id = uuid4()
    for days in (2, 3, 4):
        await create_slot(client, landlord_headers, property_id, days_ahead=days)

    first_page = await client.get(
        "/api/audit/events", params={"limit": 2}, headers=landlord_headers
    )
    assert len(first_page.json()["events"]) == 2
    cursor = first_page.json()["next_cursor"]
    assert cursor is not None

    second_page = await client.get(
        "/api/audit/events", params={"limit": 2, "cursor": cursor}, headers=landlord_headers
    )
    assert len(second_page.json()["events"]) == 1
    assert second_page.json()["next_cursor"] is None


@pytest.mark.asyncio
async def test_audit_events_limit_validation(client: AsyncClient, landlord):
    _, landlord_headers = landlord

    response = await client.get("/api/audit/events", params={"limit": 0}, headers=landlord_headers)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_heartbeat_marks_user_online(client: AsyncClient, tenant, landlord):
    tenant_id, tenant_headers = tenant
    _, landlord_headers = landlord

    before = await client.get(f"/api/presence/{tenant_id}", headers=landlord_headers)
    assert before.json() == {"user_id": str(tenant_id), "online": False, "last_seen_at": None}

    beat = await client.post("/api/presence/heartbeat", headers=tenant_headers)
    assert beat.status_code == 200
    assert beat.json()["online"] is True

    after = await client.get(f"/api/presence/{tenant_id}", headers=landlord_headers)
    assert after.json()["online"] is True
    assert after.json()["last_seen_at"] is not None
