from uuid import UUID, uuid4

import pytest
from httpx import AsyncClient
from sqlmodel import select

from config import ApplicationConfig
from src.domain.entities import Payment, PaymentStatus
from tests.integration.helpers import grant_access_via_viewing, signed_body, submit_application

PAYMENT_SECRET = "whsec_test"
CREDIT_SECRET = "ccsec_test"

TERMS = {
    "monthly_rent": "1500.00",
    "security_deposit": "3000.00",
    "start_date": "2099-01-01",
    "end_date": "2099-12-31",
    "custom_clauses": [{"title": "Pets", "body": "No pets without written consent."}],
}


@pytest.fixture(autouse=True)
def webhook_secrets(monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "PAYMENT_GATEWAY_SECRET", PAYMENT_SECRET)
    monkeypatch.setattr(ApplicationConfig, "CREDIT_CHECK_WEBHOOK_SECRET", CREDIT_SECRET)


async def _accepted_application(client, landlord, tenant):
    landlord_id, landlord_headers = landlord
    _, tenant_headers = tenant
    property_id = uuid4()
    await grant_access_via_viewing(client, landlord_headers, tenant_headers, property_id)
    submitted = await submit_application(client, tenant_headers, property_id, landlord_id)
    application_id = submitted.json()["id"]
    accepted = await client.post(
        f"/api/applications/{application_id}/status",
        json={"status": "accepted"},
        headers=landlord_headers,
    )
    assert accepted.status_code == 200, accepted.text
    return application_id


async def _start_lease(client, landlord_headers, application_id):
    return await client.post(
        "/api/tenancies",
        json={"application_id": application_id, "terms": TERMS},
        headers=landlord_headers,
    )


async def _completed_lease(client, landlord, tenant):
    _, landlord_headers = landlord
    _, tenant_headers = tenant
    application_id = await _accepted_application(client, landlord, tenant)
    tenancy_id = (await _start_lease(client, landlord_headers, application_id)).json()["id"]
    await client.post(f"/api/tenancies/{tenancy_id}/document", headers=landlord_headers)
    await client.post(f"/api/tenancies/{tenancy_id}/tenant-sign", headers=tenant_headers)
    signed = await client.post(f"/api/tenancies/{tenancy_id}/landlord-sign", headers=landlord_headers)
    assert signed.json()["lease_status"] == "completed"
    return tenancy_id


@pytest.mark.asyncio
async def test_start_lease_is_idempotent(client: AsyncClient, landlord, tenant):
    _, landlord_headers = landlord
    application_id = await _accepted_application(client, landlord, tenant)

    first = await _start_lease(client, landlord_headers, application_id)
    second = await _start_lease(client, landlord_headers, application_id)

    assert first.status_code == 201
    assert first.json()["lease_status"] == "draft"
    assert first.json()["monthly_rent"] == "1500.00"
    assert second.json()["id"] == first.json()["id"]

    listed = await client.get("/api/tenancies", headers=landlord_headers)
    assert len(listed.json()["tenancies"]) == 1


@pytest.mark.asyncio
async def test_lease_requires_accepted_application(client: AsyncClient, landlord, tenant):
    landlord_id, landlord_headers = landlord
    _, tenant_headers = tenant
    property_id = uuid4()
    await grant_access_via_viewing(client, landlord_headers, tenant_headers, property_id)
    submitted = await submit_application(client, tenant_headers, property_id, landlord_id)

    response = await _start_lease(client, landlord_headers, submitted.json()["id"])

    assert response.status_code == 412
    assert response.json()["error"]["code"] == "APPLICATION_NOT_ACCEPTED"


@pytest.mark.asyncio
async def test_signatures_follow_lease_order(client: AsyncClient, landlord, tenant, notifier):
    """
    Given a draft lease
    When the parties sign out of order
    Then each out-of-order signature is refused
    """
    _, landlord_headers = landlord
    tenant_id, tenant_headers = tenant
    application_id = await _accepted_application(client, landlord, tenant)
    tenancy_id = (await _start_lease(client, landlord_headers, application_id)).json()["id"]

    early_tenant = await client.post(f"/api/tenancies/{tenancy_id}/tenant-sign", headers=tenant_headers)
    assert early_tenant.status_code == 412
    assert early_tenant.json()["error"]["code"] == "LEASE_NOT_AWAITING_TENANT"

    document = await client.post(f"/api/tenancies/{tenancy_id}/document", headers=landlord_headers)
    assert document.status_code == 200
    assert document.json()["lease_status"] == "awaiting_tenant_signature"
    assert document.json()["lease_document_path"] == f"leases/{tenancy_id}.pdf"
    assert (tenant_id, "lease_ready_for_signature") in [(r, e) for r, e, _ in notifier.sent]

    early_landlord = await client.post(
        f"/api/tenancies/{tenancy_id}/landlord-sign", headers=landlord_headers
    )
    assert early_landlord.status_code == 412
    assert early_landlord.json()["error"]["code"] == "LEASE_NOT_AWAITING_LANDLORD"

    tenant_signed = await client.post(f"/api/tenancies/{tenancy_id}/tenant-sign", headers=tenant_headers)
    assert tenant_signed.json()["lease_status"] == "awaiting_landlord_signature"
    assert tenant_signed.json()["tenant_signed_at"] is not None

    landlord_signed = await client.post(
        f"/api/tenancies/{tenancy_id}/landlord-sign", headers=landlord_headers
    )
    assert landlord_signed.json()["lease_status"] == "completed"
    assert landlord_signed.json()["landlord_signed_at"] is not None


@pytest.mark.asyncio
async def test_document_failure_leaves_draft(client: AsyncClient, landlord, tenant, documents):
    _, landlord_headers = landlord
    application_id = await _accepted_application(client, landlord, tenant)
    tenancy_id = (await _start_lease(client, landlord_headers, application_id)).json()["id"]
    documents.fail = True

    response = await client.post(f"/api/tenancies/{tenancy_id}/document", headers=landlord_headers)

    assert response.status_code == 502
    assert response.json()["error"]["code"] == "EXTERNAL_SERVICE_FAILURE"

    tenancy = await client.get(f"/api/tenancies/{tenancy_id}", headers=landlord_headers)
    assert tenancy.json()["lease_status"] == "draft"


@pytest.mark.asyncio
async def test_payment_requires_completed_lease(client: AsyncClient, landlord, tenant):
    _, landlord_headers = landlord
    _, tenant_headers = tenant
    application_id = await _accepted_application(client, landlord, tenant)
    tenancy_id = (await _start_lease(client, landlord_headers, application_id)).json()["id"]

    response = await client.post(f"/api/tenancies/{tenancy_id}/payments", headers=tenant_headers)

    assert response.status_code == 412
    assert response.json()["error"]["code"] == "LEASE_NOT_COMPLETED"


@pytest.mark.asyncio
async def test_payment_webhook_marks_rows_paid(
    client: AsyncClient, landlord, tenant, gateway, db_session
):
    _, tenant_headers = tenant
    tenancy_id = await _completed_lease(client, landlord, tenant)

    initial = await client.post(f"/api/tenancies/{tenancy_id}/payments", headers=tenant_headers)
    assert initial.status_code == 201, initial.text
    data = initial.json()
    assert data["total_amount"] == "4500.00"
    assert [p["payment_type"] for p in data["payments"]] == ["security_deposit", "first_month_rent"]
    assert gateway.initialized[0][0] == data["reference"]

    body, headers = signed_body(
        PAYMENT_SECRET,
        {"event": "charge.success", "data": {"reference": data["reference"]}},
        "x-paystack-signature",
    )
    event = await client.post("/api/webhooks/payments", content=body, headers=headers)
    assert event.status_code == 200
    assert {p["status"] for p in event.json()["payments"]} == {"paid"}

    replay = await client.post("/api/webhooks/payments", content=body, headers=headers)
    assert replay.status_code == 200

    stmt = (
        select(Payment)
        .where(Payment.tenancy_id == UUID(tenancy_id))
        .execution_options(populate_existing=True)
    )
    rows = (await db_session.exec(stmt)).all()
    assert len(rows) == 2
    assert all(row.status == PaymentStatus.paid for row in rows)

    again = await client.post(f"/api/tenancies/{tenancy_id}/payments", headers=tenant_headers)
    assert again.status_code == 409
    assert again.json()["error"]["code"] == "PAYMENT_ALREADY_COMPLETED"


@pytest.mark.asyncio
async def test_webhook_rejects_bad_signature(client: AsyncClient):
    body, _ = signed_body(
        PAYMENT_SECRET, {"event": "charge.success", "data": {"reference": "rent_x_1"}}, "unused"
    )

    response = await client.post(
        "/api/webhooks/payments",
        content=body,
        headers={"x-paystack-signature": "0" * 128, "content-type": "application/json"},
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_SIGNATURE"


@pytest.mark.asyncio
async def test_unhandled_payment_event_is_ignored(client: AsyncClient):
    body, headers = signed_body(
        PAYMENT_SECRET,
        {"event": "transfer.success", "data": {"reference": "rent_x_1"}},
        "x-paystack-signature",
    )

    response = await client.post("/api/webhooks/payments", content=body, headers=headers)

    assert response.status_code == 200
    assert response.json() == {"status": "ignored", "event": "transfer.success"}


@pytest.mark.asyncio
async def test_credit_check_webhook_moves_application_to_pending(
    client: AsyncClient, landlord, tenant
):
    landlord_id, landlord_headers = landlord
    _, tenant_headers = tenant
    property_id = uuid4()
    await grant_access_via_viewing(client, landlord_headers, tenant_headers, property_id)
    submitted = await submit_application(client, tenant_headers, property_id, landlord_id)
    application_id = submitted.json()["id"]

    body, headers = signed_body(
        CREDIT_SECRET,
        {"application_id": application_id, "passed": True},
        "x-credit-check-signature",
    )
    response = await client.post("/api/webhooks/credit-checks", content=body, headers=headers)

    assert response.status_code == 200
    assert response.json()["status"] == "pending"
