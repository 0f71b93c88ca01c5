import json
from datetime import timedelta
from typing import Any, Dict
from uuid import UUID

from src.api.utils.jwt import generate_jwt
from src.api.utils.webhook_signature import compute_signature
from src.domain.base import utcnow

SCREENING = {
    "first_name": "Ada",
    "last_name": "Okafor",
    "employment_status": "employed",
    "job_title": "Engineer",
    "net_monthly_income": "4200.00",
    "has_pets": False,
    "screening_consent": True,
    "documents": [{"title": "Payslip", "path": "uploads/payslip.pdf"}],
}


async def create_slot(client, landlord_headers, property_id: UUID, days_ahead: int = 2) -> Dict:
    start = utcnow() + timedelta(days=days_ahead)
    response = await client.post(
        "/api/slots",
        json={
            "property_id": str(property_id),
            "start_time": start.isoformat(),
            "end_time": (start + timedelta(minutes=30)).isoformat(),
        },
        headers=landlord_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


async def grant_access_via_viewing(client, landlord_headers, tenant_headers, property_id: UUID) -> str:
    """Book, complete, confirm and send application access; returns the viewing id"""
    slot = await create_slot(client, landlord_headers, property_id)
    booking = await client.post(f"/api/slots/{slot['id']}/book", headers=tenant_headers)
    assert booking.status_code == 200, booking.text
    viewing_id = booking.json()["viewing_id"]

    for step in ("complete", "confirm", "send-application"):
        response = await client.post(f"/api/viewings/{viewing_id}/{step}", headers=landlord_headers)
        assert response.status_code == 200, response.text
    return viewing_id


async def submit_application(client, tenant_headers, property_id, landlord_id=None, invite_id=None):
    body: Dict[str, Any] = {"property_id": str(property_id), "screening": SCREENING}
    if landlord_id:
        body["landlord_id"] = str(landlord_id)
    if invite_id:
        body["invite_id"] = invite_id
    return await client.post("/api/applications", json=body, headers=tenant_headers)


def signed_body(secret: str, payload: Dict, header: str):
    body = json.dumps(payload).encode("utf-8")
    headers = {header: compute_signature(secret, body), "content-type": "application/json"}
    return body, headers


def auth_headers(user_id: UUID, role: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {generate_jwt(user_id, role)}"}
