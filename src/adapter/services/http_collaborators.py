"""
HTTP adapters for external collaborators

Each adapter talks to one remote service through httpx and converts any
transport or protocol failure into ExternalServiceError.
"""

import logging
from decimal import Decimal
from typing import Any, Dict, Optional
from uuid import UUID

import httpx

from src.app.services.credit_check_provider import ICreditCheckProvider
from src.app.services.document_generator import IDocumentGenerator
from src.app.services.exceptions import ExternalServiceError
from src.app.services.notification_service import INotificationService
from src.app.services.payment_gateway import IPaymentGateway
from src.domain.entities import Tenancy

logger = logging.getLogger(__name__)


class HttpNotificationService(INotificationService):
    """Posts events to the notification service. Without a URL, events are only logged."""

    def __init__(self, base_url: str, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def notify(
        self, recipient_id: UUID, event_type: str, payload: Dict[str, Any]
    ) -> None:
        if not self.base_url:
            logger.info(f"Notification {event_type} for {recipient_id} (no dispatcher configured)")
            return

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/notifications",
                    json={
                        "recipient_id": str(recipient_id),
                        "event_type": event_type,
                        "payload": payload,
                    },
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise ExternalServiceError("notifications", str(e)) from e


class HttpDocumentGenerator(IDocumentGenerator):
    """Requests lease rendering from the document service"""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def generate_lease(self, tenancy: Tenancy) -> str:
        if not self.base_url:
            raise ExternalServiceError("documents", "document service URL not configured")

        body = {
            "tenancy_id": str(tenancy.id),
            "property_id": str(tenancy.property_id),
            "landlord_id": str(tenancy.landlord_id),
            "tenant_id": str(tenancy.tenant_id),
            "monthly_rent": str(tenancy.monthly_rent),
            "security_deposit": str(tenancy.security_deposit),
            "start_date": tenancy.start_date.isoformat(),
            "end_date": tenancy.end_date.isoformat() if tenancy.end_date else None,
            "custom_clauses": tenancy.custom_clauses or [],
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                # Same tenancy id always maps to the same document on the service side
                response = await client.put(
                    f"{self.base_url}/leases/{tenancy.id}", json=body
                )
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise ExternalServiceError("documents", str(e)) from e

        document_path = data.get("document_path") if isinstance(data, dict) else None
        if not document_path:
            raise ExternalServiceError("documents", "response did not include document_path")
        return document_path


class HttpPaymentGateway(IPaymentGateway):
    """Paystack-style transaction initialization"""

    def __init__(
        self,
        base_url: str,
        secret_key: str,
        currency: str,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.secret_key = secret_key
        self.currency = currency
        self.timeout = timeout
        self.transport = transport

    async def initialize(self, reference: str, amount: Decimal, tenancy: Tenancy) -> str:
        if not self.base_url or not self.secret_key:
            raise ExternalServiceError("payments", "payment gateway not configured")

        # Gateway amounts are in minor units
        amount_minor = int((Decimal(amount) * 100).to_integral_value())
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    f"{self.base_url}/transaction/initialize",
                    headers={"Authorization": f"Bearer {self.secret_key}"},
                    json={
                        "amount": amount_minor,
                        "currency": self.currency,
                        "reference": reference,
                        "metadata": {
                            "tenancy_id": str(tenancy.id),
                            "landlord_id": str(tenancy.landlord_id),
                            "tenant_id": str(tenancy.tenant_id),
                        },
                    },
                )
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise ExternalServiceError("payments", str(e)) from e

        if not isinstance(data, dict) or not data.get("status"):
            message = data.get("message") if isinstance(data, dict) else None
            raise ExternalServiceError("payments", message or "initialization failed")
        try:
            authorization_url = data["data"]["authorization_url"]
        except (KeyError, TypeError) as e:
            raise ExternalServiceError(
                "payments", "response did not include authorization_url"
            ) from e
        if not authorization_url:
            raise ExternalServiceError("payments", "response did not include authorization_url")
        return authorization_url


class HttpCreditCheckProvider(ICreditCheckProvider):
    """Queues credit checks; the provider answers on the credit-check webhook"""

    def __init__(self, base_url: str, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def request_check(self, application_id: UUID, tenant_id: UUID) -> None:
        if not self.base_url:
            raise ExternalServiceError("credit_check", "credit check URL not configured")

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/checks",
                    json={
                        "application_id": str(application_id),
                        "tenant_id": str(tenant_id),
                    },
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise ExternalServiceError("credit_check", str(e)) from e
