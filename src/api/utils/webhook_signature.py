"""
Webhook Signature Verification

Provider callbacks (payment gateway, credit check) sign the raw request body
with HMAC-SHA512 using a shared secret.
"""

import hashlib
import hmac
import logging

from fastapi import Request, status

from config import ApplicationConfig
from libs.result import Error
from src.api.error import ClientError

logger = logging.getLogger(__name__)


def compute_signature(secret: str, payload: bytes) -> str:
    return hmac.new(secret.encode("utf-8"), payload, hashlib.sha512).hexdigest()


def is_valid_signature(secret: str, payload: bytes, signature: str) -> bool:
    if not secret or not signature:
        return False
    return hmac.compare_digest(compute_signature(secret, payload), signature)


def signed_by(secret_name: str, header_name: str):
    """
    Build a dependency that rejects requests whose signature header does not
    match the body.

    Args:
        secret_name: ApplicationConfig attribute holding the shared secret
        header_name: Header carrying the hex digest

    Raises:
        ClientError: 401 if the signature is missing or invalid
    """

    async def verify(request: Request) -> bool:
        secret = getattr(ApplicationConfig, secret_name, "")
        signature = request.headers.get(header_name, "")
        body = await request.body()

        if not is_valid_signature(secret, body, signature):
            logger.warning(f"Rejected webhook {request.url.path}: bad {header_name}")
            raise ClientError(
                Error("INVALID_SIGNATURE", "Webhook signature verification failed"),
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        return True

    return verify
