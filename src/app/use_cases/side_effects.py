"""
Best-effort side calls

Notifications fire after the transition has been committed. A failing
collaborator is logged and reported back as a warning; it never turns a
successful transition into a failed one.
"""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from src.app.services.exceptions import ExternalServiceError
from src.app.services.notification_service import INotificationService

logger = logging.getLogger(__name__)


async def notify_best_effort(
    notifier: Optional[INotificationService],
    recipient_id: UUID,
    event_type: str,
    payload: Dict[str, Any],
    warnings: List[str],
) -> None:
    if notifier is None:
        return
    try:
        await notifier.notify(recipient_id, event_type, payload)
    except ExternalServiceError as e:
        logger.warning(f"Notification {event_type} to {recipient_id} failed: {e}")
        warnings.append(f"{event_type}_notification_failed")
