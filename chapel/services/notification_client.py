# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Notification client — inter-service communication.
Tells the notification-service when the chapel arrives at a new holder.
"""

from typing import Optional

import httpx

from chapel.core.config import settings
from chapel.core.logging import get_logger
from chapel.metrics.prometheus import NOTIFICATIONS_SENT

logger = get_logger(__name__)


class NotificationClient:
    """Fire-and-forget notification sender via notification-service."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self._base_url = settings.NOTIFICATION_SERVICE_URL if base_url is None else base_url
        self._timeout = timeout or settings.NOTIFICATION_TIMEOUT

    @property
    def enabled(self) -> bool:
        return bool(self._base_url)

    def send(
        self,
        recipient: str,
        message: str,
        kind: str = "arrival",
        channel: str = "email",
    ) -> bool:
        """Send a notification. Failures are logged but never raised."""
        if not self.enabled:
            return False
        try:
            with httpx.Client(timeout=self._timeout) as client:
                resp = client.post(
                    f"{self._base_url.rstrip('/')}/api/v1/notify",
                    json={
                        "incident_id": f"chapel-{kind}",
                        "channel": channel,
                        "recipient": recipient,
                        "message": message,
                        "metadata": {"type": kind},
                    },
                )
            if not resp.is_success:
                NOTIFICATIONS_SENT.labels(status="failed").inc()
                logger.warning(
                    "Notification rejected: recipient=%s, kind=%s, status=%d",
                    recipient,
                    kind,
                    resp.status_code,
                )
                return False
            NOTIFICATIONS_SENT.labels(status="sent").inc()
            logger.info(
                "Notification sent: recipient=%s, kind=%s, status=%d",
                recipient,
                kind,
                resp.status_code,
            )
            return True
        except httpx.HTTPError as exc:
            NOTIFICATIONS_SENT.labels(status="failed").inc()
            logger.warning("Notification failed: %s", exc)
            return False
