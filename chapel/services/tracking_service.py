# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Chapel tracking — who holds the chapel now, and hand-offs.
Every hand-off closes the previous holder's interval in the history ledger.
"""

from datetime import datetime
from typing import Any, Callable, Optional

from chapel.core.config import settings
from chapel.core.logging import get_logger
from chapel.metrics.prometheus import HANDOFFS_TOTAL
from chapel.models.domain import HistoryEntry, LocationRecord
from chapel.repositories.history_repository import HistoryRepository
from chapel.repositories.member_repository import MemberRepository
from chapel.repositories.tracking_repository import TrackingRepository
from chapel.services.member_service import utcnow
from chapel.services.notification_client import NotificationClient

logger = get_logger(__name__)


class TrackingService:
    """Business logic for the current-holder slot and the history ledger."""

    def __init__(
        self,
        tracking_repo: TrackingRepository,
        history_repo: HistoryRepository,
        member_repo: MemberRepository,
        notification_client: NotificationClient,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._tracking = tracking_repo
        self._history = history_repo
        self._members = member_repo
        self._notifications = notification_client
        self._clock = clock

    # ── Queries ──

    def current(self, tenant_id: int) -> Optional[LocationRecord]:
        return self._tracking.current(tenant_id)

    def current_with_member(self, tenant_id: int) -> Optional[dict[str, Any]]:
        """Current record plus the holder's details (None if the holder was deleted)."""
        record = self._tracking.current(tenant_id)
        if record is None:
            return None
        member = None
        if record.current_member_id is not None:
            member = self._members.get(tenant_id, record.current_member_id)
        return {**record.model_dump(), "member": member.model_dump() if member else None}

    def list_history(self, tenant_id: int, limit: Optional[int] = None) -> list[HistoryEntry]:
        effective_limit = settings.DEFAULT_HISTORY_LIMIT if limit is None else limit
        return self._history.list(tenant_id, effective_limit)

    # ── Commands ──

    def transition(
        self, tenant_id: int, member_id: int, notes: Optional[str] = None
    ) -> LocationRecord:
        """
        Hand the chapel to *member_id*.
        The member is not checked against the roster; callers are trusted.
        Raises StorageUnavailable if the hand-off could not be written.
        """
        now = self._clock()
        record, archived_id = self._tracking.transition(tenant_id, member_id, notes, now)

        HANDOFFS_TOTAL.labels(archived=str(archived_id is not None).lower()).inc()
        logger.info(
            "Chapel handed off: member=%s, archived_entry=%s",
            member_id, archived_id,
            extra={"tenant_id": tenant_id},
        )
        self._announce_arrival(tenant_id, member_id)
        return record

    # ── Internal ──

    def _announce_arrival(self, tenant_id: int, member_id: int) -> None:
        if not self._notifications.enabled:
            return
        member = self._members.get(tenant_id, member_id)
        if member is None or not member.email:
            return
        self._notifications.send(
            recipient=member.email,
            message=f"The chapel is now with you, {member.name}.",
            kind="arrival",
        )
