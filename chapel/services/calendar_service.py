# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Calendar — loads rotation state and hands it to the pure projector.
"""

from datetime import date, datetime
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from chapel.core.config import settings
from chapel.core.logging import get_logger
from chapel.metrics.prometheus import CALENDAR_PROJECTIONS
from chapel.models.domain import CalendarDay
from chapel.repositories.member_repository import MemberRepository
from chapel.repositories.tracking_repository import TrackingRepository
from chapel.services.calendar import project_calendar

logger = get_logger(__name__)


def local_today() -> date:
    return datetime.now(ZoneInfo(settings.CALENDAR_TIMEZONE)).date()


class CalendarService:
    """Projects future holders from the active roster and the current holder."""

    def __init__(
        self,
        member_repo: MemberRepository,
        tracking_repo: TrackingRepository,
        today: Callable[[], date] = local_today,
        locale: Optional[str] = None,
    ) -> None:
        self._members = member_repo
        self._tracking = tracking_repo
        self._today = today
        self._locale = locale or settings.CALENDAR_LOCALE

    def project(self, tenant_id: int, days: Optional[int] = None) -> list[CalendarDay]:
        effective_days = settings.DEFAULT_CALENDAR_DAYS if days is None else days
        members = self._members.list(tenant_id, active_only=True)
        if not members:
            return []

        record = self._tracking.current(tenant_id)
        current_member_id = record.current_member_id if record else None
        calendar = project_calendar(
            members,
            current_member_id,
            effective_days,
            self._today(),
            self._locale,
        )
        CALENDAR_PROJECTIONS.inc()
        logger.debug(
            "Calendar projected: days=%d, members=%d",
            effective_days, len(members),
            extra={"tenant_id": tenant_id},
        )
        return calendar
